"""
Edit Session Controller - single source of truth for inline cell editing.

A grid has at most one in-flight edit. The controller is a two-state machine:

    Idle  --start_edit-->  Editing(row_key, column_key, value)
    Editing --start_edit--> Editing (previous session discarded, last call wins)
    Editing --save_edit-->  Idle (commit callback invoked exactly once)
    Editing --cancel_edit-> Idle (nothing committed)

The controller never persists anything itself. Persistence is the job of the
commit callback handed to save_edit().
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from datagrid.commands import (
    CommitRequested,
    EditCancelled,
    EditReplaced,
    EditStarted,
    EditValueChanged,
)
from datagrid.types import RowKey

logger = logging.getLogger(__name__)

CommitCallback = Callable[[Any], None]


@dataclass(frozen=True)
class EditSession:
    """Immutable snapshot of the in-flight edit."""
    row_key: RowKey
    column_key: str
    value: Any = None


def editor_id(row_key: RowKey, column_key: str) -> str:
    """Deterministic DOM id for the editor of one cell."""
    raw = f'{row_key}-{column_key}'
    return 'cell-editor-' + re.sub(r'[^A-Za-z0-9_-]', '_', raw)


class EditSessionController:
    """Manages the single inline-edit session of one grid."""

    def __init__(self):
        self._session: Optional[EditSession] = None
        self._on_state_change: Optional[Callable[[Optional[EditSession]], None]] = None

    @property
    def editing(self) -> Optional[EditSession]:
        return self._session

    @property
    def edit_value(self) -> Any:
        return self._session.value if self._session else None

    def is_editing(self, row_key: RowKey, column_key: str) -> bool:
        return (
            self._session is not None
            and self._session.row_key == row_key
            and self._session.column_key == column_key
        )

    def set_on_state_change(self, callback: Callable[[Optional[EditSession]], None]):
        self._on_state_change = callback

    def start_edit(self, row_key: RowKey, column_key: str, initial_value: Any) -> list:
        commands = []
        previous = self._session
        if previous is not None:
            logger.debug(
                f'Discarding unsaved edit of {previous.row_key}/{previous.column_key}'
            )
            commands.append(EditReplaced(previous.row_key, previous.column_key, previous.value))

        self._session = EditSession(row_key, column_key, initial_value)
        commands.append(EditStarted(row_key, column_key, initial_value))
        self._notify_change()
        return commands

    def on_change(self, value: Any) -> list:
        if self._session is None:
            return []
        self._session = replace(self._session, value=value)
        self._notify_change()
        return [EditValueChanged(value)]

    def save_edit(self, commit: CommitCallback) -> list:
        """
        Commit the pending value and return to Idle.

        While Idle this is a no-op and ``commit`` is never called. If
        ``commit`` raises, the exception propagates and the session stays open.
        """
        session = self._session
        if session is None:
            return []

        commit(session.value)
        self._session = None
        logger.debug(f'Committed edit of {session.row_key}/{session.column_key}')
        self._notify_change()
        return [CommitRequested(session.row_key, session.column_key, session.value)]

    def cancel_edit(self) -> list:
        session = self._session
        self._session = None
        if session is None:
            return []
        self._notify_change()
        return [EditCancelled(session.row_key, session.column_key)]

    def _notify_change(self):
        if self._on_state_change:
            self._on_state_change(self._session)
