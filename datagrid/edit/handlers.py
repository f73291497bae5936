"""
Edit Handlers - event handlers wiring inline editors to the edit session.

Keeps keyboard and focus handling out of the grid so that the grid only
binds the returned functions to its editor widgets:

- Enter saves the pending value
- Escape cancels the edit
- losing focus saves (a no-op if the edit was already saved or cancelled)
"""

from typing import Any, Callable, Dict, Optional

from datagrid.columns import Column, coerce_value
from datagrid.edit.controller import EditSessionController
from datagrid.types import RowKey


SAVE_KEYS = frozenset(['Enter'])
CANCEL_KEYS = frozenset(['Escape'])


def key_action(key: Optional[str]) -> Optional[str]:
    """Map a keyboard key name to 'save', 'cancel' or None."""
    if key in SAVE_KEYS:
        return 'save'
    if key in CANCEL_KEYS:
        return 'cancel'
    return None


def _event_key(event: Any) -> Optional[str]:
    raw = event.args if hasattr(event, 'args') else event
    if isinstance(raw, dict):
        return raw.get('key')
    if isinstance(raw, str):
        return raw
    return None


def _event_value(event: Any) -> Any:
    return event.value if hasattr(event, 'value') else event


def setup_edit_handlers(
    edit_controller: EditSessionController,
    columns_by_key: Dict[str, Column],
    commit_cell: Callable[[RowKey, str, Any], None],
    refresh: Optional[Callable[[], None]] = None,
) -> Dict[str, Callable]:
    """
    Build the editor event handlers for one grid.

    Args:
        edit_controller: The grid's EditSessionController
        columns_by_key: Column definitions, used to coerce editor input
        commit_cell: Persists a value: fn(row_key, column_key, value)
        refresh: Re-renders the grid after a transition

    Returns:
        Dict with handler functions for binding to UI events
    """

    def _refresh():
        if refresh:
            refresh()

    def start(row_key: RowKey, column_key: str, value: Any):
        column = columns_by_key.get(column_key)
        if column is None or not column.is_editable:
            return []
        commands = edit_controller.start_edit(row_key, column_key, value)
        _refresh()
        return commands

    def change(event):
        return edit_controller.on_change(_event_value(event))

    def save(_event=None):
        session = edit_controller.editing
        if session is None:
            return []
        column = columns_by_key.get(session.column_key)

        def commit(value):
            if column is not None:
                value = coerce_value(column, value)
            commit_cell(session.row_key, session.column_key, value)

        commands = edit_controller.save_edit(commit)
        _refresh()
        return commands

    def cancel(_event=None):
        commands = edit_controller.cancel_edit()
        if commands:
            _refresh()
        return commands

    def keydown(event):
        action = key_action(_event_key(event))
        if action == 'save':
            return save()
        if action == 'cancel':
            return cancel()
        return []

    return {
        'start': start,
        'change': change,
        'save': save,
        'cancel': cancel,
        'keydown': keydown,
        'blur': save,
    }
