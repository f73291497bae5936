"""
Selection Controller - tracks which rows of a grid are selected.

The controller runs in one of two modes, fixed at construction:

- Uncontrolled(initial): the controller owns the selection and mutates it
  on every select_row / select_all call.
- Controlled(selection): the host owns the selection. Operations only
  *propose* a new selection (reported through the callbacks and the returned
  SelectionChanged command with applied=False); the host pushes its
  authoritative array back with sync(). Nothing is written behind the host's
  back, so the two can never drift apart.

Usage:
    controller = SelectionController([1, 2, 3])
    controller.select_all(True)
    controller.select_row(2, False)
    controller.selected_keys  # [1, 3]
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from datagrid.commands import RowSelectionRequested, SelectAllRequested, SelectionChanged
from datagrid.types import RowKey

logger = logging.getLogger(__name__)

RowSelectCallback = Callable[[RowKey, bool], None]
SelectAllCallback = Callable[[bool], None]


@dataclass(frozen=True)
class Controlled:
    """Selection owned by the host; the controller mirrors it read-only."""
    selection: Tuple[RowKey, ...] = ()


@dataclass(frozen=True)
class Uncontrolled:
    """Selection owned by the controller, seeded with ``initial``."""
    initial: Tuple[RowKey, ...] = ()


SelectionMode = Union[Controlled, Uncontrolled]


def _dedupe(keys: Optional[Iterable[RowKey]]) -> Dict[RowKey, None]:
    # dict keeps first-seen order and drops duplicates
    return dict.fromkeys(keys or ())


class SelectionController:
    """Tracks the effective selection set of one grid instance."""

    def __init__(
        self,
        all_row_keys: Iterable[RowKey] = (),
        mode: Optional[SelectionMode] = None,
        on_select_row: Optional[RowSelectCallback] = None,
        on_select_all: Optional[SelectAllCallback] = None,
    ):
        self._mode = mode if mode is not None else Uncontrolled()
        self._all_row_keys = _dedupe(all_row_keys)
        if isinstance(self._mode, Controlled):
            self._selected = _dedupe(self._mode.selection)
        else:
            self._selected = _dedupe(self._mode.initial)
        self._on_select_row = on_select_row
        self._on_select_all = on_select_all

    @property
    def controlled(self) -> bool:
        return isinstance(self._mode, Controlled)

    @property
    def selected_keys(self) -> List[RowKey]:
        """Current effective selection, in the order keys were first selected."""
        return list(self._selected)

    @property
    def all_row_keys(self) -> List[RowKey]:
        return list(self._all_row_keys)

    @property
    def all_selected(self) -> bool:
        """True when the grid has rows and every one of them is selected."""
        if not self._all_row_keys:
            return False
        return all(key in self._selected for key in self._all_row_keys)

    def is_selected(self, key: RowKey) -> bool:
        return key in self._selected

    def set_row_keys(self, keys: Iterable[RowKey]) -> None:
        """
        Replace the list of all row keys (used by select_all).

        In uncontrolled mode keys that left the row set are dropped from the
        selection. A controlled selection is left to the host.
        """
        self._all_row_keys = _dedupe(keys)
        if not self.controlled:
            self._selected = {k: None for k in self._selected if k in self._all_row_keys}

    def sync(self, selection: Iterable[RowKey]) -> List[SelectionChanged]:
        """Mirror the host's authoritative selection (controlled mode only)."""
        if not self.controlled:
            logger.warning('sync() called on an uncontrolled selection; ignoring')
            return []
        self._selected = _dedupe(selection)
        return [SelectionChanged(tuple(self._selected))]

    def select_row(self, key: RowKey, selected: bool) -> list:
        """
        Add or remove one row.

        Adding a present key or removing an absent one leaves the set
        unchanged, but the per-row callback is invoked regardless.
        """
        proposed = dict(self._selected)
        if selected:
            proposed.setdefault(key, None)
        else:
            proposed.pop(key, None)

        commands = [RowSelectionRequested(key, selected), self._apply(proposed)]
        if self._on_select_row:
            self._on_select_row(key, selected)
        return commands

    def toggle_row(self, key: RowKey) -> list:
        return self.select_row(key, not self.is_selected(key))

    def select_all(self, selected: bool) -> list:
        """Select every known row, or clear the selection."""
        proposed = dict(self._all_row_keys) if selected else {}
        commands = [SelectAllRequested(selected), self._apply(proposed)]
        if self._on_select_all:
            self._on_select_all(selected)
        return commands

    def _apply(self, proposed: Dict[RowKey, None]) -> SelectionChanged:
        if self.controlled:
            logger.debug(f'Proposing selection {list(proposed)} to host')
            return SelectionChanged(tuple(proposed), applied=False)
        self._selected = proposed
        logger.debug(f'Selection is now {list(proposed)}')
        return SelectionChanged(tuple(proposed))

    def __repr__(self) -> str:
        mode = 'controlled' if self.controlled else 'uncontrolled'
        return (
            f'SelectionController({mode}, selected={len(self._selected)}, '
            f'rows={len(self._all_row_keys)})'
        )
