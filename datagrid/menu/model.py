"""
Context menu model - options, host-owned menu state and the overlay logic.

The overlay itself keeps no state. The host holds a ContextMenuState, opens
it at the pointer position and replaces it with ContextMenuState.closed()
from the on_close callback. A closed state is always blank, so nothing from
one opening leaks into the next.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from datagrid.commands import MenuActionInvoked, MenuClosed
from datagrid.types import Position

logger = logging.getLogger(__name__)


def _noop():
    pass


@dataclass(frozen=True)
class MenuOption:
    label: str
    action: Callable[[], None] = _noop
    disabled: bool = False
    divider: bool = False
    shortcut: Optional[str] = None
    danger: bool = False

    @property
    def actionable(self) -> bool:
        return not (self.disabled or self.divider)


@dataclass(frozen=True)
class ContextMenuState:
    options: Tuple[MenuOption, ...] = ()
    position: Position = Position()
    open: bool = False

    @classmethod
    def opened(cls, options: Iterable[MenuOption], position: Position) -> 'ContextMenuState':
        return cls(options=tuple(options), position=position, open=True)

    @classmethod
    def closed(cls) -> 'ContextMenuState':
        return cls()


def position_from_event(event: Any) -> Position:
    """
    Extract the pointer position from a mouse event payload.

    Accepts NiceGUI event arguments (with .args), a dict carrying
    clientX/clientY (or x/y), or an (x, y) pair. Anything else maps to (0, 0).
    """
    raw = event.args if hasattr(event, 'args') else event

    if isinstance(raw, dict):
        x = raw.get('clientX', raw.get('x', 0))
        y = raw.get('clientY', raw.get('y', 0))
    elif isinstance(raw, (list, tuple)) and len(raw) >= 2:
        x, y = raw[0], raw[1]
    else:
        return Position()
    return Position(x or 0, y or 0)


class ContextMenuOverlay:
    """
    Stateless adapter over host-owned menu inputs.

    Activating an option runs its action and then always calls on_close,
    even when the action raises.
    Leaving the overlay with the pointer calls on_close without any action.
    No viewport clamping is done: the host supplies the final position.
    """

    def __init__(
        self,
        options: Iterable[MenuOption],
        position: Position,
        on_close: Callable[[], None],
    ):
        self.options = tuple(options)
        self.position = position
        self._on_close = on_close

    @classmethod
    def from_state(cls, state: ContextMenuState, on_close: Callable[[], None]) -> 'ContextMenuOverlay':
        return cls(state.options, state.position, on_close)

    @property
    def style(self) -> str:
        return (
            f'position: fixed; left: {self.position.x}px; top: {self.position.y}px; '
            'z-index: 9999; min-width: 200px'
        )

    def activate(self, index: int) -> list:
        """Run option ``index`` and close. Non-actionable or unknown options do nothing."""
        if not 0 <= index < len(self.options):
            return []
        option = self.options[index]
        if not option.actionable:
            return []

        logger.debug(f"Context menu action '{option.label}'")
        try:
            option.action()
        finally:
            self._on_close()
        return [MenuActionInvoked(index, option.label), MenuClosed('activated', index)]

    def pointer_exit(self) -> list:
        return self.dismiss('pointer_exit')

    def dismiss(self, reason: str) -> list:
        self._on_close()
        return [MenuClosed(reason)]
