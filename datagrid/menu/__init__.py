"""
Right-click context menu for grid rows.

- MenuOption / ContextMenuState: host-owned menu inputs
- ContextMenuOverlay: activation and dismissal logic
- render_context_menu: NiceGUI rendering (see overlay.py)
"""

from datagrid.menu.model import (
    ContextMenuOverlay,
    ContextMenuState,
    MenuOption,
    position_from_event,
)

__all__ = [
    'ContextMenuOverlay',
    'ContextMenuState',
    'MenuOption',
    'position_from_event',
]
