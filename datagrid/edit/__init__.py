"""
Inline editing for the data grid.

This package provides double-click cell editing:
- EditSessionController: the single in-flight edit session
- setup_edit_handlers: keyboard/focus handlers for the inline editors
- render_cell_editor: NiceGUI editor widgets (see editors.py)

Usage:
    from datagrid.edit import EditSessionController, setup_edit_handlers
    from datagrid.edit.editors import render_cell_editor
"""

from datagrid.edit.controller import EditSession, EditSessionController, editor_id
from datagrid.edit.handlers import key_action, setup_edit_handlers

__all__ = [
    'EditSession',
    'EditSessionController',
    'editor_id',
    'key_action',
    'setup_edit_handlers',
]
