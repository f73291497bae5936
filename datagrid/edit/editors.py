"""
Inline cell editors.

Renders the editor widget for the cell currently being edited. The widget
kind follows the column's editor type (text, number, select).
"""

from typing import Any, Callable, Dict

from nicegui import ui

from datagrid.columns import Column
from datagrid.edit.controller import editor_id
from datagrid.types import RowKey


def render_cell_editor(
    row_key: RowKey,
    column: Column,
    value: Any,
    handlers: Dict[str, Callable],
):
    """
    Render the editor for one cell and bind it to the edit handlers.

    The element is marked with a deterministic id derived from the row and
    column keys so tests and scripts can find it.
    """
    if column.editor == 'number':
        editor = ui.number(value=value)
    elif column.editor == 'select':
        editor = ui.select(options=column.option_map(), value=value)
    else:
        editor = ui.input(value='' if value is None else str(value))

    editor.props('dense outlined autofocus').classes('w-full')
    editor.mark(editor_id(row_key, column.key))
    editor.on_value_change(handlers['change'])
    editor.on('keydown', handlers['keydown'])
    editor.on('blur', handlers['blur'])
    return editor
