"""
Detail Row Adapter - full-width supplementary content under a data row.

Pure rendering: the host decides when a detail row is visible and hands in
the span, the content and the theme. Content is either a string or a
callable that builds NiceGUI elements inside the cell.
"""

from nicegui import ui

from datagrid.types import DEFAULT_THEME, DetailContent, Theme
from datagrid.ui_state import detail_row_classes


def render_detail_row(col_span: int, content: DetailContent, theme: Theme = DEFAULT_THEME):
    """Render a <tr> whose single cell spans ``col_span`` columns."""
    row = ui.element('tr').classes(detail_row_classes(theme))
    with row:
        with ui.element('td').props(f'colspan={max(col_span, 1)}').classes('p-4 border-b border-gray-200'):
            if callable(content):
                content()
            else:
                ui.label(str(content)).classes('text-sm text-gray-600 whitespace-pre-wrap')
    return row
