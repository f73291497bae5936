"""
DataGrid - NiceGUI widget for a GridHost.

All state and interaction logic lives in datagrid.host.GridHost; this class
only draws it and binds browser events back to the host:

- checkbox column  (when selectable)
- data columns     (visible and allowed by ``access``)
- detail toggle    (when render_detail is given)

Usage:
    grid = DataGrid(columns, rows, render_detail=lambda row: row['notes'])
    grid.render()
"""

import logging

from nicegui import ui

from datagrid.detail_row import render_detail_row
from datagrid.edit.editors import render_cell_editor
from datagrid.host import GridHost
from datagrid.menu import ContextMenuOverlay
from datagrid.menu.overlay import render_context_menu

logger = logging.getLogger(__name__)


class DataGrid(GridHost):
    """A table with row selection, inline editing, context menu and detail rows."""

    def render(self):
        with ui.element('div').classes('overflow-x-auto w-full'):
            self._render_table()
            self._render_menu()

    def refresh(self):
        self._render_table.refresh()

    def refresh_menu(self):
        self._render_menu.refresh()

    def _render_cell(self, column, row, value, display):
        if column.render is None:
            ui.label(display)
            return
        result = column.render(value, row)
        if result is not None:
            ui.label(str(result))

    @ui.refreshable
    def _render_table(self):
        state = self.view_state()
        header = state['header']
        columns_by_key = {c.key: c for c in self.columns}

        with ui.element('table').classes('min-w-full border border-gray-200 rounded-lg text-sm'):
            with ui.element('thead'):
                with ui.element('tr'):
                    if header['selectable']:
                        with ui.element('th').classes(header['classes']):
                            ui.checkbox(
                                value=header['all_selected'],
                                on_change=lambda e: self.select_all(e.value),
                            ).props('dense')
                    for col in header['columns']:
                        th = ui.element('th').classes(col['classes'])
                        if col['width']:
                            th.style(f"width: {col['width']}")
                        with th:
                            ui.label(col['header'])
                    if header['expandable']:
                        ui.element('th').classes(header['classes'])

            with ui.element('tbody'):
                if not state['rows']:
                    with ui.element('tr'):
                        with ui.element('td').props(f"colspan={state['detail_col_span']}").classes(
                            'text-center text-gray-400 py-8'
                        ):
                            ui.label(self.empty_message)

                for view_row in state['rows']:
                    key = view_row['key']
                    row = self.find_row(key)
                    tr = ui.element('tr').classes(view_row['classes'])
                    tr.on('contextmenu.prevent', lambda e, k=key: self.open_menu(k, e), ['clientX', 'clientY'])
                    tr.on('click', lambda _, k=key: self.click_row(k))
                    with tr:
                        if header['selectable']:
                            with ui.element('td').classes('px-2 py-2').on('click.stop', lambda _: None):
                                ui.checkbox(
                                    value=view_row['selected'],
                                    on_change=lambda e, k=key: self.select_row(k, e.value),
                                ).props('dense')
                        for cell in view_row['cells']:
                            column = columns_by_key[cell['column_key']]
                            td = ui.element('td').classes(cell['classes'])
                            with td:
                                if cell['editing']:
                                    render_cell_editor(key, column, self.edit.edit_value, self.handlers)
                                else:
                                    self._render_cell(column, row, cell['value'], cell['display'])
                            if cell['editable'] and not cell['editing']:
                                td.on(
                                    'dblclick',
                                    lambda _, k=key, c=cell['column_key'], v=cell['value']:
                                        self.handlers['start'](k, c, v),
                                )
                        if header['expandable']:
                            with ui.element('td').classes('px-2 py-2').on('click.stop', lambda _: None):
                                ui.button(
                                    icon='expand_less' if view_row['expanded'] else 'expand_more',
                                    on_click=lambda _, k=key: self.toggle_detail(k),
                                ).props('flat dense round size=sm')

                    if header['expandable'] and view_row['expanded']:
                        render_detail_row(state['detail_col_span'], self.detail_content(key), self.theme)

    @ui.refreshable
    def _render_menu(self):
        if not self.menu_state.open:
            return
        render_context_menu(ContextMenuOverlay.from_state(self.menu_state, self.close_menu))
