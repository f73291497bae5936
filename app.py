"""
Demo NiceGUI application for the data grid.

Serves a single page with a sample team roster: select rows with the
checkboxes, double-click a cell to edit it (Enter saves, Escape cancels),
right-click a row for its context menu, and expand rows for details.

Column definitions come from DATAGRID_COLUMNS_FILE (JSON or YAML) when set,
otherwise from demo_columns.yaml next to this file.
"""

import logging
import sys

from dotenv import load_dotenv
from nicegui import ui

load_dotenv()

from datagrid.columns import Column, load_columns
from datagrid.config import get_settings
from datagrid.grid import DataGrid
from datagrid.menu import MenuOption
from datagrid.paths import resolve_path

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings['log_level'], logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

FALLBACK_COLUMNS = [
    Column('name', 'Name', editor='text'),
    Column('age', 'Age', editor='number'),
    Column('role', 'Role', editor='select', options=[
        {'label': 'Admin', 'value': 'admin'},
        {'label': 'User', 'value': 'user'},
    ]),
]

SAMPLE_ROWS = [
    {'id': 1, 'name': 'Alice', 'age': 34, 'role': 'admin', 'notes': 'Owns the billing service.'},
    {'id': 2, 'name': 'Bob', 'age': 28, 'role': 'user', 'notes': 'On call this week.'},
    {'id': 3, 'name': 'Carol', 'age': 41, 'role': 'user', 'notes': ''},
]


def load_demo_columns():
    path = resolve_path(settings['columns_file'] or 'demo_columns.yaml')
    if not path.exists():
        logger.info(f"No column file at {path}, using built-in columns")
        return FALLBACK_COLUMNS
    columns, errors = load_columns(path)
    if errors or not columns:
        logger.warning(f"Column file {path} has {len(errors)} problem(s); using built-in columns")
        return FALLBACK_COLUMNS
    return columns


@ui.page('/')
def index():
    rows = [dict(row) for row in SAMPLE_ROWS]
    status = ui.label('').classes('text-xs text-gray-500')

    def on_commit(row_key, column_key, value):
        status.set_text(f'Saved {column_key} = {value!r} for row {row_key}')

    def on_select_row(row_key, selected):
        status.set_text(f"Row {row_key} {'selected' if selected else 'deselected'}")

    def row_menu(row):
        def delete():
            grid.set_rows([r for r in grid.rows if r['id'] != row['id']])
            ui.notify(f"Deleted {row['name']}", position='bottom', timeout=1000)

        return [
            MenuOption('Copy name', lambda: ui.clipboard.write(str(row['name'])), shortcut='Ctrl+C'),
            MenuOption('Show details', lambda: grid.toggle_detail(row['id'])),
            MenuOption('', divider=True),
            MenuOption('Delete row', delete, danger=True),
        ]

    ui.label(settings['title']).classes('text-2xl font-bold')
    grid = DataGrid(
        load_demo_columns(),
        rows,
        on_select_row=on_select_row,
        on_cell_commit=on_commit,
        on_row_click=lambda row: status.set_text(f"Clicked {row['name']}"),
        row_menu=row_menu,
        render_detail=lambda row: row.get('notes') or 'No notes.',
        theme=settings['theme'],
    )
    grid.render()


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title=settings['title'],
        port=settings['port'],
        reload=not getattr(sys, 'frozen', False),
    )
