"""
GridHost - widget-free state of one data grid.

Holds the row data and composes the independent controllers; the
controllers never talk to each other directly:

- checkbox clicks     -> SelectionController
- double-click a cell -> EditSessionController (via edit handlers)
- right-click a row   -> ContextMenuState
- detail toggle       -> expanded row set

The NiceGUI widget (datagrid.grid.DataGrid) subclasses this and overrides
refresh() / refresh_menu() to redraw; everything else is plain Python.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from datagrid.columns import Column
from datagrid.edit import EditSessionController, setup_edit_handlers
from datagrid.menu import ContextMenuState, MenuOption, position_from_event
from datagrid.selection import SelectionController, SelectionMode
from datagrid.types import DEFAULT_THEME, DetailContent, RowKey, Theme
from datagrid.ui_state import build_grid_state, visible_columns

logger = logging.getLogger(__name__)

RowData = Dict[str, Any]
ColumnAccess = Callable[[Column, Any], bool]


class GridHost:
    """Row data, selection, edit session, context menu and expanded rows."""

    def __init__(
        self,
        columns: List[Column],
        rows: Iterable[RowData],
        row_key: str = 'id',
        selection_mode: Optional[SelectionMode] = None,
        on_select_row: Optional[Callable[[RowKey, bool], None]] = None,
        on_select_all: Optional[Callable[[bool], None]] = None,
        on_cell_commit: Optional[Callable[[RowKey, str, Any], None]] = None,
        on_row_click: Optional[Callable[[RowData], None]] = None,
        row_menu: Optional[Callable[[RowData], List[MenuOption]]] = None,
        render_detail: Optional[Callable[[RowData], DetailContent]] = None,
        selectable: Optional[bool] = None,
        access: Optional[ColumnAccess] = None,
        user: Any = None,
        theme: Theme = DEFAULT_THEME,
        empty_message: str = 'No data available',
    ):
        self.columns = list(columns)
        self.rows = list(rows)
        self.row_key = row_key
        self.theme = theme
        self.empty_message = empty_message
        self.access = access
        self.user = user
        if selectable is None:
            # checkbox column only when someone cares about the selection
            selectable = any(x is not None for x in (selection_mode, on_select_row, on_select_all))
        self.selectable = selectable
        self._on_cell_commit = on_cell_commit
        self._on_row_click = on_row_click
        self._row_menu = row_menu
        self._render_detail = render_detail

        self.selection = SelectionController(
            self._row_keys(), selection_mode,
            on_select_row=on_select_row, on_select_all=on_select_all,
        )
        self.edit = EditSessionController()
        self.menu_state = ContextMenuState.closed()
        self.expanded: set = set()

        self.handlers = setup_edit_handlers(
            self.edit,
            {c.key: c for c in self.columns},
            self.commit_cell,
            refresh=self.refresh,
        )

    # ------------------------------------------------------------------ data

    @property
    def expandable(self) -> bool:
        return self._render_detail is not None

    @property
    def visible_columns(self) -> List[Column]:
        return visible_columns(self.columns, self.access, self.user)

    def _row_keys(self) -> List[RowKey]:
        return [row.get(self.row_key) for row in self.rows]

    def find_row(self, key: RowKey) -> Optional[RowData]:
        for row in self.rows:
            if row.get(self.row_key) == key:
                return row
        return None

    def set_rows(self, rows: Iterable[RowData]) -> None:
        """Replace the row set. Open edits and menus are dropped."""
        self.rows = list(rows)
        self.selection.set_row_keys(self._row_keys())
        self.edit.cancel_edit()
        self.menu_state = ContextMenuState.closed()
        self.expanded &= set(self._row_keys())
        self.refresh_menu()
        self.refresh()

    def commit_cell(self, row_key: RowKey, column_key: str, value: Any) -> None:
        row = self.find_row(row_key)
        if row is None:
            logger.warning(f"Commit for unknown row {row_key!r} ignored")
            return
        row[column_key] = value
        logger.info(f"Updated {column_key} of row {row_key!r}")
        if self._on_cell_commit:
            self._on_cell_commit(row_key, column_key, value)

    def view_state(self) -> Dict[str, Any]:
        editing = self.edit.editing
        return build_grid_state(
            self.rows,
            self.visible_columns,
            row_key=self.row_key,
            selected=self.selection.selected_keys,
            editing=(editing.row_key, editing.column_key) if editing else None,
            expanded=self.expanded,
            theme=self.theme,
            selectable=self.selectable,
            expandable=self.expandable,
            all_selected=self.selection.all_selected,
        )

    def detail_content(self, key: RowKey) -> Optional[DetailContent]:
        row = self.find_row(key)
        if row is None or not self.expandable:
            return None
        return self._render_detail(row)

    # ----------------------------------------------------------- interactions

    def click_row(self, key: RowKey) -> None:
        row = self.find_row(key)
        if row is not None and self._on_row_click:
            self._on_row_click(row)

    def select_row(self, key: RowKey, selected: bool) -> list:
        commands = self.selection.select_row(key, selected)
        self.refresh()
        return commands

    def select_all(self, selected: bool) -> list:
        commands = self.selection.select_all(selected)
        self.refresh()
        return commands

    def toggle_detail(self, key: RowKey) -> None:
        if key in self.expanded:
            self.expanded.discard(key)
        else:
            self.expanded.add(key)
        self.refresh()

    def default_menu(self, row: RowData) -> List[MenuOption]:
        key = row.get(self.row_key)
        options = []
        if self.selectable:
            selected = self.selection.is_selected(key)
            options.append(MenuOption(
                'Deselect row' if selected else 'Select row',
                lambda: self.select_row(key, not selected),
            ))
        if self.expandable:
            options.append(MenuOption(
                'Hide details' if key in self.expanded else 'Show details',
                lambda: self.toggle_detail(key),
            ))
        return options

    def open_menu(self, key: RowKey, event: Any) -> None:
        row = self.find_row(key)
        if row is None:
            return
        options = self._row_menu(row) if self._row_menu else self.default_menu(row)
        self.menu_state = ContextMenuState.opened(options, position_from_event(event))
        self.refresh_menu()

    def close_menu(self) -> None:
        self.menu_state = ContextMenuState.closed()
        self.refresh_menu()

    # ---------------------------------------------------------------- redraw

    def refresh(self) -> None:
        """Redraw the table. No-op without a widget."""

    def refresh_menu(self) -> None:
        """Redraw the context menu. No-op without a widget."""
