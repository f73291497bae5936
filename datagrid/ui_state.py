"""
View-model helpers for the data grid - NiceGUI-free state generation.

Turns rows, columns and the controllers' state into plain dicts the grid
renders from. Keeping this separate from the widgets means the styling and
flag logic can be tested without a browser.

Public functions:
- row_classes(index, theme) -> str
- cell_classes(theme, editing, editable, extra) -> str
- header_classes(theme) -> str
- detail_row_classes(theme) -> str
- detail_col_span(column_count, selectable, expandable) -> int
- visible_columns(columns, access, user) -> list of Column
- build_grid_state(...) -> dict with header and row view models
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from datagrid.columns import Column
from datagrid.types import DEFAULT_THEME, RowKey

_ROW_BG = {
    'light': ('bg-white', 'bg-gray-50'),
    'dark': ('bg-gray-900', 'bg-gray-800'),
}
_CELL_TONE = {
    'light': 'bg-white text-gray-800',
    'dark': 'bg-gray-900 text-gray-100',
}
_HEADER_TONE = {
    'light': 'bg-gray-50 border-gray-200 text-gray-700',
    'dark': 'bg-gray-800 border-gray-700 text-gray-200',
}
_DETAIL_BG = {
    'light': 'bg-blue-50',
    'dark': 'bg-gray-900',
}

# Placeholder shown for empty cells
EMPTY_CELL = '—'


def _theme(theme: Optional[str]) -> str:
    return theme if theme in _ROW_BG else DEFAULT_THEME


def row_classes(index: int, theme: str = DEFAULT_THEME) -> str:
    """Zebra-striped row background plus hover/focus styling."""
    even, odd = _ROW_BG[_theme(theme)]
    bg = even if index % 2 == 0 else odd
    return f'{bg} hover:bg-blue-50 transition-colors cursor-pointer'


def cell_classes(
    theme: str = DEFAULT_THEME,
    editing: bool = False,
    editable: bool = False,
    extra: str = '',
) -> str:
    parts = ['px-4 py-2 text-sm border-b border-gray-100', _CELL_TONE[_theme(theme)]]
    if not editing:
        parts.append('whitespace-nowrap')
    if editable and not editing:
        parts.append('cursor-text')
    if extra:
        parts.append(extra)
    return ' '.join(parts)


def header_classes(theme: str = DEFAULT_THEME) -> str:
    return f'px-4 py-2 text-left text-xs font-semibold uppercase border-b select-none {_HEADER_TONE[_theme(theme)]}'


def detail_row_classes(theme: str = DEFAULT_THEME) -> str:
    return _DETAIL_BG[_theme(theme)]


def detail_col_span(column_count: int, selectable: bool = False, expandable: bool = False) -> int:
    """Span of a detail row: data columns plus the checkbox and toggle columns."""
    return max(column_count, 0) + (1 if selectable else 0) + (1 if expandable else 0)


def display_value(value: Any) -> str:
    if value is None or value == '':
        return EMPTY_CELL
    return str(value)


def visible_columns(
    columns: Iterable[Column],
    access: Optional[Callable[[Column, Any], bool]] = None,
    user: Any = None,
) -> List[Column]:
    """Columns to display: visible ones the user may access, in order."""
    return [
        c for c in columns
        if c.visible and (access is None or access(c, user))
    ]


def build_grid_state(
    rows: List[Dict[str, Any]],
    columns: List[Column],
    row_key: str = 'id',
    selected: Iterable[RowKey] = (),
    editing: Optional[tuple] = None,
    expanded: Iterable[RowKey] = (),
    theme: str = DEFAULT_THEME,
    selectable: bool = True,
    expandable: bool = False,
    all_selected: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Build the grid view model.

    Args:
        rows: Row dicts; each must carry ``row_key``
        columns: Column definitions in display order (see visible_columns)
        selected: Currently selected row keys
        editing: (row_key, column_key) of the open editor, or None
        expanded: Row keys whose detail row is visible
        all_selected: Header checkbox state; derived from ``selected`` if None

    Returns:
        Dict with keys:
          - header: {classes, all_selected, selectable, expandable, columns: [...]}
          - rows: [{key, classes, selected, expanded, cells: [...]}]
          - detail_col_span, detail_classes
    """
    theme = _theme(theme)
    selected_set = set(selected)
    expanded_set = set(expanded)
    if all_selected is None:
        keys = [row.get(row_key) for row in rows]
        all_selected = bool(keys) and all(k in selected_set for k in keys)

    view_rows = []
    for index, row in enumerate(rows):
        key = row.get(row_key)
        cells = []
        for column in columns:
            is_editing = editing is not None and editing == (key, column.key)
            cells.append({
                'column_key': column.key,
                'value': row.get(column.key),
                'display': display_value(row.get(column.key)),
                'custom': column.render is not None,
                'editing': is_editing,
                'editable': column.is_editable,
                'classes': cell_classes(theme, is_editing, column.is_editable, column.class_name),
            })
        view_rows.append({
            'key': key,
            'index': index,
            'classes': row_classes(index, theme),
            'selected': key in selected_set,
            'expanded': key in expanded_set,
            'cells': cells,
        })

    base_header = header_classes(theme)
    return {
        'header': {
            'classes': base_header,
            'all_selected': all_selected,
            'selectable': selectable,
            'expandable': expandable,
            'columns': [
                {
                    'key': c.key,
                    'header': c.header,
                    'width': c.width,
                    'classes': f'{base_header} {c.header_class_name}'.strip(),
                }
                for c in columns
            ],
        },
        'rows': view_rows,
        'detail_col_span': detail_col_span(len(columns), selectable, expandable),
        'detail_classes': detail_row_classes(theme),
    }
