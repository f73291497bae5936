from datagrid.columns import Column
from datagrid import ui_state


COLUMNS = [
    Column('name', 'Name', editor='text'),
    Column('age', 'Age', editor='number', class_name='text-right'),
    Column('id', 'ID'),
]

ROWS = [
    {'id': 1, 'name': 'Alice', 'age': 34},
    {'id': 2, 'name': 'Bob', 'age': None},
]


def test_zebra_striping_per_theme():
    assert 'bg-white' in ui_state.row_classes(0, 'light')
    assert 'bg-gray-50' in ui_state.row_classes(1, 'light')
    assert 'bg-gray-900' in ui_state.row_classes(0, 'dark')
    assert 'bg-gray-800' in ui_state.row_classes(1, 'dark')


def test_unknown_theme_falls_back_to_light():
    assert ui_state.row_classes(0, 'neon') == ui_state.row_classes(0, 'light')


def test_detail_row_background():
    assert ui_state.detail_row_classes() == 'bg-blue-50'
    assert ui_state.detail_row_classes('dark') == 'bg-gray-900'


def test_detail_col_span_counts_extra_columns():
    assert ui_state.detail_col_span(3) == 3
    assert ui_state.detail_col_span(3, selectable=True) == 4
    assert ui_state.detail_col_span(3, selectable=True, expandable=True) == 5


def test_display_value_placeholder():
    assert ui_state.display_value(None) == ui_state.EMPTY_CELL
    assert ui_state.display_value('') == ui_state.EMPTY_CELL
    assert ui_state.display_value(0) == '0'


def test_build_grid_state_flags():
    state = ui_state.build_grid_state(
        ROWS, COLUMNS,
        selected=[2],
        editing=(1, 'name'),
        expanded=[1],
        expandable=True,
    )

    first, second = state['rows']
    assert first['key'] == 1 and not first['selected'] and first['expanded']
    assert second['selected'] and not second['expanded']

    name_cell = first['cells'][0]
    assert name_cell['editing'] and name_cell['editable']
    assert 'whitespace-nowrap' not in name_cell['classes']

    age_cell = second['cells'][1]
    assert age_cell['display'] == ui_state.EMPTY_CELL
    assert 'text-right' in age_cell['classes']

    id_cell = first['cells'][2]
    assert not id_cell['editable']

    assert state['detail_col_span'] == 5
    assert state['header']['all_selected'] is False
    assert [c['header'] for c in state['header']['columns']] == ['Name', 'Age', 'ID']


def test_header_all_selected():
    state = ui_state.build_grid_state(ROWS, COLUMNS, selected=[1, 2])
    assert state['header']['all_selected'] is True

    empty = ui_state.build_grid_state([], COLUMNS, selected=[])
    assert empty['header']['all_selected'] is False
    assert empty['rows'] == []


def test_header_class_name_is_appended():
    columns = [Column('name', 'Name', header_class_name='w-48'), Column('id', 'ID')]
    header = ui_state.build_grid_state(ROWS, columns)['header']
    assert header['columns'][0]['classes'] == f"{header['classes']} w-48"
    assert header['columns'][1]['classes'] == header['classes']


def test_passed_all_selected_wins():
    header = ui_state.build_grid_state(ROWS, COLUMNS, selected=[1, 2], all_selected=False)['header']
    assert header['all_selected'] is False


def test_custom_renderer_flag():
    columns = [Column('name', 'Name', render=lambda value, row: value.upper())]
    cell = ui_state.build_grid_state(ROWS, columns)['rows'][0]['cells'][0]
    assert cell['custom'] is True


def test_visible_columns_filters_hidden_and_denied():
    columns = [
        Column('name', 'Name'),
        Column('salary', 'Salary'),
        Column('secret', 'Secret', visible=False),
    ]

    def access(column, user):
        return column.key != 'salary' or user == 'admin'

    assert [c.key for c in ui_state.visible_columns(columns)] == ['name', 'salary']
    assert [c.key for c in ui_state.visible_columns(columns, access, 'guest')] == ['name']
    assert [c.key for c in ui_state.visible_columns(columns, access, 'admin')] == ['name', 'salary']
