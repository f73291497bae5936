"""
Tests for column definitions: parsing, validation, file loading and value coercion.
"""

import json

import pytest

from datagrid.columns import Column, coerce_value, load_columns, parse_columns


class TestParseColumns:

    def test_valid_definition(self):
        columns, errors = parse_columns({'columns': [
            {'key': 'name', 'header': 'Name', 'editor': 'text'},
            {'key': 'first_seen'},
        ]})
        assert errors == []
        assert [c.key for c in columns] == ['name', 'first_seen']
        assert columns[1].header == 'First Seen'
        assert columns[1].editor is None

    def test_accepts_bare_list(self):
        columns, errors = parse_columns([{'key': 'a'}])
        assert errors == []
        assert len(columns) == 1

    def test_missing_columns_array(self):
        columns, errors = parse_columns({'fields': []})
        assert columns == []
        assert errors

    def test_invalid_entries_are_skipped(self):
        columns, errors = parse_columns({'columns': [
            {'key': 'ok'},
            {'header': 'No key'},
            {'key': 'bad', 'editor': 'date'},
            {'key': 'pick', 'editor': 'select'},
            {'key': 'ok'},
            'not an object',
        ]})
        assert [c.key for c in columns] == ['ok']
        assert any("missing required 'key'" in e for e in errors)
        assert any("invalid editor 'date'" in e for e in errors)
        assert any("requires 'options'" in e for e in errors)
        assert any("Duplicate column key 'ok'" in e for e in errors)
        assert any('must be an object' in e for e in errors)

    def test_options_must_carry_values(self):
        _, errors = parse_columns([{'key': 'role', 'editor': 'select', 'options': [{'label': 'x'}]}])
        assert any("needs a 'value'" in e for e in errors)


class TestLoadColumns:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / 'columns.yaml'
        path.write_text(
            'columns:\n'
            '  - key: role\n'
            '    editor: select\n'
            '    options:\n'
            '      - {label: Admin, value: admin}\n',
            encoding='utf-8',
        )
        columns, errors = load_columns(path)
        assert errors == []
        assert columns[0].option_map() == {'admin': 'Admin'}

    def test_load_json(self, tmp_path):
        path = tmp_path / 'columns.json'
        path.write_text(json.dumps({'columns': [{'key': 'age', 'editor': 'number'}]}), encoding='utf-8')
        columns, errors = load_columns(path)
        assert errors == []
        assert columns[0].is_editable

    def test_broken_file_reports_error(self, tmp_path):
        path = tmp_path / 'columns.json'
        path.write_text('{not json', encoding='utf-8')
        columns, errors = load_columns(path)
        assert columns == []
        assert len(errors) == 1

    def test_missing_file_reports_error(self, tmp_path):
        columns, errors = load_columns(tmp_path / 'absent.yaml')
        assert columns == []
        assert errors


class TestCoerceValue:

    @pytest.fixture
    def number(self):
        return Column('age', 'Age', editor='number')

    def test_parses_numbers(self, number):
        assert coerce_value(number, '42') == 42
        assert coerce_value(number, ' 4.5 ') == 4.5
        assert coerce_value(number, 7) == 7

    def test_integral_floats_become_ints(self, number):
        """ui.number always emits floats; whole numbers commit as ints."""
        value = coerce_value(number, 35.0)
        assert value == 35 and isinstance(value, int)
        assert coerce_value(number, 35.5) == 35.5

    def test_blank_number_is_none(self, number):
        assert coerce_value(number, '') is None

    def test_unparseable_number_is_returned_unchanged(self, number):
        assert coerce_value(number, 'abc') == 'abc'

    def test_text_is_untouched(self):
        assert coerce_value(Column('name', 'Name', editor='text'), '42') == '42'

    def test_non_editable_column(self):
        column = Column('name', 'Name', editor='text', editable=False)
        assert not column.is_editable
