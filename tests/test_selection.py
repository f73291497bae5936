"""
Tests for the Selection Controller in both ownership modes.
"""

import pytest

from datagrid.commands import RowSelectionRequested, SelectAllRequested, SelectionChanged
from datagrid.selection import Controlled, SelectionController, Uncontrolled


class Recorder:
    def __init__(self):
        self.rows = []
        self.all = []

    def on_select_row(self, key, selected):
        self.rows.append((key, selected))

    def on_select_all(self, selected):
        self.all.append(selected)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def controller(recorder):
    """Uncontrolled controller over rows 1, 2, 3."""
    return SelectionController(
        [1, 2, 3],
        on_select_row=recorder.on_select_row,
        on_select_all=recorder.on_select_all,
    )


class TestUncontrolledSelection:

    def test_starts_empty_by_default(self, controller):
        assert controller.selected_keys == []
        assert not controller.controlled

    def test_initial_selection_is_deduplicated(self):
        controller = SelectionController([1, 2], Uncontrolled(initial=(2, 2, 1)))
        assert controller.selected_keys == [2, 1]

    def test_select_all_then_deselect_one(self, controller):
        """Scenario: select all of [1, 2, 3], then drop row 2."""
        controller.select_all(True)
        assert controller.selected_keys == [1, 2, 3]

        controller.select_row(2, False)
        assert controller.selected_keys == [1, 3]

    def test_select_all_marks_every_key(self):
        keys = ['a', 'b', 7, 'z']
        controller = SelectionController(keys)
        controller.select_all(True)
        assert all(controller.is_selected(k) for k in keys)

    def test_select_all_false_always_empties(self, controller):
        controller.select_row(1, True)
        controller.select_row(3, True)
        controller.select_all(False)
        assert controller.selected_keys == []

    def test_select_all_with_no_rows_is_empty(self):
        controller = SelectionController([])
        controller.select_all(True)
        assert controller.selected_keys == []
        assert controller.all_selected is False

    def test_select_row_twice_keeps_one_copy(self, controller):
        controller.select_row(2, True)
        controller.select_row(2, True)
        assert controller.selected_keys == [2]

    def test_deselect_absent_key_still_calls_back(self, controller, recorder):
        commands = controller.select_row(9, False)
        assert controller.selected_keys == []
        assert recorder.rows == [(9, False)]
        assert commands == [RowSelectionRequested(9, False), SelectionChanged(())]

    def test_callbacks_receive_arguments(self, controller, recorder):
        controller.select_row(1, True)
        controller.select_all(False)
        assert recorder.rows == [(1, True)]
        assert recorder.all == [False]

    def test_select_all_returns_commands(self, controller):
        commands = controller.select_all(True)
        assert commands == [SelectAllRequested(True), SelectionChanged((1, 2, 3))]

    def test_toggle_row(self, controller):
        controller.toggle_row(3)
        assert controller.is_selected(3)
        controller.toggle_row(3)
        assert not controller.is_selected(3)

    def test_all_selected_tracks_row_set(self, controller):
        controller.select_all(True)
        assert controller.all_selected
        controller.set_row_keys([1, 2, 3, 4])
        assert not controller.all_selected

    def test_removed_rows_leave_the_selection(self, controller):
        controller.select_all(True)
        controller.set_row_keys([1, 3])
        assert controller.selected_keys == [1, 3]
        assert controller.all_selected

    def test_sync_is_ignored_when_uncontrolled(self, controller):
        controller.select_row(1, True)
        assert controller.sync([2, 3]) == []
        assert controller.selected_keys == [1]

    def test_instances_do_not_share_state(self):
        first = SelectionController([1, 2])
        second = SelectionController([1, 2])
        first.select_all(True)
        assert second.selected_keys == []


class TestControlledSelection:

    def test_reads_host_selection(self):
        controller = SelectionController([1, 2, 3], Controlled(selection=(3, 1, 3)))
        assert controller.controlled
        assert controller.selected_keys == [3, 1]
        assert controller.is_selected(1)
        assert not controller.is_selected(2)

    def test_select_row_only_proposes(self, recorder):
        controller = SelectionController(
            [1, 2, 3], Controlled(selection=(1,)),
            on_select_row=recorder.on_select_row,
        )
        commands = controller.select_row(2, True)

        assert controller.selected_keys == [1]
        assert recorder.rows == [(2, True)]
        assert commands[-1] == SelectionChanged((1, 2), applied=False)

    def test_host_ignoring_callback_sees_no_change(self):
        controller = SelectionController([1, 2, 3], Controlled(selection=()))
        controller.select_all(True)
        controller.select_row(1, True)
        assert controller.selected_keys == []

    def test_sync_applies_host_selection(self):
        def host_select(key, selected):
            current = set(controller.selected_keys)
            current.add(key) if selected else current.discard(key)
            controller.sync(sorted(current))

        controller = SelectionController([1, 2, 3], Controlled(), on_select_row=host_select)
        controller.select_row(2, True)
        controller.select_row(3, True)
        assert controller.selected_keys == [2, 3]

    def test_row_set_change_keeps_host_selection(self):
        controller = SelectionController([1, 2, 3], Controlled(selection=(2, 3)))
        controller.set_row_keys([1])
        assert controller.selected_keys == [2, 3]

    def test_select_all_false_proposes_empty(self):
        controller = SelectionController([1, 2], Controlled(selection=(1, 2)))
        commands = controller.select_all(False)
        assert commands[-1] == SelectionChanged((), applied=False)
