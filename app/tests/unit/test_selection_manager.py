"""Tests for controllers/selection_manager.py."""

from controllers.selection_manager import SelectionManager


class TestSelectionManager:
    def test_starts_empty(self):
        selection = SelectionManager()
        assert selection.selected_component_ids == []
        assert selection.selected_connection_ids == []
        assert not selection.has_selection()

    def test_single_select_replaces_own_set_only(self):
        selection = SelectionManager()
        selection.select_connection("conn_1")
        selection.select_component("comp_1")
        selection.select_component("comp_2")
        assert selection.selected_component_ids == ["comp_2"]
        assert selection.selected_connection_ids == ["conn_1"]

    def test_multi_select_dedupes_preserving_order(self):
        selection = SelectionManager()
        selection.set_selected_components(["comp_3", "comp_1", "comp_3"])
        assert selection.selected_component_ids == ["comp_3", "comp_1"]

    def test_set_selected_connections(self):
        selection = SelectionManager()
        selection.set_selected_connections(["conn_1", "conn_2"])
        assert selection.is_connection_selected("conn_2")

    def test_toggle(self):
        selection = SelectionManager()
        selection.toggle_component("comp_1")
        selection.toggle_component("comp_2")
        selection.toggle_component("comp_1")
        assert selection.selected_component_ids == ["comp_2"]

    def test_clear_selection(self):
        selection = SelectionManager()
        selection.select_component("comp_1")
        selection.select_connection("conn_1")
        selection.clear_selection()
        assert not selection.has_selection()

    def test_deselect_missing_is_safe(self):
        selection = SelectionManager()
        selection.deselect_component("comp_9")
        selection.deselect_connection("conn_9")
        assert not selection.has_selection()

    def test_returned_lists_are_copies(self):
        selection = SelectionManager()
        selection.select_component("comp_1")
        selection.selected_component_ids.append("comp_2")
        assert selection.selected_component_ids == ["comp_1"]
