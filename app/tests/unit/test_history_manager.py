"""Tests for controllers/history_manager.py."""

import pytest
from controllers.history_manager import HistoryManager
from models.snapshot import HistorySnapshot
from tests.conftest import make_component


def _snap(tag):
    """A distinguishable one-component snapshot."""
    return HistorySnapshot.capture([make_component("comp_1", label=str(tag))], [])


def _tag(snapshot):
    return snapshot.components[0].label if snapshot.components else None


class TestHistoryManager:
    def test_initial_state(self):
        history = HistoryManager()
        assert len(history) == 1
        assert history.index == 0
        assert history.current.is_empty()
        assert not history.can_undo()
        assert not history.can_redo()

    def test_record_advances_cursor(self):
        history = HistoryManager()
        history.record(_snap(1))
        history.record(_snap(2))
        assert len(history) == 3
        assert history.index == 2
        assert _tag(history.current) == "2"

    def test_undo_and_redo_walk_the_sequence(self):
        history = HistoryManager()
        history.record(_snap(1))
        history.record(_snap(2))
        assert _tag(history.undo()) == "1"
        assert history.undo().is_empty()
        assert history.undo() is None
        assert _tag(history.redo()) == "1"
        assert _tag(history.redo()) == "2"
        assert history.redo() is None

    def test_record_after_undo_truncates_redo_branch(self):
        history = HistoryManager()
        history.record(_snap(1))
        history.record(_snap(2))
        history.undo()
        history.record(_snap(3))
        assert not history.can_redo()
        assert history.redo() is None
        assert [_tag(history.undo()), _tag(history.undo())] == ["1", None]

    def test_capacity_evicts_oldest_and_cursor_tracks_newest(self):
        history = HistoryManager(capacity=5)
        for i in range(1, 12):
            history.record(_snap(i))
            assert len(history) <= 5
            assert history.index == len(history) - 1
            assert _tag(history.current) == str(i)
        assert len(history) == 5
        # Oldest survivors are the most recent five
        tags = []
        snapshot = history.current
        while snapshot is not None:
            tags.append(_tag(snapshot))
            snapshot = history.undo()
        assert tags == ["11", "10", "9", "8", "7"]

    def test_default_capacity_is_fifty(self):
        history = HistoryManager()
        for i in range(120):
            history.record(_snap(i))
        assert len(history) == 50
        assert history.get_undo_count() == 49

    def test_capacity_after_undo_and_record(self):
        history = HistoryManager(capacity=3)
        for i in range(3):
            history.record(_snap(i))
        history.undo()
        history.undo()
        history.record(_snap("branch"))
        assert len(history) <= 3
        assert _tag(history.current) == "branch"
        assert not history.can_redo()

    def test_returned_snapshots_cannot_rewrite_history(self):
        history = HistoryManager()
        history.record(_snap(1))
        history.record(_snap(2))

        history.current.components[0].label = "tampered"
        history.undo().components[0].label = "tampered"
        history.redo().components[0].label = "tampered"

        assert _tag(history.current) == "2"
        assert _tag(history.undo()) == "1"

    def test_counts(self):
        history = HistoryManager()
        history.record(_snap(1))
        history.record(_snap(2))
        history.undo()
        assert history.get_undo_count() == 1
        assert history.get_redo_count() == 1

    def test_reset(self):
        history = HistoryManager()
        history.record(_snap(1))
        history.reset()
        assert len(history) == 1
        assert history.index == 0
        assert history.current.is_empty()

    @pytest.mark.parametrize("capacity", [0, -4])
    def test_capacity_has_floor_of_one(self, capacity):
        history = HistoryManager(capacity=capacity)
        history.record(_snap(1))
        assert len(history) == 1
        assert _tag(history.current) == "1"
