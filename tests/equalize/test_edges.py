"""Tests for the edge classifier"""

from panetree.adapters.models import PaneInfo
from panetree.equalize.edges import (
    find_locked_boundaries,
    is_locked,
    locked_columns,
    locked_pairs,
    vertical_tags,
)
from panetree.topology.types import Direction, PaneNode

L, R = Direction.LEFT, Direction.RIGHT


def _column(pane_id, left, width):
    return [PaneInfo(pane_id, pane_id, 0, left, 0, width, 24)]


def _groups():
    return [_column("1", 0, 19), _column("2", 20, 20), _column("3", 41, 19), _column("4", 61, 19)]


class TestIsLocked:
    def test_only_left_then_right(self):
        assert is_locked(L, R)
        assert not is_locked(R, L)
        assert not is_locked(L, L)
        assert not is_locked(None, R)


class TestFindLockedBoundaries:
    def test_no_locked(self):
        tags = {"1": R, "2": L, "3": L, "4": L}
        assert find_locked_boundaries(_groups(), tags) == []

    def test_locked_records_next_group(self):
        tags = {"1": R, "2": L, "3": R, "4": L}
        assert find_locked_boundaries(_groups(), tags) == [2]

    def test_untagged_panes_never_lock(self):
        assert find_locked_boundaries(_groups(), {}) == []

    def test_locked_columns(self):
        assert locked_columns(_groups(), [2]) == {40}


class TestLockedPairs:
    def test_within_row(self):
        row = [
            PaneInfo("a", "a", 0, 0, 0, 10, 5),
            PaneInfo("b", "b", 1, 11, 0, 10, 5),
            PaneInfo("c", "c", 2, 22, 0, 10, 5),
        ]
        assert locked_pairs(row, {"a": R, "b": L, "c": R}) == [2]


def test_vertical_tags():
    nodes = {"1": PaneNode(vsplitedge=R), "2": PaneNode()}
    assert vertical_tags(nodes) == {"1": R, "2": None}
