"""Tests for the grouper"""

from panetree.adapters.models import PaneInfo
from panetree.equalize.grouper import (
    group_index_of,
    group_panes,
    spine,
    subgroups,
    tab_rows,
    top_left,
    top_right,
)


def _pane(pane_id, left, top, width, height):
    return PaneInfo(pane_id, pane_id, 0, left, top, width, height)


def _ids(groups):
    return [[p.pane_id for p in group] for group in groups]


class TestGroupPanes:
    def test_full_height_columns(self):
        panes = [_pane("1", 0, 0, 26, 24), _pane("2", 27, 0, 26, 24), _pane("3", 54, 0, 26, 24)]
        assert _ids(group_panes(panes)) == [["1"], ["2"], ["3"]]

    def test_stacked_column(self):
        panes = [
            _pane("1", 0, 0, 40, 24),
            _pane("2", 41, 0, 39, 12),
            _pane("3", 41, 13, 39, 11),
        ]
        assert _ids(group_panes(panes)) == [["1"], ["2", "3"]]

    def test_new_column_at_top(self):
        panes = [
            _pane("1", 0, 0, 40, 12),
            _pane("2", 0, 13, 40, 11),
            _pane("3", 41, 0, 39, 12),
            _pane("4", 41, 13, 39, 11),
        ]
        assert _ids(group_panes(panes)) == [["1", "2"], ["3", "4"]]

    def test_split_top_row_stays_one_group(self):
        panes = [
            _pane("1", 0, 0, 20, 12),
            _pane("2", 21, 0, 19, 12),
            _pane("3", 0, 13, 40, 11),
            _pane("4", 41, 0, 39, 24),
        ]
        assert _ids(group_panes(panes)) == [["1", "2", "3"], ["4"]]

    def test_single_pane(self):
        assert _ids(group_panes([_pane("1", 0, 0, 80, 24)])) == [["1"]]

    def test_empty(self):
        assert group_panes([]) == []

    def test_tab_rows(self):
        assert tab_rows([_pane("1", 0, 0, 40, 12), _pane("2", 0, 13, 40, 11)]) == 24


class TestSubgroups:
    def test_bucket_by_top_in_appearance_order(self):
        group = [
            _pane("1", 0, 0, 20, 12),
            _pane("3", 0, 13, 40, 11),
            _pane("2", 21, 0, 19, 12),
        ]
        assert _ids(subgroups(group)) == [["1", "2"], ["3"]]

    def test_spine_corners(self):
        group = [_pane("2", 21, 0, 19, 12), _pane("1", 0, 0, 20, 12), _pane("3", 0, 13, 40, 11)]
        assert [p.pane_id for p in spine(group)] == ["1", "2"]
        assert top_left(group).pane_id == "1"
        assert top_right(group).pane_id == "2"

    def test_group_index_of(self):
        groups = [[_pane("1", 0, 0, 40, 24)], [_pane("2", 41, 0, 39, 24)]]
        assert group_index_of(groups, "2") == 1
        assert group_index_of(groups, "9") is None
