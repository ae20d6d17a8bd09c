"""Tests for split / close mutations"""

import itertools

import pytest

from panetree.core.ids import PaneKey
from panetree.errors import TopologyError
from panetree.telemetry import metrics
from panetree.topology.mutations import (
    ClosePatch,
    EdgeSlot,
    apply_close,
    apply_split,
    classify_close_patch,
    reset_survivor,
)
from panetree.topology.store import TopologyStore
from panetree.topology.types import Direction, PaneNode

W, T = "w", "t"


def _node(store: TopologyStore, pane_id: str) -> PaneNode:
    return store.require(PaneKey(W, T, pane_id))


def _store_with(*pane_ids: str) -> TopologyStore:
    store = TopologyStore()
    for pane_id in pane_ids:
        store.ensure(PaneKey(W, T, pane_id))
    return store


class TestApplySplit:
    """Split bookkeeping"""

    def test_right_split_tags(self):
        store = _store_with("0")
        node = apply_split(store, W, T, "0", "1", Direction.RIGHT)

        source = _node(store, "0")
        assert source.children == ["1"]
        assert source.directions == [Direction.RIGHT]
        assert source.vsplitedge is Direction.RIGHT
        assert node.parent == "0"
        assert node.vsplitedge is Direction.LEFT
        assert node.hsplitedge is None

    def test_down_split_inherits_vertical_tag(self):
        store = _store_with("0")
        apply_split(store, W, T, "0", "1", Direction.RIGHT)
        node = apply_split(store, W, T, "1", "2", Direction.DOWN)

        assert _node(store, "1").hsplitedge is Direction.DOWN
        assert node.vsplitedge is Direction.LEFT
        assert node.hsplitedge is Direction.UP

    def test_left_split(self):
        store = _store_with("0")
        node = apply_split(store, W, T, "0", "1", Direction.LEFT)
        assert _node(store, "0").vsplitedge is Direction.LEFT
        assert node.vsplitedge is Direction.RIGHT

    def test_unreconciled_source_fails_fast(self):
        with pytest.raises(TopologyError):
            apply_split(TopologyStore(), W, T, "0", "1", Direction.RIGHT)


class TestApplyClose:
    """Close bookkeeping"""

    def test_rehoming_example(self):
        """A split Right into B, B split Down into C; closing B hands C to A"""
        store = _store_with("A")
        apply_split(store, W, T, "A", "B", Direction.RIGHT)
        apply_split(store, W, T, "B", "C", Direction.DOWN)

        outcome = apply_close(store, W, T, "B", left_id="A", right_id=None)

        a, c = _node(store, "A"), _node(store, "C")
        assert a.children == ["C"]
        assert a.directions == [Direction.DOWN]
        assert c.parent == "A"
        assert c.children == []
        assert PaneKey(W, T, "B") not in store
        assert outcome.rehomed == ["C"]
        assert store.check_tab(W, T) == []

    def test_extra_children_appended(self):
        store = _store_with("A")
        apply_split(store, W, T, "A", "B", Direction.RIGHT)
        apply_split(store, W, T, "A", "X", Direction.DOWN)
        apply_split(store, W, T, "B", "C", Direction.DOWN)
        apply_split(store, W, T, "B", "D", Direction.RIGHT)

        apply_close(store, W, T, "B")

        a = _node(store, "A")
        assert a.children == ["C", "X", "D"]
        assert a.directions == [Direction.DOWN, Direction.DOWN, Direction.RIGHT]
        assert _node(store, "D").parent == "A"
        assert store.check_tab(W, T) == []

    def test_root_children_are_chained(self):
        store = _store_with("A")
        apply_split(store, W, T, "A", "B", Direction.RIGHT)
        apply_split(store, W, T, "A", "C", Direction.DOWN)

        apply_close(store, W, T, "A")

        b, c = _node(store, "B"), _node(store, "C")
        assert b.parent is None
        assert c.parent == "B"
        assert b.children == ["C"]
        assert b.directions == [Direction.DOWN]
        assert store.check_tab(W, T) == []

    def test_split_round_trip_restores_parent(self):
        store = _store_with("A", "P")
        apply_split(store, W, T, "A", "P", Direction.RIGHT)
        parent = _node(store, "P")
        before = (list(parent.children), list(parent.directions), parent.edges)

        apply_split(store, W, T, "P", "N", Direction.RIGHT)
        outcome = apply_close(store, W, T, "N", left_id="P", right_id=None)

        assert outcome.restored_parent_edges is True
        assert (parent.children, parent.directions, parent.edges) == before

    @pytest.mark.parametrize("direction", list(Direction))
    def test_split_round_trip_every_direction(self, direction):
        store = _store_with("P")
        parent = _node(store, "P")
        before = (list(parent.children), list(parent.directions), parent.edges)

        apply_split(store, W, T, "P", "N", direction)
        apply_close(store, W, T, "N")

        assert (parent.children, parent.directions, parent.edges) == before

    def test_patch_left_neighbor(self):
        store = _store_with("A")
        apply_split(store, W, T, "A", "B", Direction.RIGHT)

        outcome = apply_close(store, W, T, "B", left_id="A", right_id=None)

        assert outcome.patch is ClosePatch.PATCH_LEFT
        assert outcome.patched_pane == "A"

    def test_patch_right_neighbor(self):
        store = _store_with("A")
        apply_split(store, W, T, "A", "B", Direction.RIGHT)
        apply_split(store, W, T, "A", "C", Direction.LEFT)
        # C | A | B with A tagged Left; give A the Right tag to hit case 2
        _node(store, "A").vsplitedge = Direction.RIGHT
        _node(store, "C").vsplitedge = Direction.LEFT

        outcome = apply_close(store, W, T, "A", left_id="C", right_id="B")

        assert outcome.patch is ClosePatch.PATCH_RIGHT
        assert _node(store, "B").vsplitedge is Direction.RIGHT

    def test_unhandled_combination_counted(self):
        store = _store_with("A", "B", "C")
        _node(store, "A").vsplitedge = Direction.LEFT
        _node(store, "B").vsplitedge = Direction.LEFT
        _node(store, "C").vsplitedge = Direction.LEFT

        outcome = apply_close(store, W, T, "B", left_id="A", right_id="C")

        assert outcome.patch is ClosePatch.UNHANDLED
        assert _node(store, "A").vsplitedge is Direction.LEFT
        assert metrics.get_counter("close.unhandled_edges") == 1

    def test_unreconciled_target_fails_fast(self):
        with pytest.raises(TopologyError):
            apply_close(TopologyStore(), W, T, "9")


class TestClassifyClosePatch:
    """Every combination of the close edge table is classified"""

    def test_exhaustive_classification(self):
        targets = [s for s in EdgeSlot if s is not EdgeSlot.ABSENT]
        combos = list(itertools.product(EdgeSlot, targets, EdgeSlot))
        assert len(combos) == 48

        results = [classify_close_patch(*combo) for combo in combos]
        assert results.count(ClosePatch.PATCH_LEFT) == 1
        assert results.count(ClosePatch.PATCH_RIGHT) == 2
        assert results.count(ClosePatch.NOOP) == 18
        assert results.count(ClosePatch.UNHANDLED) == 27

    def test_case_one(self):
        assert classify_close_patch(
            EdgeSlot.RIGHT, EdgeSlot.LEFT, EdgeSlot.ABSENT
        ) is ClosePatch.PATCH_LEFT

    @pytest.mark.parametrize("left", [EdgeSlot.ABSENT, EdgeSlot.LEFT])
    def test_case_two(self, left):
        assert classify_close_patch(left, EdgeSlot.RIGHT, EdgeSlot.LEFT) is ClosePatch.PATCH_RIGHT

    def test_absent_target_rejected(self):
        with pytest.raises(ValueError):
            classify_close_patch(EdgeSlot.LEFT, EdgeSlot.ABSENT, EdgeSlot.LEFT)


class TestResetSurvivor:
    """Single-survivor reset"""

    def test_last_pane_reset(self):
        store = _store_with("A")
        node = _node(store, "A")
        node.parent = "X"
        node.add_child("B", Direction.RIGHT)
        node.vsplitedge = Direction.RIGHT
        node.hsplitedge = Direction.DOWN

        assert reset_survivor(store, W, T, ["A"]) == "A"
        assert node.parent is None
        assert node.children == []
        assert node.directions == []
        assert node.vsplitedge is None
        assert node.hsplitedge is None

    def test_several_panes_untouched(self):
        store = _store_with("A", "B")
        _node(store, "A").vsplitedge = Direction.RIGHT
        assert reset_survivor(store, W, T, ["A", "B"]) is None
        assert _node(store, "A").vsplitedge is Direction.RIGHT
