"""Split and close mutations of the Topology Store

Pure store operations; the engine issues the matching host commands and feeds
in what it learns from the live layout (the new pane id after a split, the
live neighbors of a pane about to close).
"""

from dataclasses import dataclass
from enum import Enum

from ..core.ids import PaneKey
from ..telemetry import get_logger, metrics
from .store import TopologyStore
from .types import Direction, PaneNode

logger = get_logger(__name__)


# === Split ===


def apply_split(
    store: TopologyStore,
    window_id: str,
    tab_id: str,
    source_id: str,
    new_id: str,
    direction: Direction,
) -> PaneNode:
    """Record that ``new_id`` was split from ``source_id`` in ``direction``.

    The source governs the slit on the split side; the new pane governs the
    opposite side of that slit and inherits the source's tag on the other axis.

    Returns:
        The new pane's record

    Raises:
        TopologyError: The source pane has no record
    """
    source = store.require(PaneKey(window_id, tab_id, source_id))
    origin_edges = source.edges

    source.add_child(new_id, direction)
    if direction.is_vertical_split:
        source.vsplitedge = direction
        vsplitedge, hsplitedge = direction.opposite, origin_edges[1]
    else:
        source.hsplitedge = direction
        vsplitedge, hsplitedge = origin_edges[0], direction.opposite

    node = PaneNode(
        parent=source_id,
        vsplitedge=vsplitedge,
        hsplitedge=hsplitedge,
        origin_edges=origin_edges,
    )
    store.put(PaneKey(window_id, tab_id, new_id), node)
    logger.info(f"[Split] {source_id}: {source.describe()}")
    logger.info(f"[Split] {new_id}: {node.describe()}")
    return node


# === Close ===


class EdgeSlot(Enum):
    """A neighbor's vertical edge tag, or the absence of the neighbor."""

    ABSENT = "absent"
    UNTAGGED = "none"
    LEFT = "Left"
    RIGHT = "Right"

    @classmethod
    def of(cls, tag: Direction | None, present: bool = True) -> "EdgeSlot":
        if not present:
            return cls.ABSENT
        if tag is None:
            return cls.UNTAGGED
        return cls(tag.value)


class ClosePatch(Enum):
    """Edge-tag repair applied to a neighbor of a closing pane."""

    PATCH_LEFT = "patch_left"  # left neighbor takes the closing pane's tag
    PATCH_RIGHT = "patch_right"  # right neighbor takes the closing pane's tag
    NOOP = "noop"  # nothing on the vertical axis to hand over
    UNHANDLED = "unhandled"  # geometry not covered; left unpatched


def classify_close_patch(left: EdgeSlot, target: EdgeSlot, right: EdgeSlot) -> ClosePatch:
    """Decide which neighbor inherits the closing pane's vertical edge tag.

    Args:
        left: Tag of the live pane directly left of the target
        target: Tag of the closing pane (never ABSENT)
        right: Tag of the live pane directly right of the target

    Returns:
        ClosePatch for this combination
    """
    if target is EdgeSlot.ABSENT:
        raise ValueError("the closing pane cannot be absent")

    if (left, target, right) == (EdgeSlot.RIGHT, EdgeSlot.LEFT, EdgeSlot.ABSENT):
        return ClosePatch.PATCH_LEFT
    if (left, target, right) in (
        (EdgeSlot.ABSENT, EdgeSlot.RIGHT, EdgeSlot.LEFT),
        (EdgeSlot.LEFT, EdgeSlot.RIGHT, EdgeSlot.LEFT),
    ):
        return ClosePatch.PATCH_RIGHT

    if target is EdgeSlot.UNTAGGED:
        return ClosePatch.NOOP
    if left is EdgeSlot.ABSENT and right is EdgeSlot.ABSENT:
        return ClosePatch.NOOP
    return ClosePatch.UNHANDLED


@dataclass
class CloseOutcome:
    """What apply_close did to the store"""

    parent: str | None
    rehomed: list[str]
    patch: ClosePatch
    patched_pane: str | None = None
    restored_parent_edges: bool = False


def apply_close(
    store: TopologyStore,
    window_id: str,
    tab_id: str,
    pane_id: str,
    left_id: str | None = None,
    right_id: str | None = None,
) -> CloseOutcome:
    """Remove a pane from the split tree before the host closes it.

    Args:
        store: Topology store
        window_id, tab_id, pane_id: The pane being closed
        left_id: Live pane directly left of it, if any
        right_id: Live pane directly right of it, if any

    Returns:
        CloseOutcome

    Raises:
        TopologyError: The pane has no record
    """
    key = PaneKey(window_id, tab_id, pane_id)
    target = store.require(key)
    parent = store.get(PaneKey(window_id, tab_id, target.parent)) if target.parent else None
    if target.parent is not None and parent is None:
        logger.warning(f"[Close] {pane_id}: parent {target.parent} has no record, treating as root")

    logger.info(f"[Close] {pane_id}: {target.describe()}")
    rehomed = _rehome_children(store, window_id, tab_id, target, parent)

    was_latest_child = False
    split_direction = None
    if parent is not None:
        was_latest_child, split_direction = _splice_into_parent(pane_id, target, parent)

    outcome = CloseOutcome(
        parent=target.parent if parent is not None else None,
        rehomed=rehomed,
        patch=ClosePatch.NOOP,
    )
    _patch_neighbor_edges(store, window_id, tab_id, pane_id, target, left_id, right_id, outcome)

    # Split round trip: the parent's tags go back to their pre-split values
    if was_latest_child and not target.children and target.origin_edges is not None:
        vsplitedge, hsplitedge = target.origin_edges
        if split_direction is not None and split_direction.is_vertical_split:
            parent.vsplitedge = vsplitedge
        else:
            parent.hsplitedge = hsplitedge
        outcome.restored_parent_edges = True
        logger.info(f"[Close] {target.parent}: restored edges {parent.describe()}")

    store.remove(key)
    return outcome


def _rehome_children(
    store: TopologyStore,
    window_id: str,
    tab_id: str,
    target: PaneNode,
    parent: PaneNode | None,
) -> list[str]:
    children = list(target.children)
    for index, child_id in enumerate(children):
        child = store.get(PaneKey(window_id, tab_id, child_id))
        if child is None:
            logger.warning(f"[Close] child {child_id} has no record, skipped")
            continue
        if parent is not None:
            child.parent = target.parent
        elif index == 0:
            child.parent = None
        else:
            # No parent to adopt them: chain each child under the previous one
            previous_id = children[index - 1]
            child.parent = previous_id
            previous = store.get(PaneKey(window_id, tab_id, previous_id))
            if previous is not None:
                previous.add_child(child_id, target.directions[index])
        logger.info(f"[Close]  child {child_id}: parent={child.parent}")
    return children


def _splice_into_parent(
    pane_id: str, target: PaneNode, parent: PaneNode
) -> tuple[bool, Direction | None]:
    """Replace the target's slot in its parent's lists with its children.

    The first child takes the target's slot; further children are appended.

    Returns:
        (target was the parent's latest child, direction that created the target)
    """
    if pane_id not in parent.children:
        logger.warning(f"[Close] {pane_id} missing from parent's children, appending its children")
        for child_id, direction in zip(target.children, target.directions):
            parent.add_child(child_id, direction)
        return False, None

    index = parent.children.index(pane_id)
    was_latest = index == len(parent.children) - 1
    split_direction = parent.directions[index]

    if target.children:
        parent.children[index] = target.children[0]
        parent.directions[index] = target.directions[0]
        for child_id, direction in zip(target.children[1:], target.directions[1:]):
            parent.add_child(child_id, direction)
    else:
        parent.remove_child_at(index)
    logger.info(f"[Close] {target.parent}: {parent.describe()}")
    return was_latest, split_direction


def _patch_neighbor_edges(
    store: TopologyStore,
    window_id: str,
    tab_id: str,
    pane_id: str,
    target: PaneNode,
    left_id: str | None,
    right_id: str | None,
    outcome: CloseOutcome,
) -> None:
    left = store.get(PaneKey(window_id, tab_id, left_id)) if left_id else None
    right = store.get(PaneKey(window_id, tab_id, right_id)) if right_id else None

    patch = classify_close_patch(
        EdgeSlot.of(left.vsplitedge if left else None, present=left_id is not None),
        EdgeSlot.of(target.vsplitedge),
        EdgeSlot.of(right.vsplitedge if right else None, present=right_id is not None),
    )
    outcome.patch = patch

    if patch is ClosePatch.PATCH_LEFT and left is not None:
        left.vsplitedge = target.vsplitedge
        outcome.patched_pane = left_id
        logger.info(f"[Close] left pane {left_id}: vsplitedge -> {target.vsplitedge.value}")
    elif patch is ClosePatch.PATCH_RIGHT and right is not None:
        right.vsplitedge = target.vsplitedge
        outcome.patched_pane = right_id
        logger.info(f"[Close] right pane {right_id}: vsplitedge -> {target.vsplitedge.value}")
    elif patch is ClosePatch.UNHANDLED:
        metrics.inc("close.unhandled_edges")
        logger.warning(
            f"[Close] {pane_id}: unhandled neighbor edges "
            f"left={left_id}:{left.vsplitedge if left else None} "
            f"target={target.vsplitedge} right={right_id}:{right.vsplitedge if right else None}"
        )


def reset_survivor(store: TopologyStore, window_id: str, tab_id: str, live_pane_ids) -> str | None:
    """Reset the last pane of a tab to a blank skeleton.

    Returns:
        The surviving pane id if the tab has exactly one pane, else None
    """
    live = list(live_pane_ids)
    if len(live) != 1:
        return None
    node, _ = store.ensure(PaneKey(window_id, tab_id, live[0]))
    node.reset()
    logger.info(f"[Close] {live[0]} is the only pane left, reset to root")
    return live[0]
