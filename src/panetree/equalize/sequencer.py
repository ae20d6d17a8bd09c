"""Adjustment sequencer - order in which column groups are resized

Each split origin is probed: the pane left of its group's top-left pane is the
previous group, the pane right of its top-right pane is the next group. The
edge tags of (previous, current, next) pick the groups to enqueue from a fixed
table. Groups never enqueued are added at the end, first and last group in
front.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from ..telemetry import get_logger, metrics
from ..topology.types import Direction, PaneNode
from .edges import EdgeTags
from .grouper import Group, group_index_of, top_left, top_right

logger = get_logger(__name__)


class SequenceAction(Enum):
    CURRENT = "current"  # enqueue the current group
    NEIGHBOURS = "neighbours"  # enqueue next, current, previous
    UNANTICIPATED = "unanticipated"


_L, _R, _N = Direction.LEFT, Direction.RIGHT, None
_CUR, _NBR, _UNK = SequenceAction.CURRENT, SequenceAction.NEIGHBOURS, SequenceAction.UNANTICIPATED

# (previous group's top-right, current group's top-right, next group's top-left)
SEQUENCE_TABLE: dict[tuple[Direction | None, Direction | None, Direction | None], SequenceAction] = {
    (_R, _R, _L): _CUR,
    (_R, _R, _R): _CUR,
    (_R, _L, _R): _CUR,
    (_L, _R, _R): _CUR,
    (_L, _L, _L): _CUR,
    (_L, _R, _L): _CUR,
    (_R, _L, _L): _NBR,
    (_L, _L, _R): _UNK,
    (_R, _R, _N): _UNK,
    (_R, _L, _N): _UNK,
    (_R, _N, _R): _UNK,
    (_R, _N, _L): _UNK,
    (_R, _N, _N): _UNK,
    (_L, _R, _N): _UNK,
    (_L, _L, _N): _UNK,
    (_L, _N, _R): _UNK,
    (_L, _N, _L): _UNK,
    (_L, _N, _N): _UNK,
    (_N, _R, _R): _UNK,
    (_N, _R, _L): _UNK,
    (_N, _R, _N): _UNK,
    (_N, _L, _R): _UNK,
    (_N, _L, _L): _UNK,
    (_N, _L, _N): _UNK,
    (_N, _N, _R): _UNK,
    (_N, _N, _L): _UNK,
    (_N, _N, _N): _UNK,
}


@dataclass(frozen=True)
class Probe:
    """Panes to query for one split origin"""

    origin: str
    group: int
    top_left: str
    top_right: str

    @property
    def queries(self) -> tuple[tuple[str, Direction], tuple[str, Direction]]:
        """(pane, direction) adjacency lookups this probe needs."""
        return (self.top_left, Direction.LEFT), (self.top_right, Direction.RIGHT)


NeighborMap = Mapping[tuple[str, Direction], str | None]


def plan_probes(groups: list[Group], nodes: Mapping[str, PaneNode]) -> list[Probe]:
    """Probes for every live split origin, in creation order.

    Args:
        groups: Column groups, left to right
        nodes: Records of the tab in creation order
    """
    probes = []
    for pane_id, node in nodes.items():
        if not node.children:
            continue
        index = group_index_of(groups, pane_id)
        if index is None:
            continue
        if len(node.children) == 1:
            probes.append(Probe(pane_id, index, pane_id, pane_id))
        else:
            group = groups[index]
            probes.append(
                Probe(pane_id, index, top_left(group).pane_id, top_right(group).pane_id)
            )
    return probes


def decide(
    previous: Direction | None, current: Direction | None, following: Direction | None
) -> SequenceAction:
    return SEQUENCE_TABLE[(previous, current, following)]


def sequence_groups(
    groups: list[Group],
    probes: list[Probe],
    tags: EdgeTags,
    neighbors: NeighborMap,
) -> list[int]:
    """Order the groups for resizing.

    Args:
        groups: Column groups, left to right
        probes: From plan_probes
        tags: vsplitedge per pane id
        neighbors: Live adjacency answers keyed by Probe.queries entries

    Returns:
        Every group index exactly once, in visit order
    """
    sequence: list[int] = []
    processed: set[str] = set()

    for probe in probes:
        if probe.origin in processed:
            continue

        previous_id = neighbors.get((probe.top_left, Direction.LEFT))
        next_id = neighbors.get((probe.top_right, Direction.RIGHT))

        if previous_id is None or next_id is None:
            action = SequenceAction.CURRENT
        else:
            action = decide(
                tags.get(previous_id), tags.get(probe.top_right), tags.get(next_id)
            )

        if action is SequenceAction.CURRENT:
            picks = [probe.group]
        elif action is SequenceAction.NEIGHBOURS:
            picks = [
                group_index_of(groups, next_id),
                probe.group,
                group_index_of(groups, previous_id),
            ]
        else:
            metrics.inc("sequence.unanticipated")
            logger.warning(
                f"[Equalize] unanticipated edges around {probe.origin}: "
                f"{previous_id}={tags.get(previous_id)} {probe.top_right}={tags.get(probe.top_right)} "
                f"{next_id}={tags.get(next_id)}"
            )
            picks = []

        for index in picks:
            if index is None or index in sequence:
                continue
            sequence.append(index)
            processed.update(pane.pane_id for pane in groups[index])

    last = len(groups) - 1
    for index in range(len(groups)):
        if index in sequence:
            continue
        if index in (0, last):
            sequence.insert(0, index)
        else:
            sequence.append(index)

    logger.debug(f"[Equalize] group sequence: {sequence}")
    return sequence
