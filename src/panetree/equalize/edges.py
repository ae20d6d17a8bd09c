"""Edge classifier - find locked boundaries between column groups"""

from collections.abc import Mapping

from ..telemetry import get_logger
from ..topology.types import Direction, PaneNode
from .grouper import Group, spine, top_left, top_right

logger = get_logger(__name__)

EdgeTags = Mapping[str, Direction | None]


def vertical_tags(nodes: Mapping[str, PaneNode]) -> dict[str, Direction | None]:
    """pane id -> vsplitedge for the records of one tab."""
    return {pane_id: node.vsplitedge for pane_id, node in nodes.items()}


def is_locked(left_tag: Direction | None, right_tag: Direction | None) -> bool:
    """Both panes govern the slit on their far side, so nothing moves it."""
    return left_tag is Direction.LEFT and right_tag is Direction.RIGHT


def find_locked_boundaries(groups: list[Group], tags: EdgeTags) -> list[int]:
    """Indices of groups whose left boundary is locked.

    Args:
        groups: Column groups, left to right
        tags: vsplitedge per pane id

    Returns:
        0-based index of the group right of each locked boundary, ascending
    """
    for index, group in enumerate(groups):
        logger.debug(
            f"[Equalize] group {index}: "
            + " ".join(f"{p.pane_id}={_tag_name(tags.get(p.pane_id))}" for p in spine(group))
        )

    locked = []
    for index in range(len(groups) - 1):
        current = top_right(groups[index])
        following = top_left(groups[index + 1])
        if is_locked(tags.get(current.pane_id), tags.get(following.pane_id)):
            logger.info(
                f"[Equalize] locked boundary between {current.pane_id} and {following.pane_id}"
            )
            locked.append(index + 1)
    return locked


def locked_pairs(panes: Group, tags: EdgeTags) -> list[int]:
    """Locked boundaries between consecutive panes of one row (left to right).

    Returns:
        Index of the pane right of each locked boundary
    """
    return [
        index + 1
        for index in range(len(panes) - 1)
        if is_locked(tags.get(panes[index].pane_id), tags.get(panes[index + 1].pane_id))
    ]


def locked_columns(groups: list[Group], locked: list[int]) -> set[int]:
    """Divider columns of the locked boundaries."""
    return {top_left(groups[index]).left - 1 for index in locked}


def _tag_name(tag: Direction | None) -> str:
    return tag.value if tag else "none"
