"""Resizer - resize command for one pane and pane visit order"""

from collections.abc import Mapping
from dataclasses import dataclass

from ..adapters.models import PaneInfo
from ..core.ids import creation_order
from ..topology.types import Direction, PaneNode
from .grouper import Group, subgroups


@dataclass(frozen=True)
class ResizeCommand:
    """Move the pane's governed slit ``amount`` cells toward ``direction``."""

    pane_id: str
    direction: Direction
    amount: int


def plan_resize(
    pane_id: str, tag: Direction | None, live_width: int, target: int
) -> ResizeCommand | None:
    """Resize needed to bring a pane to its target width.

    Left-tagged panes move their left slit, Right-tagged panes their right
    slit; a pane narrower than its target grows, a wider one shrinks.

    Returns:
        None for untagged panes or panes already at their target
    """
    diff = live_width - target
    if diff == 0 or tag not in (Direction.LEFT, Direction.RIGHT):
        return None

    grow = diff < 0
    if tag is Direction.LEFT:
        direction = Direction.LEFT if grow else Direction.RIGHT
    else:
        direction = Direction.RIGHT if grow else Direction.LEFT
    return ResizeCommand(pane_id, direction, abs(diff))


def governed_column(pane: PaneInfo, tag: Direction | None, tab_width: int) -> int | None:
    """Divider column the pane's resize moves, None at the tab edge."""
    if tag is Direction.LEFT and pane.left > 0:
        return pane.left - 1
    if tag is Direction.RIGHT and pane.right < tab_width:
        return pane.right
    return None


def pane_visit_order(group: Group, nodes: Mapping[str, PaneNode]) -> list[str]:
    """Order in which a group's panes are resized.

    Per subgroup: split origins in creation order, those at either end of the
    subgroup moved to the front, then the remaining panes in creation order.
    """
    if len(group) == 1:
        return [group[0].pane_id]

    order = []
    for row in subgroups(group):
        row_ids = [pane.pane_id for pane in row]
        ends = (row_ids[0], row_ids[-1])

        visit: list[str] = []
        for pane_id in creation_order(row_ids):
            node = nodes.get(pane_id)
            if node is None or not node.children:
                continue
            if pane_id in ends:
                visit.insert(0, pane_id)
            else:
                visit.append(pane_id)
        visit.extend(pane_id for pane_id in creation_order(row_ids) if pane_id not in visit)
        order.extend(visit)
    return order
