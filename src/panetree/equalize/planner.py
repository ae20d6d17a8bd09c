"""Width planner - target column width for every pane of a tab

A span of n items holds n - 1 one-cell dividers. The remaining cells are
shared evenly and the floor remainder goes to the rightmost item, so the
targets plus the dividers fill the span exactly.
"""

from ..telemetry import get_logger
from .edges import EdgeTags, locked_pairs
from .grouper import Group, subgroups, top_left

logger = get_logger(__name__)


def plan_widths(
    tab_width: int,
    groups: list[Group],
    locked: list[int],
    tags: EdgeTags,
) -> dict[str, int]:
    """Compute the target width of every pane.

    Args:
        tab_width: Tab width in columns (rightmost pane edge)
        groups: Column groups, left to right
        locked: Indices of groups whose left boundary is locked
        tags: vsplitedge per pane id

    Returns:
        pane id -> target width in cells
    """
    if not groups:
        return {}

    if locked:
        group_widths = segment_widths(
            [top_left(group).left for group in groups], locked, tab_width, origin=0
        )
    else:
        group_widths = share_span(tab_width, len(groups))

    targets: dict[str, int] = {}
    for group, group_width in zip(groups, group_widths):
        if len(group) == 1:
            targets[group[0].pane_id] = group_width
            continue

        for row in subgroups(group):
            row = sorted(row, key=lambda pane: pane.left)
            inner = locked_pairs(row, tags) if locked else []
            if inner:
                widths = segment_widths(
                    [pane.left for pane in row], inner, row[-1].right, origin=row[0].left
                )
            else:
                widths = share_span(group_width, len(row))
            for pane, width in zip(row, widths):
                targets[pane.pane_id] = width

    logger.debug(f"[Equalize] target widths: {targets}")
    return targets


def segment_widths(lefts: list[int], locked: list[int], right_edge: int, origin: int) -> list[int]:
    """Share each span between locked boundaries evenly among its items.

    Args:
        lefts: Left column of each item, left to right
        locked: Ascending indices of items whose left boundary is locked (>= 1)
        right_edge: Column just past the last item
        origin: Left column of the first item

    Returns:
        Width per item
    """
    # each locked divider sits one column left of the item it precedes
    bounds = [origin, *(lefts[index] for index in locked), right_edge + 1]
    starts = [0, *locked, len(lefts)]

    widths: list[int] = []
    for (begin, end), (start, stop) in zip(zip(bounds, bounds[1:]), zip(starts, starts[1:])):
        widths.extend(share_span(end - begin - 1, stop - start))
    return widths


def share_span(span: int, count: int) -> list[int]:
    """Split ``span`` cells among ``count`` items separated by dividers.

    Returns:
        Width per item; the rightmost item takes the floor remainder
    """
    usable = span - (count - 1)
    base, remainder = divmod(usable, count)
    return [base] * (count - 1) + [base + remainder]
