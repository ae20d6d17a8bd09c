"""Grouper - column groups and row subgroups from live geometry

A group is a left-to-right column of panes; a subgroup is the set of panes in
one group that share a ``top`` row. The ``top == 0`` subgroup is the spine used
to probe the group's outer edges.
"""

from ..adapters.models import PaneInfo

Group = list[PaneInfo]


def tab_rows(panes: list[PaneInfo]) -> int:
    """Full tab height in rows."""
    return max((pane.bottom for pane in panes), default=0)


def group_panes(panes: list[PaneInfo]) -> list[Group]:
    """Split a tab's panes (host order) into column groups.

    A group is closed when the current pane spans the full height, the next
    pane spans the full height, or the next pane starts a new column at the
    top of the tab.

    Args:
        panes: Live panes of one tab in host-reported order

    Returns:
        Groups, left to right
    """
    nrows = tab_rows(panes)
    groups: list[Group] = []
    current: Group = []

    for index, pane in enumerate(panes):
        current.append(pane)
        following = panes[index + 1] if index + 1 < len(panes) else None
        if (
            following is None
            or pane.height >= nrows
            or following.height >= nrows
            or (following.top < pane.top and following.top == 0)
        ):
            groups.append(current)
            current = []

    return groups


def subgroups(group: Group) -> list[Group]:
    """Bucket a group's panes by ``top``, in first-appearance order."""
    buckets: dict[int, Group] = {}
    for pane in group:
        buckets.setdefault(pane.top, []).append(pane)
    return list(buckets.values())


def spine(group: Group) -> Group:
    """Panes of the group's top row, left to right."""
    if not group:
        return []
    top = min(pane.top for pane in group)
    return sorted((pane for pane in group if pane.top == top), key=lambda p: p.left)


def top_left(group: Group) -> PaneInfo:
    return spine(group)[0]


def top_right(group: Group) -> PaneInfo:
    return spine(group)[-1]


def group_index_of(groups: list[Group], pane_id: str) -> int | None:
    """Index of the group holding a pane."""
    for index, group in enumerate(groups):
        if any(pane.pane_id == pane_id for pane in group):
            return index
    return None
