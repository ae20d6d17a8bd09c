"""Pane identifier utilities

Hosts expose pane ids in different shapes:
- WezTerm: bare integers ("0", "7")
- tmux: percent-prefixed integers ("%0", "%7"); windows "@1", sessions "$0"

The store keeps every id as a string. Hosts allocate pane ids in increasing
order and never reuse them, so the numeric part doubles as the pane's creation
order.
"""

import re
from dataclasses import dataclass

_NUMERIC_PART = re.compile(r"(\d+)$")


@dataclass(frozen=True, order=True)
class PaneKey:
    """Composite key of a pane record: (window, tab, pane)."""

    window_id: str
    tab_id: str
    pane_id: str

    def __str__(self) -> str:
        return f"w:{self.window_id} t:{self.tab_id} p:{self.pane_id}"


def pane_number(pane_id: str) -> int | None:
    """Extract the numeric part of a pane id.

    Args:
        pane_id: Host pane id ("7", "%7")

    Returns:
        The trailing integer, or None if the id has no numeric part
    """
    match = _NUMERIC_PART.search(pane_id)
    if match is None:
        return None
    return int(match.group(1))


def pane_sort_key(pane_id: str) -> tuple[int, int, str]:
    """Sort key ordering pane ids by creation.

    Ids without a numeric part sort after all numeric ids, by text.
    """
    number = pane_number(pane_id)
    if number is None:
        return (1, 0, pane_id)
    return (0, number, pane_id)


def creation_order(pane_ids) -> list[str]:
    """Return pane ids sorted by creation order."""
    return sorted(pane_ids, key=pane_sort_key)


def newest_pane(before: set[str], after) -> str | None:
    """Identify the pane created between two enumerations of a tab.

    The new pane is the highest-numbered id in ``after`` that is higher than
    every id in ``before``.

    Args:
        before: Pane ids of the tab before the split
        after: Pane ids of the tab after the split

    Returns:
        The new pane id, or None if the host reported no higher id
    """
    ceiling = max((pane_sort_key(p) for p in before), default=None)
    candidates = [
        p for p in after
        if p not in before and (ceiling is None or pane_sort_key(p) > ceiling)
    ]
    if not candidates:
        return None
    return max(candidates, key=pane_sort_key)
