"""Directional adjacency computed from pane rectangles

Panes are separated by one-cell dividers, so the pane left of P ends at
``P.left - 1``.
"""

from ..topology.types import Direction
from .models import PaneInfo, TabInfo


def _overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    return start_a < end_b and start_b < end_a


def _touches(pane: PaneInfo, other: PaneInfo, direction: Direction) -> bool:
    if direction is Direction.LEFT:
        return other.right + 1 == pane.left and _overlaps(pane.top, pane.bottom, other.top, other.bottom)
    if direction is Direction.RIGHT:
        return pane.right + 1 == other.left and _overlaps(pane.top, pane.bottom, other.top, other.bottom)
    if direction is Direction.UP:
        return other.bottom + 1 == pane.top and _overlaps(pane.left, pane.right, other.left, other.right)
    return pane.bottom + 1 == other.top and _overlaps(pane.left, pane.right, other.left, other.right)


def find_adjacent(tab: TabInfo, pane_id: str, direction: Direction) -> str | None:
    """Pane directly next to ``pane_id`` on one side.

    When several panes touch that side, the one level with the pane's top row
    (or left column, for Up/Down) wins.

    Returns:
        Neighbor pane id, or None
    """
    pane = tab.get_pane(pane_id)
    if pane is None:
        return None

    candidates = [
        other for other in tab.panes
        if other.pane_id != pane_id and _touches(pane, other, direction)
    ]
    if not candidates:
        return None

    if direction.is_vertical_split:
        aligned = [c for c in candidates if c.top <= pane.top < c.bottom]
        fallback = min(candidates, key=lambda c: c.top)
    else:
        aligned = [c for c in candidates if c.left <= pane.left < c.right]
        fallback = min(candidates, key=lambda c: c.left)
    return (aligned[0] if aligned else fallback).pane_id
