"""Core module - host-agnostic identifiers"""

from .ids import PaneKey, creation_order, newest_pane, pane_sort_key

__all__ = [
    "PaneKey",
    "creation_order",
    "newest_pane",
    "pane_sort_key",
]
