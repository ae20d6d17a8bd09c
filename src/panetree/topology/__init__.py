"""Topology module - split-tree model of every pane

- types: Direction, SplitSize, PaneNode
- store: TopologyStore keyed by PaneKey
- reconciler: sync the store with the live layout
- mutations: split / close bookkeeping
"""

from .types import Direction, EdgePair, PaneNode, SplitSize
from .store import TopologyStore
from .reconciler import ReconcileReport, reconcile
from .mutations import (
    ClosePatch,
    CloseOutcome,
    EdgeSlot,
    apply_close,
    apply_split,
    classify_close_patch,
    reset_survivor,
)

__all__ = [
    # Types
    "Direction",
    "EdgePair",
    "PaneNode",
    "SplitSize",
    # Store
    "TopologyStore",
    # Reconcile
    "ReconcileReport",
    "reconcile",
    # Mutations
    "ClosePatch",
    "CloseOutcome",
    "EdgeSlot",
    "apply_close",
    "apply_split",
    "classify_close_patch",
    "reset_survivor",
]
