"""Topology Store - split-tree records of every known pane

A flat map keyed by PaneKey(window, tab, pane). One store instance lives for
the whole daemon process and is passed explicitly to the reconciler, the
mutators and the equalize pipeline.
"""

from collections.abc import Iterator
from dataclasses import replace

from ..core.ids import PaneKey, pane_sort_key
from ..errors import TopologyError
from .types import PaneNode


class TopologyStore:
    """Split-tree records keyed by (window, tab, pane)."""

    def __init__(self):
        self._nodes: dict[PaneKey, PaneNode] = {}
        # windows seen live; a window may briefly have no pane records
        self._windows: set[str] = set()

    # === Lookup ===

    def get(self, key: PaneKey) -> PaneNode | None:
        return self._nodes.get(key)

    def require(self, key: PaneKey) -> PaneNode:
        """Get a record that must exist.

        Raises:
            TopologyError: The pane has no record (reconcile was skipped)
        """
        node = self._nodes.get(key)
        if node is None:
            raise TopologyError(f"No topology record for {key}; reconcile before mutating")
        return node

    def __contains__(self, key: PaneKey) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[PaneKey]:
        return iter(list(self._nodes))

    def window_ids(self) -> list[str]:
        return sorted(self._windows | {k.window_id for k in self._nodes})

    def tab_ids(self, window_id: str) -> list[str]:
        return sorted({k.tab_id for k in self._nodes if k.window_id == window_id})

    def pane_ids(self, window_id: str, tab_id: str) -> list[str]:
        """Pane ids of a tab in creation order."""
        ids = [k.pane_id for k in self._nodes if k.window_id == window_id and k.tab_id == tab_id]
        return sorted(ids, key=pane_sort_key)

    def tab_nodes(self, window_id: str, tab_id: str) -> dict[str, PaneNode]:
        """Records of one tab, keyed by pane id, in creation order."""
        return {
            pane_id: self._nodes[PaneKey(window_id, tab_id, pane_id)]
            for pane_id in self.pane_ids(window_id, tab_id)
        }

    # === Mutation ===

    def add_window(self, window_id: str) -> bool:
        """Register a window container. Returns True if it was new."""
        if window_id in self._windows:
            return False
        self._windows.add(window_id)
        return True

    def ensure(self, key: PaneKey) -> tuple[PaneNode, bool]:
        """Get the record for key, creating a blank skeleton if missing.

        Returns:
            (node, created)
        """
        node = self._nodes.get(key)
        if node is not None:
            return node, False
        node = PaneNode()
        self._nodes[key] = node
        self._windows.add(key.window_id)
        return node, True

    def put(self, key: PaneKey, node: PaneNode) -> None:
        self._nodes[key] = node
        self._windows.add(key.window_id)

    def remove(self, key: PaneKey) -> PaneNode | None:
        return self._nodes.pop(key, None)

    def remove_tab(self, window_id: str, tab_id: str) -> int:
        """Drop every record of a tab. Returns the number removed."""
        keys = [k for k in self._nodes if k.window_id == window_id and k.tab_id == tab_id]
        for key in keys:
            del self._nodes[key]
        return len(keys)

    def remove_window(self, window_id: str) -> int:
        """Drop a window and all its records. Returns the number removed."""
        keys = [k for k in self._nodes if k.window_id == window_id]
        for key in keys:
            del self._nodes[key]
        self._windows.discard(window_id)
        return len(keys)

    def snapshot_tab(self, window_id: str, tab_id: str) -> dict[str, PaneNode]:
        """Copies of one tab's records, independent of later mutation."""
        return {
            pane_id: replace(node, children=list(node.children), directions=list(node.directions))
            for pane_id, node in self.tab_nodes(window_id, tab_id).items()
        }

    def restore_tab(self, window_id: str, tab_id: str, snapshot: dict[str, PaneNode]) -> None:
        """Replace a tab's records with a snapshot taken by snapshot_tab."""
        self.remove_tab(window_id, tab_id)
        for pane_id, node in snapshot.items():
            self.put(PaneKey(window_id, tab_id, pane_id), node)

    # === Inspection ===

    def to_dict(self) -> dict:
        """Nested {window: {tab: {pane: fields}}}, deterministically ordered."""
        result: dict[str, dict] = {}
        for window_id in self.window_ids():
            tabs: dict[str, dict] = {}
            for tab_id in self.tab_ids(window_id):
                tabs[tab_id] = {
                    pane_id: node.to_dict()
                    for pane_id, node in self.tab_nodes(window_id, tab_id).items()
                }
            result[window_id] = tabs
        return result

    def check_tab(self, window_id: str, tab_id: str) -> list[str]:
        """Check the structural invariants of one tab.

        Returns:
            Human-readable problems; empty when the tab is consistent
        """
        problems = []
        nodes = self.tab_nodes(window_id, tab_id)
        for pane_id, node in nodes.items():
            if len(node.children) != len(node.directions):
                problems.append(
                    f"{pane_id}: {len(node.children)} children but {len(node.directions)} directions"
                )
            if node.parent is not None and node.parent not in nodes:
                problems.append(f"{pane_id}: dangling parent {node.parent}")
            for child in node.children:
                if child not in nodes:
                    problems.append(f"{pane_id}: dangling child {child}")

        # Walk up the parent chain; revisiting a pane means a cycle
        for pane_id in nodes:
            seen = {pane_id}
            current = nodes[pane_id].parent
            while current is not None and current in nodes:
                if current in seen:
                    problems.append(f"{pane_id}: parent cycle through {current}")
                    break
                seen.add(current)
                current = nodes[current].parent
        return problems
