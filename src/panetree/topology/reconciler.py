"""Reconciler - keep the Topology Store in step with the live layout

Steps:
1. register every live window
2. drop stored windows and tabs that are no longer live
3. per live tab, create skeletons for new panes and drop vanished panes
4. sweep the remaining records and clear references to vanished panes,
   removing children[i] and directions[i] together

Inconsistency is corrected, never reported as an error. Running twice with no
live change between the runs leaves the store untouched.
"""

from dataclasses import dataclass

from ..adapters.models import LayoutData
from ..core.ids import PaneKey
from ..telemetry import get_logger, metrics
from .store import TopologyStore

logger = get_logger(__name__)


@dataclass
class ReconcileReport:
    """What a reconcile pass changed"""

    created: int = 0
    pruned_panes: int = 0
    pruned_tabs: int = 0
    pruned_windows: int = 0
    repaired_refs: int = 0

    @property
    def changed(self) -> bool:
        return any((
            self.created, self.pruned_panes, self.pruned_tabs,
            self.pruned_windows, self.repaired_refs,
        ))


def reconcile(store: TopologyStore, layout: LayoutData) -> ReconcileReport:
    """Synchronize the store against a live layout.

    Args:
        store: Topology store to update in place
        layout: Live window/tab/pane enumeration

    Returns:
        ReconcileReport describing the changes
    """
    report = ReconcileReport()
    live_windows = {window.window_id for window in layout.windows}

    for window_id in store.window_ids():
        if window_id not in live_windows:
            report.pruned_panes += store.remove_window(window_id)
            report.pruned_windows += 1
            logger.info(f"[Reconcile] Removed old window: {window_id}")

    for window in layout.windows:
        if store.add_window(window.window_id):
            logger.info(f"[Reconcile] Initialized window {window.window_id}")
        _reconcile_window(store, window, report)

    _sweep_references(store, report)

    if report.changed:
        metrics.inc("reconcile.created", value=report.created)
        metrics.inc("reconcile.pruned", value=report.pruned_panes)
        logger.debug(f"[Reconcile] {report}")
    return report


def _reconcile_window(store: TopologyStore, window, report: ReconcileReport) -> None:
    live_tabs = {tab.tab_id for tab in window.tabs}

    for tab_id in store.tab_ids(window.window_id):
        if tab_id not in live_tabs:
            report.pruned_panes += store.remove_tab(window.window_id, tab_id)
            report.pruned_tabs += 1
            logger.info(f"[Reconcile] Removed old tab: {tab_id} from window {window.window_id}")

    for tab in window.tabs:
        live_panes = set(tab.pane_ids())
        for pane_id in tab.pane_ids():
            _, created = store.ensure(PaneKey(window.window_id, tab.tab_id, pane_id))
            if created:
                report.created += 1
                logger.info(
                    f"[Reconcile] Initialized pane w:{window.window_id} t:{tab.tab_id} p:{pane_id}"
                )

        for pane_id in store.pane_ids(window.window_id, tab.tab_id):
            if pane_id not in live_panes:
                store.remove(PaneKey(window.window_id, tab.tab_id, pane_id))
                report.pruned_panes += 1
                logger.info(f"[Reconcile] Removed old pane: {pane_id} from tab {tab.tab_id}")


def _sweep_references(store: TopologyStore, report: ReconcileReport) -> None:
    for window_id in store.window_ids():
        for tab_id in store.tab_ids(window_id):
            nodes = store.tab_nodes(window_id, tab_id)
            for pane_id, node in nodes.items():
                if node.parent is not None and node.parent not in nodes:
                    logger.info(f"[Reconcile] {pane_id}: cleared dangling parent {node.parent}")
                    node.parent = None
                    report.repaired_refs += 1

                # iterate backwards so pops keep earlier indices valid
                for index in range(len(node.children) - 1, -1, -1):
                    if node.children[index] not in nodes:
                        child, _ = node.remove_child_at(index)
                        logger.info(f"[Reconcile] {pane_id}: cleared dangling child {child}")
                        report.repaired_refs += 1
