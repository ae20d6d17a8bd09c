"""PanetreeEngine - command dispatch over the topology store

Responsibilities:
- serialize commands (one at a time, run to completion)
- reconcile the store against the live layout before every command
- run the pure planners and issue the resulting host commands
- apply and confirm: after each host command, poll the layout until the
  expected state is observed or the settle timeout elapses
"""

import asyncio
from collections.abc import Callable

from . import config
from .adapters.base import MultiplexerAdapter
from .adapters.models import LayoutData, PaneInfo, TabInfo, WindowInfo
from .commands import (
    CloseCommand,
    Command,
    CommandResult,
    EqualizeCommand,
    PaneTarget,
    ReconcileCommand,
    SplitCommand,
)
from .core.ids import PaneKey, newest_pane
from .equalize import (
    find_locked_boundaries,
    governed_column,
    group_panes,
    locked_columns,
    pane_visit_order,
    plan_probes,
    plan_resize,
    plan_widths,
    sequence_groups,
    vertical_tags,
)
from .equalize.sequencer import Probe
from .errors import AdapterError, TopologyError
from .telemetry import format_pane_log, get_logger, metrics
from .topology import (
    Direction,
    SplitSize,
    TopologyStore,
    apply_close,
    apply_split,
    reconcile,
    reset_survivor,
)

logger = get_logger(__name__)


class PanetreeEngine:
    """Runs split / close / equalize / reconcile against one multiplexer.

    Example:
        engine = PanetreeEngine(create_adapter("wezterm"))
        await engine.dispatch(ReconcileCommand())
        await engine.dispatch(SplitCommand(Direction.RIGHT))
        await engine.dispatch(EqualizeCommand())
    """

    def __init__(
        self,
        adapter: MultiplexerAdapter,
        store: TopologyStore | None = None,
        settle_delay: float | None = None,
        poll_interval: float | None = None,
        settle_timeout: float | None = None,
    ):
        """Initialize

        Args:
            adapter: Multiplexer adapter
            store: Topology store (default: a new empty store)
            settle_delay: Wait before the first confirmation poll
            poll_interval: Interval between confirmation polls
            settle_timeout: Give up confirming after this many seconds
        """
        self._adapter = adapter
        self._store = store or TopologyStore()
        self._settle_delay = config.SETTLE_DELAY_SECONDS if settle_delay is None else settle_delay
        self._poll_interval = config.SETTLE_POLL_INTERVAL if poll_interval is None else poll_interval
        self._settle_timeout = (
            config.SETTLE_TIMEOUT_SECONDS if settle_timeout is None else settle_timeout
        )
        self._lock = asyncio.Lock()

    @property
    def adapter(self) -> MultiplexerAdapter:
        return self._adapter

    @property
    def store(self) -> TopologyStore:
        return self._store

    # === Dispatch ===

    async def dispatch(self, command: Command) -> CommandResult:
        """Run one command to completion.

        Raises:
            AdapterError: The host could not be queried
            TopologyError: The target pane is not live or has no record
        """
        async with self._lock:
            if isinstance(command, SplitCommand):
                return await self._split(command)
            if isinstance(command, CloseCommand):
                return await self._close(command)
            if isinstance(command, EqualizeCommand):
                return await self._equalize(command)
            if isinstance(command, ReconcileCommand):
                return await self._reconcile()
        raise TypeError(f"Unknown command: {command!r}")

    # === Reconcile ===

    async def _reconcile(self) -> CommandResult:
        layout = await self._require_layout()
        report = reconcile(self._store, layout)
        return CommandResult(
            success=True,
            message=(
                f"Reconciled: {report.created} created, {report.pruned_panes} pruned, "
                f"{report.repaired_refs} references repaired"
            ),
        )

    async def _sync(self) -> LayoutData:
        layout = await self._require_layout()
        reconcile(self._store, layout)
        return layout

    # === Split ===

    async def _split(self, command: SplitCommand) -> CommandResult:
        layout = await self._sync()
        window, tab, pane = self._resolve(layout, command.target)
        source_key = PaneKey(window.window_id, tab.tab_id, pane.pane_id)
        self._store.require(source_key)

        size = command.size
        if size.percent is None and size.cells is None:
            size = SplitSize(percent=config.DEFAULT_SPLIT_PERCENT)

        before = set(tab.pane_ids())
        logger.info("[Split] " + format_pane_log(
            window.window_id, tab.tab_id, pane.pane_id,
            f"{command.direction.value} {size.describe()}",
        ))
        if not await self._adapter.split_pane(pane.pane_id, command.direction, size):
            return CommandResult(False, f"Host refused to split pane {pane.pane_id}")

        after = await self._settle(
            lambda live: self._new_pane_in(live, window.window_id, tab.tab_id, before) is not None,
            f"new pane after splitting {pane.pane_id}",
        )
        new_id = self._new_pane_in(after, window.window_id, tab.tab_id, before) if after else None
        if new_id is None:
            metrics.inc("split.unidentified")
            logger.warning(
                f"[Split] could not identify the pane created from {pane.pane_id}; "
                "the next reconcile will pick it up"
            )
            return CommandResult(True, f"Split pane {pane.pane_id}; new pane not identified")

        apply_split(
            self._store, window.window_id, tab.tab_id, pane.pane_id, new_id, command.direction
        )
        return CommandResult(
            True, f"Split pane {pane.pane_id} {command.direction.value} -> {new_id}", pane_id=new_id
        )

    @staticmethod
    def _new_pane_in(layout: LayoutData, window_id: str, tab_id: str, before: set[str]) -> str | None:
        tab = layout.get_tab(window_id, tab_id)
        if tab is None:
            return None
        return newest_pane(before, tab.pane_ids())

    # === Close ===

    async def _close(self, command: CloseCommand) -> CommandResult:
        layout = await self._sync()
        window, tab, pane = self._resolve(layout, command.target)
        window_id, tab_id, pane_id = window.window_id, tab.tab_id, pane.pane_id
        self._store.require(PaneKey(window_id, tab_id, pane_id))

        await self._activate(pane_id)
        left_id = await self._adapter.get_pane_direction(pane_id, Direction.LEFT)
        right_id = await self._adapter.get_pane_direction(pane_id, Direction.RIGHT)

        snapshot = self._store.snapshot_tab(window_id, tab_id)
        outcome = apply_close(self._store, window_id, tab_id, pane_id, left_id, right_id)
        logger.debug(f"[Close] {pane_id}: {outcome}")

        if not await self._adapter.close_pane(pane_id, confirm=command.confirm):
            self._store.restore_tab(window_id, tab_id, snapshot)
            logger.warning(f"[Close] host refused to close {pane_id}, split tree restored")
            return CommandResult(False, f"Host refused to close pane {pane_id}")

        after = await self._settle(
            lambda live: live.locate(pane_id) is None, f"pane {pane_id} to disappear"
        )
        remaining = after.get_tab(window_id, tab_id) if after else None
        if remaining is not None:
            reset_survivor(self._store, window_id, tab_id, remaining.pane_ids())
        return CommandResult(True, f"Closed pane {pane_id}", pane_id=pane_id)

    # === Equalize ===

    async def _equalize(self, command: EqualizeCommand) -> CommandResult:
        layout = await self._sync()
        window, tab, pane = self._resolve(layout, command.target)
        window_id, tab_id = window.window_id, tab.tab_id

        if len(tab.panes) < 2:
            return CommandResult(True, "Nothing to equalize", pane_id=pane.pane_id)

        nodes = self._store.tab_nodes(window_id, tab_id)
        tags = vertical_tags(nodes)
        groups = group_panes(tab.panes)
        locked = find_locked_boundaries(groups, tags)
        targets = plan_widths(tab.column_width, groups, locked, tags)

        probes = plan_probes(groups, nodes)
        neighbors = await self._probe_neighbors(probes)
        sequence = sequence_groups(groups, probes, tags, neighbors)
        frozen = locked_columns(groups, locked)
        logger.info(
            f"[Equalize] t:{tab_id} {len(groups)} groups, locked={locked}, sequence={sequence}"
        )

        resizes = 0
        for index in sequence:
            for pane_id in pane_visit_order(groups[index], nodes):
                if await self._equalize_pane(
                    window_id, tab_id, pane_id, tags.get(pane_id), targets.get(pane_id), frozen
                ):
                    resizes += 1

        await self._activate(pane.pane_id)
        return CommandResult(
            True,
            f"Equalized {len(groups)} groups with {resizes} resizes",
            pane_id=pane.pane_id,
            resizes=resizes,
        )

    async def _probe_neighbors(self, probes: list[Probe]) -> dict[tuple[str, Direction], str | None]:
        neighbors: dict[tuple[str, Direction], str | None] = {}
        for probe in probes:
            for pane_id, direction in probe.queries:
                if (pane_id, direction) in neighbors:
                    continue
                await self._activate(pane_id)
                neighbors[(pane_id, direction)] = await self._adapter.get_pane_direction(
                    pane_id, direction
                )
        return neighbors

    async def _equalize_pane(
        self,
        window_id: str,
        tab_id: str,
        pane_id: str,
        tag: Direction | None,
        target: int | None,
        frozen: set[int],
    ) -> bool:
        """Bring one pane to its target width.

        Returns:
            Whether a resize command was issued
        """
        if target is None:
            return False

        layout = await self._activate(pane_id) or await self._require_layout()
        tab = layout.get_tab(window_id, tab_id)
        live = tab.get_pane(pane_id) if tab else None
        if live is None:
            logger.warning(f"[Equalize] pane {pane_id} vanished, skipped")
            return False

        resize = plan_resize(pane_id, tag, live.width, target)
        if resize is None:
            return False

        column = governed_column(live, tag, tab.column_width)
        if column is not None and column in frozen:
            metrics.inc("equalize.locked_refused")
            logger.warning(f"[Equalize] {pane_id}: refusing to move locked boundary at column {column}")
            return False

        if not await self._adapter.adjust_pane_size(pane_id, resize.direction, resize.amount):
            logger.warning(f"[Equalize] host refused to resize {pane_id}")
            return False

        metrics.inc("equalize.resize")
        logger.info(
            f"[Equalize] {pane_id}: {live.width} -> {target} "
            f"({resize.direction.value} {resize.amount})"
        )
        await self._settle(
            lambda current: self._width_of(current, window_id, tab_id, pane_id) != live.width,
            f"resize of {pane_id}",
        )
        return True

    @staticmethod
    def _width_of(layout: LayoutData, window_id: str, tab_id: str, pane_id: str) -> int | None:
        tab = layout.get_tab(window_id, tab_id)
        pane = tab.get_pane(pane_id) if tab else None
        return pane.width if pane else None

    # === Host helpers ===

    async def _require_layout(self) -> LayoutData:
        layout = await self._adapter.get_layout()
        if layout is None:
            raise AdapterError(f"{self._adapter.name}: could not read the pane layout")
        return layout

    def _resolve(
        self, layout: LayoutData, target: PaneTarget
    ) -> tuple[WindowInfo, TabInfo, PaneInfo]:
        pane_id = target.pane_id or layout.active_pane_id
        if pane_id is None:
            raise AdapterError(f"{self._adapter.name}: no pane given and no active pane")

        located = layout.locate(pane_id)
        if located is None:
            raise TopologyError(f"Pane {pane_id} is not live")

        window, tab, pane = located
        if (target.window_id and target.window_id != window.window_id) or (
            target.tab_id and target.tab_id != tab.tab_id
        ):
            logger.warning(
                f"[Engine] pane {pane_id} lives in w:{window.window_id} t:{tab.tab_id}, "
                f"not w:{target.window_id} t:{target.tab_id}"
            )
        return window, tab, pane

    async def _activate(self, pane_id: str) -> LayoutData | None:
        """Activate a pane and wait until the host reports it active."""
        if not await self._adapter.activate_pane(pane_id):
            logger.warning(f"[Engine] host refused to activate {pane_id}")
            return None
        return await self._settle(
            lambda layout: self._is_active(layout, pane_id), f"activation of {pane_id}"
        )

    @staticmethod
    def _is_active(layout: LayoutData, pane_id: str) -> bool:
        located = layout.locate(pane_id)
        return located is not None and located[2].is_active

    async def _settle(
        self, predicate: Callable[[LayoutData], bool], what: str
    ) -> LayoutData | None:
        """Poll the layout until ``predicate`` holds or the timeout elapses.

        Returns:
            The last layout read (None if the host could not be queried)
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._settle_timeout
        await asyncio.sleep(self._settle_delay)

        while True:
            layout = await self._adapter.get_layout()
            if layout is not None and predicate(layout):
                return layout
            if loop.time() >= deadline:
                metrics.inc("settle.timeout")
                logger.warning(
                    f"[Engine] {what} not observed after {self._settle_timeout}s, continuing"
                )
                return layout
            await asyncio.sleep(self._poll_interval)
