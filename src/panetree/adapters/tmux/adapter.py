"""Tmux adapter implementing MultiplexerAdapter."""

from ...telemetry import get_logger
from ...topology.types import Direction, SplitSize
from ..base import MultiplexerAdapter
from ..geometry import find_adjacent
from ..models import LayoutData
from .client import TmuxClient
from .layout import TmuxLayoutBuilder

logger = get_logger(__name__)


class TmuxAdapter(MultiplexerAdapter):
    """Tmux adapter.

    Wraps TmuxClient to provide the standard adapter interface. Directional
    neighbors are computed from pane geometry; tmux's own ``{left-of}``
    tokens resolve relative to the client's current pane only.
    """

    def __init__(self, socket_path: str | None = None):
        """Initialize TmuxAdapter.

        Args:
            socket_path: Optional tmux socket path.
        """
        self._client = TmuxClient(socket_path=socket_path)
        self._layout_builder = TmuxLayoutBuilder()

    @property
    def name(self) -> str:
        return "tmux"

    @property
    def client(self) -> TmuxClient:
        """Access underlying TmuxClient."""
        return self._client

    async def get_layout(self) -> LayoutData | None:
        """Get current layout from tmux.

        Returns:
            LayoutData with windows/tabs/panes, or None on error.
        """
        windows = await self._client.list_windows()
        if not windows:
            logger.warning("tmux reported no windows")
            return None
        panes = await self._client.list_panes()
        active = await self._client.get_active_pane()
        return self._layout_builder.build(windows=windows, panes=panes, active_pane_id=active)

    async def activate_pane(self, pane_id: str) -> bool:
        """Activate/focus a pane.

        Returns:
            True on success, False on failure.
        """
        return await self._client.select_pane(pane_id)

    async def get_pane_direction(self, pane_id: str, direction: Direction) -> str | None:
        layout = await self.get_layout()
        if layout is None:
            return None
        located = layout.locate(pane_id)
        if located is None:
            return None
        _, tab, _ = located
        return find_adjacent(tab, pane_id, direction)

    async def split_pane(self, pane_id: str, direction: Direction, size: SplitSize) -> bool:
        new_id = await self._client.split_window(
            pane_id, direction.value, percent=size.percent, cells=size.cells
        )
        if new_id is None:
            return False
        logger.debug(f"tmux split {pane_id} {direction.value} -> {new_id}")
        return True

    async def close_pane(self, pane_id: str, confirm: bool = True) -> bool:
        if confirm:
            logger.info(f"kill-pane cannot prompt, closing {pane_id} without confirmation")
        return await self._client.kill_pane(pane_id)

    async def adjust_pane_size(self, pane_id: str, direction: Direction, amount: int) -> bool:
        return await self._client.resize_pane(pane_id, direction.value, amount)
