"""WezTerm adapter implementing MultiplexerAdapter."""

from ...telemetry import get_logger
from ...topology.types import Direction, SplitSize
from ..base import MultiplexerAdapter
from ..models import LayoutData
from .client import WezTermClient
from .layout import WezTermLayoutBuilder

logger = get_logger(__name__)


class WezTermAdapter(MultiplexerAdapter):
    """WezTerm adapter.

    Wraps WezTermClient to provide the standard adapter interface.
    """

    def __init__(self, binary: str = "wezterm"):
        self._client = WezTermClient(binary=binary)
        self._layout_builder = WezTermLayoutBuilder()

    @property
    def name(self) -> str:
        return "wezterm"

    @property
    def client(self) -> WezTermClient:
        """Access underlying WezTermClient."""
        return self._client

    async def get_layout(self) -> LayoutData | None:
        """Get current layout from wezterm.

        Returns:
            LayoutData, or None when wezterm returned no panes
        """
        panes = await self._client.list_panes()
        if not panes:
            logger.warning("wezterm reported no panes")
            return None
        focused = await self._client.get_focused_pane()
        return self._layout_builder.build(panes, focused_pane_id=focused)

    async def activate_pane(self, pane_id: str) -> bool:
        return await self._client.activate_pane(pane_id)

    async def get_pane_direction(self, pane_id: str, direction: Direction) -> str | None:
        return await self._client.get_pane_direction(pane_id, direction.value)

    async def split_pane(self, pane_id: str, direction: Direction, size: SplitSize) -> bool:
        new_id = await self._client.split_pane(
            pane_id, direction.value, percent=size.percent, cells=size.cells
        )
        if new_id is None:
            return False
        logger.debug(f"wezterm split {pane_id} {direction.value} -> {new_id}")
        return True

    async def close_pane(self, pane_id: str, confirm: bool = True) -> bool:
        if confirm:
            logger.info(f"wezterm cli cannot prompt, closing {pane_id} without confirmation")
        return await self._client.kill_pane(pane_id)

    async def adjust_pane_size(self, pane_id: str, direction: Direction, amount: int) -> bool:
        return await self._client.adjust_pane_size(pane_id, direction.value, amount)
