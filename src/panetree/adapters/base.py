"""Multiplexer Adapter abstract interface

Unified interface over the terminal multiplexers panetree drives:
- WezTerm (wezterm cli)
- tmux

Design:
1. Minimal interface: only the primitives the topology engine needs
2. Host-agnostic layout: Window/Tab/Pane model with cell geometry
3. Async first: every host round trip is a coroutine
4. Commands report failure by returning False/None, never by raising
"""

from abc import ABC, abstractmethod

from ..topology.types import Direction, SplitSize
from .models import LayoutData


class MultiplexerAdapter(ABC):
    """Multiplexer adapter interface

    Example:
        adapter = create_adapter("wezterm")
        layout = await adapter.get_layout()
        await adapter.activate_pane("3")
        left = await adapter.get_pane_direction("3", Direction.LEFT)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Adapter name ("wezterm", "tmux")"""

    @abstractmethod
    async def get_layout(self) -> LayoutData | None:
        """Enumerate every window, tab and pane.

        Returns:
            Layout snapshot, or None if the host could not be queried
        """

    @abstractmethod
    async def activate_pane(self, pane_id: str) -> bool:
        """Focus a pane.

        Returns:
            Whether the host accepted the command
        """

    @abstractmethod
    async def get_pane_direction(self, pane_id: str, direction: Direction) -> str | None:
        """Pane directly next to ``pane_id`` on the given side.

        Returns:
            Neighbor pane id, or None at the edge of the tab
        """

    @abstractmethod
    async def split_pane(self, pane_id: str, direction: Direction, size: SplitSize) -> bool:
        """Split a pane; the new pane appears on the ``direction`` side.

        The new pane id is not reported; callers diff the layout.
        """

    @abstractmethod
    async def close_pane(self, pane_id: str, confirm: bool = True) -> bool:
        """Close a pane.

        Args:
            pane_id: Pane to close
            confirm: Ask before closing, where the host supports it
        """

    @abstractmethod
    async def adjust_pane_size(self, pane_id: str, direction: Direction, amount: int) -> bool:
        """Move the pane's divider ``amount`` cells toward ``direction``."""
