"""Adapter factory for creating multiplexer adapters."""

import os

from .. import config
from ..telemetry import get_logger
from .base import MultiplexerAdapter

logger = get_logger(__name__)


def detect_terminal_type() -> str:
    """Detect the multiplexer from environment.

    Returns:
        "tmux" if $TMUX is set, otherwise "wezterm"
    """
    if os.environ.get("TMUX"):
        return "tmux"
    return "wezterm"


def create_adapter(
    adapter_type: str | None = None,
    socket_path: str | None = None,
    wezterm_bin: str | None = None,
) -> MultiplexerAdapter:
    """Create a multiplexer adapter.

    Args:
        adapter_type: Adapter type ("wezterm", "tmux", "auto").
                      Default from config.
        socket_path: Tmux socket path (optional for tmux adapter)
        wezterm_bin: wezterm executable (optional for wezterm adapter)

    Returns:
        MultiplexerAdapter instance

    Raises:
        ValueError: If adapter type is unknown
    """
    if adapter_type is None:
        adapter_type = config.TERMINAL_ADAPTER

    if adapter_type == "auto":
        adapter_type = detect_terminal_type()
        logger.info(f"Auto-detected terminal type: {adapter_type}")

    if adapter_type == "wezterm":
        from .wezterm import WezTermAdapter

        return WezTermAdapter(binary=wezterm_bin or config.WEZTERM_BIN)

    if adapter_type == "tmux":
        from .tmux import TmuxAdapter

        return TmuxAdapter(socket_path=socket_path or config.TMUX_SOCKET)

    raise ValueError(f"Unknown adapter type: {adapter_type}")
