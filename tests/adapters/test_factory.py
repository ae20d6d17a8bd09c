"""Tests for adapter factory."""

from unittest.mock import patch

import pytest

from panetree.adapters import create_adapter, detect_terminal_type
from panetree.adapters.tmux import TmuxAdapter
from panetree.adapters.wezterm import WezTermAdapter


class TestDetectTerminalType:
    """Tests for detect_terminal_type function."""

    def test_detect_tmux_when_tmux_set(self):
        """Detect tmux when $TMUX environment variable is set."""
        with patch.dict("os.environ", {"TMUX": "/tmp/tmux-1000/default,12345,0"}):
            assert detect_terminal_type() == "tmux"

    def test_detect_wezterm_when_tmux_not_set(self):
        """Detect WezTerm when $TMUX is not set."""
        with patch.dict("os.environ", {}, clear=True):
            assert detect_terminal_type() == "wezterm"

    def test_empty_tmux_variable(self):
        with patch.dict("os.environ", {"TMUX": ""}):
            assert detect_terminal_type() == "wezterm"


class TestCreateAdapter:
    """Tests for create_adapter function."""

    def test_create_wezterm_adapter(self):
        adapter = create_adapter(adapter_type="wezterm", wezterm_bin="/opt/wezterm")
        assert isinstance(adapter, WezTermAdapter)
        assert adapter.client._binary == "/opt/wezterm"

    def test_create_tmux_adapter(self):
        """Create tmux adapter."""
        adapter = create_adapter(adapter_type="tmux")
        assert isinstance(adapter, TmuxAdapter)
        assert adapter.name == "tmux"

    def test_create_tmux_adapter_with_socket(self):
        """Create tmux adapter with custom socket path."""
        adapter = create_adapter(adapter_type="tmux", socket_path="/tmp/test.sock")
        assert adapter.client._socket_path == "/tmp/test.sock"

    def test_auto_detects(self):
        with patch.dict("os.environ", {"TMUX": "/tmp/tmux-1000/default,1,0"}):
            assert isinstance(create_adapter(adapter_type="auto"), TmuxAdapter)

    def test_default_from_config(self):
        with patch("panetree.config.TERMINAL_ADAPTER", "wezterm"):
            assert isinstance(create_adapter(), WezTermAdapter)

    def test_unknown_adapter_type_raises(self):
        """Unknown adapter type raises ValueError."""
        with pytest.raises(ValueError, match="Unknown adapter type"):
            create_adapter(adapter_type="kitty")
