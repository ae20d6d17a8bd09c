"""Tests for TmuxClient."""

from unittest.mock import AsyncMock, patch

import pytest

from panetree.adapters.tmux.client import TmuxClient


def _proc(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> AsyncMock:
    proc = AsyncMock()
    proc.communicate.return_value = (stdout, stderr)
    proc.returncode = returncode
    return proc


class TestTmuxClient:
    """Tests for TmuxClient class."""

    def test_init_default(self):
        """Test TmuxClient initialization with defaults."""
        client = TmuxClient()
        assert client._socket_path is None

    def test_init_with_socket(self):
        """Test TmuxClient initialization with custom socket."""
        client = TmuxClient(socket_path="/tmp/tmux-test/default")
        assert client._socket_path == "/tmp/tmux-test/default"

    @pytest.mark.asyncio
    async def test_run_success(self):
        """Test running tmux command successfully."""
        client = TmuxClient()

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = _proc(b"output\n")

            result = await client.run("list-sessions")

            assert result == "output\n"
            call_args = mock_exec.call_args[0]
            assert call_args[0] == "tmux"
            assert "list-sessions" in call_args

    @pytest.mark.asyncio
    async def test_run_with_socket(self):
        """Test running tmux command with socket path."""
        client = TmuxClient(socket_path="/tmp/test.sock")

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = _proc(b"ok\n")

            await client.run("list-windows")

            call_args = mock_exec.call_args[0]
            assert call_args[:3] == ("tmux", "-S", "/tmp/test.sock")

    @pytest.mark.asyncio
    async def test_run_failure(self):
        """Test running tmux command that fails."""
        client = TmuxClient()

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = _proc(stderr=b"error: no server running\n", returncode=1)
            assert await client.run("list-sessions") is None

    @pytest.mark.asyncio
    async def test_run_missing_binary(self):
        """tmux not installed"""
        client = TmuxClient()

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.side_effect = FileNotFoundError("tmux")
            assert await client.run("list-sessions") is None

    @pytest.mark.asyncio
    async def test_list_windows(self):
        """Test listing tmux windows."""
        client = TmuxClient()
        output = "$0\tmain\t@1\tbash\t80\t24\n$0\tmain\t@2\tvim\t120\t40\n"

        with patch.object(client, "run", new_callable=AsyncMock, return_value=output):
            windows = await client.list_windows()

        assert windows == [
            {"session_id": "$0", "session_name": "main", "window_id": "@1",
             "window_name": "bash", "width": 80, "height": 24},
            {"session_id": "$0", "session_name": "main", "window_id": "@2",
             "window_name": "vim", "width": 120, "height": 40},
        ]

    @pytest.mark.asyncio
    async def test_list_windows_skips_malformed(self):
        client = TmuxClient()
        output = "$0\tmain\t@1\tbash\tnope\t24\n$0\tmain\n"

        with patch.object(client, "run", new_callable=AsyncMock, return_value=output):
            assert await client.list_windows() == []

    @pytest.mark.asyncio
    async def test_list_panes(self):
        """Test listing tmux panes with geometry."""
        client = TmuxClient()
        output = "%0\t$0\t@1\tzsh\t0\t0\t40\t24\t1\n%3\t$0\t@1\tvim\t41\t0\t39\t24\t0\n"

        with patch.object(client, "run", new_callable=AsyncMock, return_value=output):
            panes = await client.list_panes()

        assert len(panes) == 2
        assert panes[0] == {
            "pane_id": "%0", "session_id": "$0", "window_id": "@1", "pane_name": "zsh",
            "left": 0, "top": 0, "width": 40, "height": 24, "active": True,
        }
        assert panes[1]["left"] == 41
        assert panes[1]["active"] is False

    @pytest.mark.asyncio
    async def test_list_panes_no_server(self):
        client = TmuxClient()
        with patch.object(client, "run", new_callable=AsyncMock, return_value=None):
            assert await client.list_panes() == []

    @pytest.mark.asyncio
    async def test_get_active_pane(self):
        client = TmuxClient()
        with patch.object(client, "run", new_callable=AsyncMock, return_value="%2\n"):
            assert await client.get_active_pane() == "%2"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "direction, percent, cells, expected",
        [
            ("Right", 50, None, ["-h", "-l", "50%"]),
            ("Left", None, 20, ["-h", "-b", "-l", "20"]),
            ("Down", 30, None, ["-v", "-l", "30%"]),
            ("Up", None, None, ["-v", "-b"]),
        ],
    )
    async def test_split_window(self, direction, percent, cells, expected):
        """split-window flags per direction and size"""
        client = TmuxClient()

        with patch.object(client, "run", new_callable=AsyncMock, return_value="%7\n") as mock_run:
            new_id = await client.split_window("%1", direction, percent=percent, cells=cells)

        assert new_id == "%7"
        args = list(mock_run.call_args[0])
        assert args[:3] == ["split-window", "-t", "%1"]
        assert args[3:-3] == expected
        assert args[-3:] == ["-P", "-F", "#{pane_id}"]

    @pytest.mark.asyncio
    async def test_split_window_failure(self):
        client = TmuxClient()
        with patch.object(client, "run", new_callable=AsyncMock, return_value=None):
            assert await client.split_window("%1", "Right", percent=50) is None

    @pytest.mark.asyncio
    async def test_resize_pane(self):
        client = TmuxClient()
        with patch.object(client, "run", new_callable=AsyncMock, return_value="") as mock_run:
            assert await client.resize_pane("%1", "Left", 7) is True
        mock_run.assert_called_once_with("resize-pane", "-t", "%1", "-L", "7")

    @pytest.mark.asyncio
    async def test_select_and_kill(self):
        client = TmuxClient()
        with patch.object(client, "run", new_callable=AsyncMock, return_value="") as mock_run:
            assert await client.select_pane("%1") is True
            assert await client.kill_pane("%1") is True
        assert mock_run.call_args_list[0][0] == ("select-pane", "-t", "%1")
        assert mock_run.call_args_list[1][0] == ("kill-pane", "-t", "%1")
