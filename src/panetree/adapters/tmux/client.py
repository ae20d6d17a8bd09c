"""Tmux client for subprocess-based tmux interaction."""

import asyncio

from ...telemetry import get_logger

logger = get_logger(__name__)

# Use tab as delimiter to avoid conflicts with colons in data (paths, names)
_FIELD_SEP = "\t"

# resize-pane flag per direction
_RESIZE_FLAGS = {
    "Left": "-L",
    "Right": "-R",
    "Up": "-U",
    "Down": "-D",
}


class TmuxClient:
    """Client for interacting with tmux via subprocess commands.

    Provides async methods for:
    - Listing windows and panes
    - Selecting panes
    - Splitting, resizing and killing panes
    """

    def __init__(self, socket_path: str | None = None):
        """Initialize TmuxClient.

        Args:
            socket_path: Optional tmux socket path. If None, uses default socket.
        """
        self._socket_path = socket_path

    async def run(self, *args: str) -> str | None:
        """Execute a tmux command.

        Args:
            *args: Command arguments (e.g., "list-windows", "-a", "-F", "...")

        Returns:
            Command stdout on success, None on failure.
        """
        cmd = ["tmux"]
        if self._socket_path:
            cmd.extend(["-S", self._socket_path])
        cmd.extend(args)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()

            if proc.returncode != 0:
                logger.warning(f"tmux command failed: {' '.join(cmd)}: {stderr.decode()}")
                return None

            return stdout.decode()

        except Exception as e:
            logger.error(f"tmux subprocess error: {e}")
            return None

    async def list_windows(self) -> list[dict]:
        """List all tmux windows across all sessions.

        Returns:
            List of window dicts with keys:
            - session_id: str (e.g., "$0")
            - session_name: str
            - window_id: str (e.g., "@1")
            - window_name: str
            - width, height: int
        """
        fmt = _FIELD_SEP.join([
            "#{session_id}", "#{session_name}", "#{window_id}", "#{window_name}",
            "#{window_width}", "#{window_height}",
        ])
        output = await self.run("list-windows", "-a", "-F", fmt)

        if not output:
            return []

        windows = []
        for line in output.strip().split("\n"):
            if not line:
                continue
            parts = line.split(_FIELD_SEP)
            if len(parts) >= 6:
                try:
                    windows.append({
                        "session_id": parts[0],
                        "session_name": parts[1],
                        "window_id": parts[2],
                        "window_name": parts[3],
                        "width": int(parts[4]),
                        "height": int(parts[5]),
                    })
                except (ValueError, IndexError) as e:
                    logger.warning(f"Failed to parse window line: {line!r}: {e}")

        return windows

    async def list_panes(self) -> list[dict]:
        """List all tmux panes across all sessions.

        Returns:
            List of pane dicts with keys:
            - pane_id: str (e.g., "%0")
            - session_id, window_id: str
            - pane_name: str
            - left, top: int (cell position in the window)
            - width, height: int
            - active: bool (active pane of its window)
        """
        fmt = _FIELD_SEP.join([
            "#{pane_id}", "#{session_id}", "#{window_id}", "#{pane_title}",
            "#{pane_left}", "#{pane_top}", "#{pane_width}", "#{pane_height}",
            "#{pane_active}",
        ])
        output = await self.run("list-panes", "-a", "-F", fmt)

        if not output:
            return []

        panes = []
        for line in output.strip().split("\n"):
            if not line:
                continue
            parts = line.split(_FIELD_SEP)
            if len(parts) >= 9:
                try:
                    panes.append({
                        "pane_id": parts[0],
                        "session_id": parts[1],
                        "window_id": parts[2],
                        "pane_name": parts[3],
                        "left": int(parts[4]),
                        "top": int(parts[5]),
                        "width": int(parts[6]),
                        "height": int(parts[7]),
                        "active": parts[8] == "1",
                    })
                except (ValueError, IndexError) as e:
                    logger.warning(f"Failed to parse pane line: {line!r}: {e}")

        return panes

    async def select_pane(self, pane_id: str) -> bool:
        """Select/activate a pane.

        Args:
            pane_id: The pane identifier

        Returns:
            True on success, False on failure.
        """
        result = await self.run("select-pane", "-t", pane_id)
        return result is not None

    async def get_active_pane(self) -> str | None:
        """Get the currently active pane ID.

        Returns:
            Pane ID string (e.g., "%2"), or None if tmux not running.
        """
        output = await self.run("display-message", "-p", "#{pane_id}")
        if output:
            return output.strip()
        return None

    async def split_window(
        self,
        pane_id: str,
        direction: str,
        percent: int | None = None,
        cells: int | None = None,
    ) -> str | None:
        """Split a pane.

        Args:
            pane_id: Pane to split
            direction: Side of the new pane ("Left", "Right", "Up", "Down")
            percent: Size of the new pane in percent
            cells: Size of the new pane in cells

        Returns:
            The new pane id, or None on failure
        """
        # -h: side by side, -v: stacked; -b puts the new pane left/above
        args = ["split-window", "-t", pane_id, "-h" if direction in ("Left", "Right") else "-v"]
        if direction in ("Left", "Up"):
            args.append("-b")
        if cells is not None:
            args.extend(["-l", str(cells)])
        elif percent is not None:
            args.extend(["-l", f"{percent}%"])
        args.extend(["-P", "-F", "#{pane_id}"])

        output = await self.run(*args)
        if output is None:
            return None
        return output.strip() or None

    async def resize_pane(self, pane_id: str, direction: str, amount: int) -> bool:
        result = await self.run("resize-pane", "-t", pane_id, _RESIZE_FLAGS[direction], str(amount))
        return result is not None

    async def kill_pane(self, pane_id: str) -> bool:
        result = await self.run("kill-pane", "-t", pane_id)
        return result is not None
