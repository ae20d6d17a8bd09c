"""WezTerm client for subprocess-based ``wezterm cli`` interaction."""

import asyncio
import json

from ...telemetry import get_logger

logger = get_logger(__name__)

# split-pane flag per direction
_SPLIT_FLAGS = {
    "Left": "--left",
    "Right": "--right",
    "Up": "--top",
    "Down": "--bottom",
}


class WezTermClient:
    """Client for interacting with WezTerm via ``wezterm cli``.

    Provides async methods for:
    - Listing panes and clients
    - Activating panes and querying neighbors
    - Splitting, resizing and killing panes
    """

    def __init__(self, binary: str = "wezterm"):
        """Initialize WezTermClient.

        Args:
            binary: wezterm executable name or path
        """
        self._binary = binary

    async def run(self, *args: str) -> str | None:
        """Execute a ``wezterm cli`` subcommand.

        Args:
            *args: Subcommand arguments (e.g., "list", "--format", "json")

        Returns:
            Command stdout on success, None on failure.
        """
        cmd = [self._binary, "cli", *args]

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()

            if proc.returncode != 0:
                logger.warning(f"wezterm command failed: {' '.join(cmd)}: {stderr.decode()}")
                return None

            return stdout.decode()

        except Exception as e:
            logger.error(f"wezterm subprocess error: {e}")
            return None

    async def _run_json(self, *args: str) -> list[dict]:
        output = await self.run(*args, "--format", "json")
        if not output:
            return []
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse wezterm {args[0]} output: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Unexpected wezterm {args[0]} output: {type(data).__name__}")
            return []
        return data

    async def list_panes(self) -> list[dict]:
        """List all panes across all windows and tabs.

        Returns:
            List of pane dicts with keys:
            - window_id, tab_id, pane_id: str
            - title: str
            - left, top: int (cell position within the tab)
            - width, height: int (cells)
            - active: bool (active pane of its tab)
            - window_title, tab_title: str
        """
        panes = []
        for entry in await self._run_json("list"):
            try:
                size = entry["size"]
                panes.append({
                    "window_id": str(entry["window_id"]),
                    "tab_id": str(entry["tab_id"]),
                    "pane_id": str(entry["pane_id"]),
                    "title": entry.get("title", ""),
                    "left": int(entry.get("left_col", 0)),
                    "top": int(entry.get("top_row", 0)),
                    "width": int(size["cols"]),
                    "height": int(size["rows"]),
                    "active": bool(entry.get("is_active", False)),
                    "window_title": entry.get("window_title", ""),
                    "tab_title": entry.get("tab_title", ""),
                })
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Failed to parse pane entry: {entry!r}: {e}")
        return panes

    async def get_focused_pane(self) -> str | None:
        """Focused pane of the most recently active client.

        Returns:
            Pane id, or None when no GUI client is attached
        """
        clients = await self._run_json("list-clients")
        for client in clients:
            pane_id = client.get("focused_pane_id")
            if pane_id is not None:
                return str(pane_id)
        return None

    async def activate_pane(self, pane_id: str) -> bool:
        result = await self.run("activate-pane", "--pane-id", pane_id)
        return result is not None

    async def get_pane_direction(self, pane_id: str, direction: str) -> str | None:
        """Pane next to ``pane_id`` ("Left", "Right", "Up", "Down").

        Returns:
            Neighbor pane id, or None at the edge
        """
        output = await self.run("get-pane-direction", "--pane-id", pane_id, direction)
        if output and output.strip():
            return output.strip()
        return None

    async def split_pane(
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
            The new pane id printed by wezterm, or None on failure
        """
        args = ["split-pane", "--pane-id", pane_id, _SPLIT_FLAGS[direction]]
        if cells is not None:
            args.extend(["--cells", str(cells)])
        elif percent is not None:
            args.extend(["--percent", str(percent)])
        output = await self.run(*args)
        if output is None:
            return None
        return output.strip() or None

    async def adjust_pane_size(self, pane_id: str, direction: str, amount: int) -> bool:
        result = await self.run(
            "adjust-pane-size", "--pane-id", pane_id, "--amount", str(amount), direction
        )
        return result is not None

    async def kill_pane(self, pane_id: str) -> bool:
        result = await self.run("kill-pane", "--pane-id", pane_id)
        return result is not None
