"""Tmux layout builder.

Converts tmux window/pane data into LayoutData structures.
"""

from ..models import LayoutData, PaneInfo, TabInfo, WindowInfo


class TmuxLayoutBuilder:
    """Builds LayoutData from tmux window and pane information.

    Tmux structure mapping:
    - tmux session -> WindowInfo (identified by session id, e.g. "$0")
    - tmux window -> TabInfo (identified by window id, e.g. "@1")
    - tmux pane -> PaneInfo
    """

    def build(
        self,
        windows: list[dict],
        panes: list[dict],
        active_pane_id: str | None = None,
    ) -> LayoutData:
        """Build LayoutData from tmux data.

        Args:
            windows: List of window dicts from TmuxClient.list_windows()
            panes: List of pane dicts from TmuxClient.list_panes()
            active_pane_id: Current pane from TmuxClient.get_active_pane()

        Returns:
            LayoutData with windows, tabs, and panes.
        """
        if not windows:
            return LayoutData(windows=[], active_pane_id=active_pane_id)

        # Group panes by session:window
        panes_by_window: dict[tuple[str, str], list[dict]] = {}
        for pane in panes:
            key = (pane["session_id"], pane["window_id"])
            panes_by_window.setdefault(key, []).append(pane)

        sessions: dict[str, WindowInfo] = {}
        for win in windows:
            win_panes = panes_by_window.get((win["session_id"], win["window_id"]), [])

            # Skip windows with no panes
            if not win_panes:
                continue

            pane_infos = []
            for idx, pane in enumerate(win_panes):
                try:
                    pane_infos.append(
                        PaneInfo(
                            pane_id=pane["pane_id"],
                            name=pane.get("pane_name", ""),
                            index=idx,
                            left=int(pane["left"]),
                            top=int(pane["top"]),
                            width=int(pane["width"]),
                            height=int(pane["height"]),
                            is_active=pane.get("active", False),
                        )
                    )
                except (KeyError, ValueError, TypeError):
                    # Skip malformed pane data
                    continue

            if not pane_infos:
                continue

            session = sessions.get(win["session_id"])
            if session is None:
                session = WindowInfo(
                    window_id=win["session_id"],
                    name=win.get("session_name", ""),
                )
                sessions[win["session_id"]] = session

            session.tabs.append(
                TabInfo(
                    tab_id=win["window_id"],
                    name=win.get("window_name", ""),
                    panes=pane_infos,
                )
            )

        return LayoutData(windows=list(sessions.values()), active_pane_id=active_pane_id)
