"""WezTerm layout builder.

Converts ``wezterm cli list`` pane entries into LayoutData structures.
"""

from ..models import LayoutData, PaneInfo, TabInfo, WindowInfo


class WezTermLayoutBuilder:
    """Builds LayoutData from WezTerm pane information.

    WezTerm structure mapping:
    - GUI window -> WindowInfo
    - tab -> TabInfo
    - pane -> PaneInfo (kept in the order wezterm lists them)
    """

    def build(self, panes: list[dict], focused_pane_id: str | None = None) -> LayoutData:
        """Build LayoutData from wezterm data.

        Args:
            panes: List of pane dicts from WezTermClient.list_panes()
            focused_pane_id: Focused pane from list-clients, if any

        Returns:
            LayoutData with windows, tabs, and panes.
        """
        windows: dict[str, WindowInfo] = {}
        tabs: dict[tuple[str, str], TabInfo] = {}

        for pane in panes:
            window_id = pane["window_id"]
            tab_id = pane["tab_id"]

            window = windows.get(window_id)
            if window is None:
                window = WindowInfo(window_id=window_id, name=pane.get("window_title", ""))
                windows[window_id] = window

            tab = tabs.get((window_id, tab_id))
            if tab is None:
                tab = TabInfo(tab_id=tab_id, name=pane.get("tab_title", ""))
                tabs[(window_id, tab_id)] = tab
                window.tabs.append(tab)

            tab.panes.append(
                PaneInfo(
                    pane_id=pane["pane_id"],
                    name=pane.get("title", ""),
                    index=len(tab.panes),
                    left=pane["left"],
                    top=pane["top"],
                    width=pane["width"],
                    height=pane["height"],
                    is_active=pane.get("active", False),
                )
            )

        active_pane_id = focused_pane_id
        if active_pane_id is None:
            active_pane_id = next((p["pane_id"] for p in panes if p.get("active")), None)

        return LayoutData(windows=list(windows.values()), active_pane_id=active_pane_id)
