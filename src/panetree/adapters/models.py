"""Live layout data models

Window -> Tab -> Pane snapshot as reported by the host. Geometry is in cell
units; panes within a tab are kept in the order the host reports them.
"""

from dataclasses import dataclass, field


@dataclass
class PaneInfo:
    """Live pane rectangle

    Attributes:
        pane_id: Host pane id
        name: Pane title
        index: Position in the host's pane order within its tab
        left, top: Cell coordinates of the top-left corner within the tab
        width, height: Size in columns and rows
        is_active: Whether this is the host's active pane
    """

    pane_id: str
    name: str
    index: int
    left: int
    top: int
    width: int
    height: int
    is_active: bool = False

    @property
    def right(self) -> int:
        """Column just past the pane's right edge."""
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height


@dataclass
class TabInfo:
    """Tab snapshot"""

    tab_id: str
    name: str
    panes: list[PaneInfo] = field(default_factory=list)

    def pane_ids(self) -> list[str]:
        return [pane.pane_id for pane in self.panes]

    def get_pane(self, pane_id: str) -> PaneInfo | None:
        for pane in self.panes:
            if pane.pane_id == pane_id:
                return pane
        return None

    @property
    def column_width(self) -> int:
        """Width of the tab in columns (rightmost pane edge)."""
        return max((pane.right for pane in self.panes), default=0)


@dataclass
class WindowInfo:
    """Window snapshot"""

    window_id: str
    name: str
    tabs: list[TabInfo] = field(default_factory=list)

    def get_tab(self, tab_id: str) -> TabInfo | None:
        for tab in self.tabs:
            if tab.tab_id == tab_id:
                return tab
        return None


@dataclass
class LayoutData:
    """Complete live layout

    Attributes:
        windows: All windows
        active_pane_id: Host's focused pane, if known
    """

    windows: list[WindowInfo] = field(default_factory=list)
    active_pane_id: str | None = None

    def get_window(self, window_id: str) -> WindowInfo | None:
        for window in self.windows:
            if window.window_id == window_id:
                return window
        return None

    def get_tab(self, window_id: str, tab_id: str) -> TabInfo | None:
        window = self.get_window(window_id)
        return window.get_tab(tab_id) if window else None

    def locate(self, pane_id: str) -> tuple[WindowInfo, TabInfo, PaneInfo] | None:
        """Find the window and tab holding a pane."""
        for window in self.windows:
            for tab in window.tabs:
                pane = tab.get_pane(pane_id)
                if pane is not None:
                    return window, tab, pane
        return None

