"""Commands - the closed set of operations the engine accepts

- SplitCommand: split a pane
- CloseCommand: close a pane
- EqualizeCommand: equalize the column widths of a tab
- ReconcileCommand: resync the store (config reload)

Window/tab/pane left as None resolve to the host's active pane.
"""

from dataclasses import dataclass, field

from .topology.types import Direction, SplitSize


@dataclass(frozen=True)
class PaneTarget:
    """Pane a command operates on; None fields fall back to the active pane."""

    window_id: str | None = None
    tab_id: str | None = None
    pane_id: str | None = None


@dataclass(frozen=True)
class SplitCommand:
    direction: Direction
    size: SplitSize = field(default_factory=SplitSize)
    target: PaneTarget = field(default_factory=PaneTarget)


@dataclass(frozen=True)
class CloseCommand:
    confirm: bool = True
    target: PaneTarget = field(default_factory=PaneTarget)


@dataclass(frozen=True)
class EqualizeCommand:
    target: PaneTarget = field(default_factory=PaneTarget)


@dataclass(frozen=True)
class ReconcileCommand:
    pass


Command = SplitCommand | CloseCommand | EqualizeCommand | ReconcileCommand


@dataclass
class CommandResult:
    """Outcome of one command

    Attributes:
        success: Whether the host carried out the command
        message: Human-readable summary
        pane_id: Pane created by a split, or the pane acted on
        resizes: Resize commands issued (equalize)
    """

    success: bool
    message: str
    pane_id: str | None = None
    resizes: int = 0
