"""Topology data types

- Direction: split / resize / adjacency direction
- SplitSize: size of a new pane
- PaneNode: one pane's place in the split tree
"""

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Split, resize and adjacency direction."""

    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"

    @property
    def is_vertical_split(self) -> bool:
        """Left/Right splits create a vertical slit."""
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        """Parse a direction name case-insensitively ("left", "Left", "LEFT")."""
        if isinstance(value, Direction):
            return value
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        raise ValueError(f"Unknown direction: {value!r}")


_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass(frozen=True)
class SplitSize:
    """Size of the new pane: a percentage of the source or a cell count."""

    percent: int | None = None
    cells: int | None = None

    def __post_init__(self):
        if self.percent is not None and self.cells is not None:
            raise ValueError("SplitSize takes percent or cells, not both")
        if self.percent is not None and not 0 < self.percent < 100:
            raise ValueError(f"percent must be between 1 and 99, got {self.percent}")
        if self.cells is not None and self.cells < 1:
            raise ValueError(f"cells must be positive, got {self.cells}")

    def describe(self) -> str:
        if self.cells is not None:
            return f"{self.cells} cells"
        return f"{self.percent if self.percent is not None else 50}%"


EdgePair = tuple[Direction | None, Direction | None]


@dataclass
class PaneNode:
    """A pane's record in the split tree

    Attributes:
        parent: Pane this pane was split from, None for a tab root
        children: Panes split from this pane, in creation order
        directions: Direction used for each split, parallel to children
        vsplitedge: Side of the vertical slit this pane governs (LEFT/RIGHT)
        hsplitedge: Side of the horizontal slit this pane governs (UP/DOWN)
        origin_edges: Parent's (vsplitedge, hsplitedge) just before the split
            that created this pane
    """

    parent: str | None = None
    children: list[str] = field(default_factory=list)
    directions: list[Direction] = field(default_factory=list)
    vsplitedge: Direction | None = None
    hsplitedge: Direction | None = None
    origin_edges: EdgePair | None = None

    @property
    def edges(self) -> EdgePair:
        return (self.vsplitedge, self.hsplitedge)

    def add_child(self, pane_id: str, direction: Direction) -> None:
        self.children.append(pane_id)
        self.directions.append(direction)

    def remove_child_at(self, index: int) -> tuple[str, Direction]:
        """Remove children[index] together with directions[index]."""
        return self.children.pop(index), self.directions.pop(index)

    def reset(self) -> None:
        """Reset to a blank skeleton (sole root of its tab)."""
        self.parent = None
        self.children = []
        self.directions = []
        self.vsplitedge = None
        self.hsplitedge = None
        self.origin_edges = None

    def to_dict(self) -> dict:
        """Serializable form; directions and edges as their names."""
        return {
            "parent": self.parent,
            "children": list(self.children),
            "directions": [d.value for d in self.directions],
            "vsplitedge": self.vsplitedge.value if self.vsplitedge else None,
            "hsplitedge": self.hsplitedge.value if self.hsplitedge else None,
        }

    def describe(self) -> str:
        """One-line summary for logs."""
        directions = ",".join(d.value for d in self.directions)
        return (
            f"parent={self.parent} children={{{','.join(self.children)}}} "
            f"directions={{{directions}}} "
            f"vsplitedge={self.vsplitedge.value if self.vsplitedge else None} "
            f"hsplitedge={self.hsplitedge.value if self.hsplitedge else None}"
        )
