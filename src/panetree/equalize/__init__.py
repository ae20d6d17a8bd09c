"""Equalize module - make the columns of a tab the same width

Pipeline (all pure; the engine performs the host round trips):
- grouper: column groups / row subgroups from live geometry
- edges: locked boundaries between groups
- planner: target width per pane
- sequencer: group visit order
- resizer: resize command per pane and pane visit order
"""

from .edges import find_locked_boundaries, locked_columns, vertical_tags
from .grouper import group_panes, subgroups
from .planner import plan_widths
from .resizer import ResizeCommand, governed_column, pane_visit_order, plan_resize
from .sequencer import SEQUENCE_TABLE, Probe, SequenceAction, plan_probes, sequence_groups

__all__ = [
    "find_locked_boundaries",
    "locked_columns",
    "vertical_tags",
    "group_panes",
    "subgroups",
    "plan_widths",
    "ResizeCommand",
    "governed_column",
    "pane_visit_order",
    "plan_resize",
    "SEQUENCE_TABLE",
    "Probe",
    "SequenceAction",
    "plan_probes",
    "sequence_groups",
]
