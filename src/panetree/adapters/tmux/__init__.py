"""Tmux adapter for panetree."""

from .adapter import TmuxAdapter
from .client import TmuxClient
from .layout import TmuxLayoutBuilder

__all__ = ["TmuxAdapter", "TmuxClient", "TmuxLayoutBuilder"]
