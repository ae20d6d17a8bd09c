"""WezTerm adapter for panetree."""

from .adapter import WezTermAdapter
from .client import WezTermClient
from .layout import WezTermLayoutBuilder

__all__ = ["WezTermAdapter", "WezTermClient", "WezTermLayoutBuilder"]
