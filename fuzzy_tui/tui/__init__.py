"""Textual user interface for Fuzzy TUI."""

from .app import FuzzySearchApp, ResultListItem
from .highlight import highlight_text

__all__ = ["FuzzySearchApp", "ResultListItem", "highlight_text"]
