"""Fuzzy TUI - fzf-style fuzzy matching with a terminal demo."""

from .search import MatchResult, RankedResult, Span, match, normalize, rank_all

__version__ = "0.1.0"

__all__ = [
    "MatchResult",
    "RankedResult",
    "Span",
    "__version__",
    "match",
    "normalize",
    "rank_all",
]
