"""Fuzzy matching core: normalization, matching, caching and ranking."""

from .cache import CachedSearchable, cached
from .matcher import NO_MATCH, MatchResult, Span, match, match_tokens
from .normalizer import Token, TokenSequence, char_offsets, fold, normalize
from .protocols import Candidate, PreTokenized, Searchable, text_of, tokens_of
from .ranker import RankedResult, rank_all

__all__ = [
    "NO_MATCH",
    "CachedSearchable",
    "Candidate",
    "MatchResult",
    "PreTokenized",
    "RankedResult",
    "Searchable",
    "Span",
    "Token",
    "TokenSequence",
    "cached",
    "char_offsets",
    "fold",
    "match",
    "match_tokens",
    "normalize",
    "rank_all",
    "text_of",
    "tokens_of",
]
