"""Filter and rank a collection of candidates against one pattern."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from .matcher import MatchResult, Span, match, match_tokens
from .normalizer import normalize

logger = logging.getLogger(__name__)

__all__ = ["RankedResult", "rank_all"]

T = TypeVar("T")


@dataclass(frozen=True)
class RankedResult(Generic[T]):
    """A candidate paired with its match result."""

    item: T
    result: MatchResult

    @property
    def weight(self) -> int:
        """Match weight; higher is better."""
        return self.result.weight

    @property
    def ranges(self) -> tuple[Span, ...]:
        """Matched character ranges for highlighting."""
        return self.result.ranges


def rank_all(
    items: Iterable[T],
    pattern: str,
    *,
    key: Optional[Callable[[T], str]] = None,
    workers: Optional[int] = None,
) -> list[RankedResult[T]]:
    """Match every item and return the positive matches, best first.

    Ties keep the order of ``items``.

    Args:
        items: Strings, Searchable objects, or CachedSearchable wrappers.
        pattern: Typed query.
        key: Optional function extracting the text to match from each item,
            for items that don't implement Searchable. Bypasses any cache.
        workers: Score items on this many threads when greater than 1.

    Returns:
        RankedResult for each item with weight > 0, sorted by weight
        descending.
    """
    items = list(items)

    def score(item: Any) -> MatchResult:
        if key is not None:
            return match_tokens(normalize(key(item)), pattern)
        return match(item, pattern)

    if workers and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(score, items))
    else:
        results = [score(item) for item in items]

    ranked = [
        RankedResult(item=item, result=result)
        for item, result in zip(items, results)
        if result.weight > 0
    ]
    # sorted() is stable, including with reverse=True
    ranked = sorted(ranked, key=lambda r: r.result.weight, reverse=True)
    logger.debug("Ranked %d/%d candidates for %r", len(ranked), len(items), pattern)
    return ranked
