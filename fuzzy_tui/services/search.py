"""Search service tying datasets, cache and ranking together."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, Sequence, TypeVar

from tqdm import tqdm

from ..config import SearchConfig
from ..search import NO_MATCH, CachedSearchable, RankedResult, cached, rank_all

logger = logging.getLogger(__name__)

__all__ = ["BenchmarkResult", "SearchService", "benchmark_incremental", "typing_prefixes"]

T = TypeVar("T")


class SearchService(Generic[T]):
    """Runs fuzzy searches over a fixed collection of candidates.

    Candidates are wrapped in CachedSearchable once, so repeated searches
    (one per keystroke) only pay for tokenization the first time.
    """

    def __init__(self, items: Iterable[T], config: Optional[SearchConfig] = None) -> None:
        """Initialize the service.

        Args:
            items: Strings or Searchable objects to search.
            config: Search settings (worker count).
        """
        self._config = config or SearchConfig()
        self._items: list[T] = list(items)
        self._cached: list[CachedSearchable] = cached(self._items)

    @property
    def items(self) -> list[T]:
        """Candidates in their original order."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def search(self, pattern: str, limit: Optional[int] = None) -> list[RankedResult[T]]:
        """Rank candidates against a pattern.

        Surrounding whitespace is ignored. A blank pattern returns every
        candidate unranked with an empty match.

        Args:
            pattern: Typed query.
            limit: Maximum number of results (None or 0 for all).

        Returns:
            Results holding the original items, best match first.
        """
        pattern = pattern.strip()
        if not pattern:
            results = [RankedResult(item=item, result=NO_MATCH) for item in self._items]
        else:
            start = time.perf_counter()
            ranked = rank_all(self._cached, pattern, workers=self._config.workers)
            results = [RankedResult(item=r.item.wrapped, result=r.result) for r in ranked]
            logger.debug(
                "Search %r matched %d/%d in %.2fms",
                pattern,
                len(results),
                len(self._items),
                (time.perf_counter() - start) * 1000,
            )
        if limit:
            results = results[:limit]
        return results


def typing_prefixes(pattern: str) -> list[str]:
    """Every prefix of a pattern, as produced by typing it one key at a time."""
    return [pattern[:i] for i in range(1, len(pattern) + 1)]


@dataclass
class BenchmarkResult:
    """Timings for one benchmark mode."""

    mode: str
    rounds: int
    searches: int
    seconds: list[float] = field(default_factory=list)

    @property
    def best(self) -> float:
        return min(self.seconds) if self.seconds else 0.0

    @property
    def mean(self) -> float:
        return sum(self.seconds) / len(self.seconds) if self.seconds else 0.0


def benchmark_incremental(
    items: Sequence[object],
    pattern: str,
    rounds: int = 5,
    use_cache: bool = True,
    progress: bool = True,
) -> BenchmarkResult:
    """Time searching every prefix of ``pattern`` over ``items``.

    Simulates a user typing the pattern into a search box. With
    ``use_cache`` the candidates are wrapped once and reused across rounds.

    Args:
        items: Candidates to search.
        pattern: Full pattern; each prefix is searched in turn.
        rounds: Number of times to repeat the typing sequence.
        use_cache: Wrap candidates in CachedSearchable.
        progress: Show a tqdm progress bar.

    Returns:
        BenchmarkResult with per-round wall times.
    """
    prefixes = typing_prefixes(pattern)
    candidates = cached(items) if use_cache else list(items)
    mode = "cached" if use_cache else "uncached"
    result = BenchmarkResult(mode=mode, rounds=rounds, searches=len(prefixes))

    for _ in tqdm(range(rounds), desc=f"Benchmark ({mode})", unit="round", disable=not progress):
        start = time.perf_counter()
        for prefix in prefixes:
            rank_all(candidates, prefix)
        result.seconds.append(time.perf_counter() - start)

    logger.debug("Benchmark %s: best %.4fs over %d rounds", mode, result.best, rounds)
    return result
