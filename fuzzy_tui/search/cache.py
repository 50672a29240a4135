"""Caching wrapper that reuses tokenization while the text is unchanged."""

from __future__ import annotations

import logging
import threading
from typing import Generic, Iterable, Optional, TypeVar

from .matcher import MatchResult, match
from .normalizer import TokenSequence, normalize
from .protocols import Candidate, text_of

logger = logging.getLogger(__name__)

__all__ = ["CachedSearchable", "cached"]

T = TypeVar("T", bound=Candidate)


class CachedSearchable(Generic[T]):
    """Wraps a searchable value and caches its tokens.

    Useful when the same candidates are matched against many patterns,
    e.g. re-filtering a list on every keystroke. The wrapped value may
    change its text at any time; the cache is refreshed on the next
    ``tokenized()`` call.

    The cache entry is the only mutable state in the matching pipeline.
    Reads and refreshes are serialized with a per-wrapper lock so a
    fingerprint is never paired with another string's tokens.
    """

    def __init__(self, searchable: T) -> None:
        """Initialize the wrapper with an empty cache.

        Args:
            searchable: Plain string or object exposing ``fuzzy_text``.
        """
        self._searchable = searchable
        self._lock = threading.Lock()
        self._fingerprint: Optional[int] = None
        self._text: Optional[str] = None
        self._tokens: TokenSequence = ()

    def __repr__(self) -> str:
        return f"CachedSearchable({self._searchable!r})"

    @property
    def wrapped(self) -> T:
        """The original value."""
        return self._searchable

    @property
    def fuzzy_text(self) -> str:
        """Text of the wrapped value."""
        return text_of(self._searchable)

    def tokenized(self) -> TokenSequence:
        """Return tokens for the current text, re-normalizing if stale.

        The ``hash()`` fingerprint only short-circuits the common case of
        changed text. When fingerprints agree, the stored string is compared
        as well, and that comparison is what decides a cache hit.
        """
        text = self.fuzzy_text
        fingerprint = hash(text)
        with self._lock:
            if self._fingerprint != fingerprint or self._text != text:
                logger.debug("Refreshing token cache for %r", text)
                self._tokens = normalize(text)
                self._fingerprint = fingerprint
                self._text = text
            return self._tokens

    def invalidate(self) -> None:
        """Drop the cached tokens."""
        with self._lock:
            self._fingerprint = None
            self._text = None
            self._tokens = ()

    def fuzzy_match(self, pattern: str) -> MatchResult:
        """Match the wrapped value against a pattern using cached tokens."""
        return match(self, pattern)


def cached(items: Iterable[T]) -> list[CachedSearchable[T]]:
    """Wrap every item in a CachedSearchable."""
    return [CachedSearchable(item) for item in items]
