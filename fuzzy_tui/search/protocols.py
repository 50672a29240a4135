"""Protocol definitions for fuzzy searchable values.

These protocols describe what the matcher and ranker need from a candidate,
so any object exposing a matchable string can take part without inheriting
from a common base class.
"""

from typing import Protocol, Union, runtime_checkable

from .normalizer import TokenSequence, normalize


@runtime_checkable
class Searchable(Protocol):
    """A value that exposes a string fit for fuzzy matching."""

    @property
    def fuzzy_text(self) -> str:
        """Text the pattern is matched against."""
        ...


@runtime_checkable
class PreTokenized(Searchable, Protocol):
    """A searchable value that can supply (possibly cached) tokens."""

    def tokenized(self) -> TokenSequence:
        """Return the normalized tokens for the current text."""
        ...


Candidate = Union[str, Searchable]


def text_of(candidate: Candidate) -> str:
    """Return the matchable text of a plain string or Searchable."""
    if isinstance(candidate, str):
        return candidate
    return candidate.fuzzy_text


def tokens_of(candidate: Candidate) -> TokenSequence:
    """Return tokens for a candidate, going through its cache if it has one."""
    if isinstance(candidate, PreTokenized):
        return candidate.tokenized()
    return normalize(text_of(candidate))
