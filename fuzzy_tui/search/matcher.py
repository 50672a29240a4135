"""Ordered-subsequence fuzzy matcher with contiguity-weighted scoring."""

import unicodedata
from dataclasses import dataclass
from typing import NamedTuple

from .normalizer import Token, TokenSequence
from .protocols import Candidate, tokens_of

__all__ = ["NO_MATCH", "MatchResult", "Span", "match", "match_tokens"]


class Span(NamedTuple):
    """A run of matched characters: ``[start, start + length)``.

    Positions count user-perceived characters of the candidate, not bytes
    or code points.
    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """Position just past the last matched character."""
        return self.start + self.length


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one candidate against a pattern.

    A weight of 0 means the pattern was not found in order, in which case
    ``ranges`` is always empty.
    """

    weight: int
    ranges: tuple[Span, ...] = ()

    @property
    def matched(self) -> bool:
        """True if the candidate is a positive match."""
        return self.weight > 0


NO_MATCH = MatchResult(weight=0, ranges=())


def _consumed(pattern: str, pattern_idx: int, token: Token) -> int:
    """Number of pattern characters the token matches at ``pattern_idx``.

    The plain form is tried before the folded one. Returns 0 on failure,
    including when the pattern is already exhausted.
    """
    if pattern_idx >= len(pattern):
        return 0
    for form in (token.original, token.folded):
        if pattern.startswith(form, pattern_idx):
            return len(form)
    return 0


def match_tokens(tokens: TokenSequence, pattern: str) -> MatchResult:
    """Match pre-normalized tokens against a pattern.

    Every matched character extends the current run and its score doubles
    plus one, so a run of k characters adds 1 + 3 + ... + (2^k - 1) to the
    weight. Longer contiguous runs therefore beat the same number of
    scattered characters.

    Args:
        tokens: Normalized candidate (see ``normalize``).
        pattern: Typed query. Lowercased here; never accent-folded.

    Returns:
        MatchResult with the accumulated weight and matched spans, or
        ``NO_MATCH`` when not every pattern character was found in order.
    """
    pattern = unicodedata.normalize("NFC", pattern.lower())

    total = 0
    run_score = 0
    pattern_idx = 0
    spans: list[Span] = []
    run_start = 0
    run_length = 0

    # Always scan the full candidate so spans close the same way every time
    for idx, token in enumerate(tokens):
        consumed = _consumed(pattern, pattern_idx, token)
        if consumed:
            pattern_idx += consumed
            run_score += 1 + run_score
            run_length += 1
        else:
            run_score = 0
            if run_length:
                spans.append(Span(run_start, run_length))
            run_start, run_length = idx + 1, 0
        total += run_score

    if run_length:
        spans.append(Span(run_start, run_length))

    if pattern_idx != len(pattern):
        return NO_MATCH

    assert all(span.end <= len(tokens) for span in spans)
    return MatchResult(weight=total, ranges=tuple(spans))


def match(candidate: Candidate, pattern: str) -> MatchResult:
    """Fuzzy match a string, Searchable, or cached searchable.

    Args:
        candidate: Plain string, any object with ``fuzzy_text``, or a
            ``CachedSearchable`` whose cached tokens are reused.
        pattern: Typed query.

    Returns:
        MatchResult for the candidate's current text.
    """
    return match_tokens(tokens_of(candidate), pattern)
