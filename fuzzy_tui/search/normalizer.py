"""Text normalization into per-character match tokens."""

import unicodedata
from dataclasses import dataclass

import regex

__all__ = ["Token", "TokenSequence", "char_offsets", "fold", "normalize"]

# One user-perceived character (extended grapheme cluster)
_GRAPHEME = regex.compile(r"\X")

# Letters with no Unicode decomposition to an ASCII base
_TRANSLITERATIONS = {
    "æ": "ae",
    "ø": "o",
    "œ": "oe",
    "ß": "ss",
    "ł": "l",
    "đ": "d",
    "ð": "d",
    "þ": "th",
    "ħ": "h",
    "ı": "i",
    "ŀ": "l",
    "ŋ": "n",
    "ŧ": "t",
    "ĸ": "k",
}


@dataclass(frozen=True)
class Token:
    """A single normalized character position of a candidate.

    Attributes:
        original: Lowercased character. May hold several code points when
            the character is a grapheme cluster (combining marks, emoji).
        folded: ASCII approximation of ``original``, or ``original`` itself
            when no ASCII rendering exists.
    """

    original: str
    folded: str


TokenSequence = tuple[Token, ...]


def fold(char: str) -> str:
    """Best-effort ASCII transliteration of a lowercased character.

    Args:
        char: A single (lowercased) grapheme cluster.

    Returns:
        The ASCII rendering, which may be longer than one character
        (``"æ"`` -> ``"ae"``), or ``char`` unchanged if it cannot be folded.
    """
    parts = []
    for code_point in unicodedata.normalize("NFKD", char):
        if unicodedata.combining(code_point):
            continue
        parts.append(_TRANSLITERATIONS.get(code_point, code_point))
    folded = "".join(parts)
    if not folded or not folded.isascii():
        return char
    return folded


def normalize(text: str) -> TokenSequence:
    """Split text into lowercased, accent-folded tokens.

    Args:
        text: Candidate text.

    Returns:
        One Token per grapheme cluster of ``text``, in order.
    """
    tokens = []
    for cluster in _GRAPHEME.findall(text):
        original = unicodedata.normalize("NFC", cluster.lower())
        tokens.append(Token(original=original, folded=fold(original)))
    return tuple(tokens)


def char_offsets(text: str) -> list[int]:
    """Code point offset of each character of ``text``, plus ``len(text)``.

    Converts character positions reported in match spans into string
    slice indices: span ``s`` covers ``text[offsets[s.start]:offsets[s.end]]``.
    """
    offsets = [m.start() for m in _GRAPHEME.finditer(text)]
    offsets.append(len(text))
    return offsets
