"""Tests for text normalization and accent folding."""

import pytest

from fuzzy_tui.search import Token, char_offsets, fold, normalize


class TestFold:
    """Tests for single-character ASCII folding."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("é", "e"),
            ("ū", "u"),
            ("ø", "o"),
            ("æ", "ae"),
            ("ß", "ss"),
            ("ł", "l"),
        ],
    )
    def test_folds_to_ascii(self, char, expected):
        """Accented and ligature letters fold to ASCII."""
        assert fold(char) == expected

    def test_ascii_unchanged(self):
        """ASCII characters fold to themselves."""
        assert fold("a") == "a"
        assert fold(" ") == " "

    def test_unfoldable_returns_original(self):
        """Characters without an ASCII rendering are returned as-is."""
        assert fold("中") == "中"
        assert fold("ж") == "ж"


class TestNormalize:
    """Tests for normalize()."""

    def test_lowercases_and_folds(self):
        """Tokens carry the lowercased and folded forms."""
        tokens = normalize("Øre")
        assert tokens == (
            Token(original="ø", folded="o"),
            Token(original="r", folded="r"),
            Token(original="e", folded="e"),
        )

    def test_empty_text(self):
        """Empty text yields no tokens."""
        assert normalize("") == ()

    def test_one_token_per_character(self):
        """Token count equals the number of visible characters."""
        assert len(normalize("la víbora")) == 9

    def test_decomposed_accent_is_single_token(self):
        """A base letter plus combining accent is one token."""
        tokens = normalize("e\u0301t")
        assert len(tokens) == 2
        assert tokens[0].original == "é"
        assert tokens[0].folded == "e"

    def test_emoji_sequence_is_single_token(self):
        """A ZWJ emoji sequence is never split."""
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        tokens = normalize(f"a{family}b")
        assert len(tokens) == 3
        assert tokens[1].original == family
        assert tokens[1].folded == family

    def test_expanding_fold(self):
        """Folding can expand one character into several."""
        assert normalize("Æ")[0] == Token(original="æ", folded="ae")

    def test_deterministic(self):
        """Same input gives equal output."""
        assert normalize("Curaçao") == normalize("Curaçao")


class TestCharOffsets:
    """Tests for char_offsets()."""

    def test_ascii(self):
        """ASCII offsets are plain indices plus the end."""
        assert char_offsets("abc") == [0, 1, 2, 3]

    def test_combining_marks(self):
        """Combining marks don't start a new character."""
        assert char_offsets("e\u0301x") == [0, 2, 3]

    def test_empty(self):
        """Empty text has only the end offset."""
        assert char_offsets("") == [0]
