"""
Tests for Tokenizer
===================
Tests for tokenize(), split_words() and round2() in bandrater/scoring/tokenizer.py.
"""

import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bandrater.scoring.tokenizer import clamp, round2, split_words, strip_text, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Portugal. The Man") == ["portugal", "the", "man"]

    def test_keeps_apostrophes_and_digits(self):
        assert tokenize("  Guns N' Roses 2000 ") == ["guns", "n'", "roses", "2000"]

    def test_slash_splits_tokens(self):
        assert tokenize("AC/DC") == ["ac", "dc"]

    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("   \t\n ") == []

    def test_non_ascii_letters_become_separators(self):
        assert tokenize("Beyoncé") == ["beyonc"]
        assert tokenize("Sigur Rós") == ["sigur", "r", "s"]

    def test_control_characters_tolerated(self):
        assert tokenize("Nine\x00Inch\x07Nails") == ["nine", "inch", "nails"]

    def test_symbols_only(self):
        assert tokenize("!!! *** ???") == []

    def test_separator_controls_and_bom_split_tokens(self):
        assert tokenize("Foo\x1cFighters") == ["foo", "fighters"]
        assert tokenize("\ufeffabc") == ["abc"]


class TestSplitWords:
    """Tests for split_words()."""

    def test_keeps_case_and_punctuation(self):
        assert split_words("  Portugal.   The Man ") == ["Portugal.", "The", "Man"]

    def test_empty(self):
        assert split_words("") == []

    def test_information_separators_are_not_whitespace(self):
        assert split_words("Foo\x1cFighters") == ["Foo\x1cFighters"]
        assert split_words("Foo\x85Fighters") == ["Foo\x85Fighters"]

    def test_unicode_spaces_split(self):
        assert split_words("Foo\u00a0Fighters") == ["Foo", "Fighters"]
        assert split_words("Foo\u3000Fighters\ufeff") == ["Foo", "Fighters"]


class TestStripText:
    """Tests for strip_text()."""

    def test_strips_byte_order_mark(self):
        assert strip_text("\ufeff Band \ufeff") == "Band"
        assert strip_text("\ufeff") == ""

    def test_keeps_separator_controls(self):
        assert strip_text("\x1c") == "\x1c"
        assert strip_text(" \x1fBand\n") == "\x1fBand"


class TestRound2:
    """Tests for round2() tie handling."""

    def test_ties_round_away_from_zero(self):
        assert round2(0.125) == 0.13
        assert round2(0.375) == 0.38
        assert round2(-0.125) == -0.13

    def test_uses_exact_binary_value(self):
        # 2.675 is stored as 2.67499999...
        assert round2(2.675) == 2.67

    def test_plain_values(self):
        assert round2(1.5679999999999998) == 1.57
        assert round2(0.24800000000000022) == 0.25
        assert round2(0.0) == 0.0


def test_clamp():
    assert clamp(5.0, 0.0, 4.0) == 4.0
    assert clamp(-2.0, -1.5, 1.8) == -1.5
    assert clamp(1.0, 0.0, 4.0) == 1.0
