"""
Tests for Penalty Evaluators
============================
Tests for bandrater/scoring/penalties.py.
"""

import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bandrater.scoring.penalties import (
    MAX_PENALTY,
    descriptor_penalty,
    is_shouting,
    juvenile_penalty,
    long_name_penalty,
    nonsense_penalty,
    randomness_penalty,
    token_noise,
)
from bandrater.scoring.tokenizer import tokenize


class TestJuvenilePenalty:
    """Tests for juvenile_penalty()."""

    def test_no_hits(self):
        assert juvenile_penalty(["arctic", "monkeys"]) == 0.0
        assert juvenile_penalty([]) == 0.0

    def test_single_hit_costs_full_point(self):
        assert juvenile_penalty(["the", "taco", "unicorns"]) == 1.0

    def test_exact_match_only(self):
        """Plural "unicorns" is not the lexicon entry "unicorn"."""
        assert juvenile_penalty(["unicorns"]) == 0.0
        assert juvenile_penalty(["unicorn"]) == 1.0

    def test_repeated_word_counts_once(self):
        assert juvenile_penalty(["taco", "taco", "taco"]) == 1.0

    def test_capped(self):
        tokens = ["taco", "pickle", "fart", "yolo", "slime"]
        assert juvenile_penalty(tokens) == MAX_PENALTY


class TestDescriptorPenalty:
    """Tests for descriptor_penalty()."""

    def test_hits(self):
        assert descriptor_penalty(["dj", "shadow"]) == 1.2
        assert descriptor_penalty(["the", "band", "project"]) == 2.4

    def test_capped(self):
        assert descriptor_penalty(["band", "project", "trio", "dj"]) == 4.0

    def test_none(self):
        assert descriptor_penalty(["radiohead"]) == 0.0


class TestRandomnessPenalty:
    """Tests for randomness_penalty() and its helpers."""

    def test_token_noise_digits(self):
        assert token_noise("3000") == 0.8

    def test_token_noise_mixed_short(self):
        # mixed letters/digits + short with non-letter
        assert token_noise("a1") == 1.3

    def test_token_noise_clean_word(self):
        assert token_noise("mastodon") == 0.0

    def test_no_vowels_and_consonant_run(self):
        assert randomness_penalty("Brkln", ["brkln"]) == 2.2

    def test_y_counts_as_vowel(self):
        assert randomness_penalty("Rhythm", ["rhythm"]) == 0.0

    def test_shouting(self):
        assert is_shouting("MUSE")
        assert not is_shouting("Muse")
        assert not is_shouting("3000")
        assert randomness_penalty("MUSE", ["muse"]) == 0.5

    def test_keyboard_mash_is_capped(self):
        assert randomness_penalty("DJ XJ9QP", ["dj", "xj9qp"]) == 4.0

    def test_number_token(self):
        text = "The Taco Unicorns 3000"
        assert randomness_penalty(text, tokenize(text)) == 0.8


class TestLongNamePenalty:
    """Tests for long_name_penalty()."""

    def test_up_to_six_words_free(self):
        assert long_name_penalty(["w"] * 6) == 0.0
        assert long_name_penalty([]) == 0.0

    def test_linear_ramp(self):
        assert long_name_penalty(["w"] * 7) == 0.6
        assert long_name_penalty(["w"] * 8) == 1.2
        assert long_name_penalty(["w"] * 10) == 2.4

    def test_capped(self):
        assert long_name_penalty(["w"] * 20) == 4.0


class TestNonsensePenalty:
    """Tests for nonsense_penalty()."""

    def test_odd_phrase_with_color_number(self):
        assert nonsense_penalty(["maroon", "5"]) == 2.5

    def test_odd_phrase_and_compound(self):
        assert nonsense_penalty(["coldplay"]) == 2.3

    def test_color_and_number_anywhere(self):
        assert nonsense_penalty(["7", "shades", "of", "blue"]) == 1.0

    def test_compound_needs_length(self):
        assert nonsense_penalty(["redwork"]) == 0.8
        assert nonsense_penalty(["redplay"]) == 0.8
        assert nonsense_penalty(["pinkwork"]) == 0.8

    def test_compound_only_for_single_token(self):
        assert nonsense_penalty(["redwork", "again"]) == 0.0

    def test_clean(self):
        assert nonsense_penalty(["young", "the", "giant"]) == 0.0
        assert nonsense_penalty([]) == 0.0
