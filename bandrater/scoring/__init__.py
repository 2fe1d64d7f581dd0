"""Scoring module for rating band names."""

from .genres import Genre
from .heuristic_scorer import BandNameScorer, BandScore, score_band_name
from .names import (
    descriptor_after_the,
    descriptor_uniqueness_boost,
    has_the_sandwich,
    is_two_word_band_name,
    looks_like_personal_name,
)
from .penalties import (
    descriptor_penalty,
    juvenile_penalty,
    long_name_penalty,
    nonsense_penalty,
    randomness_penalty,
)
from .style import style_boost
from .tokenizer import tokenize

__all__ = [
    "Genre",
    "BandNameScorer",
    "BandScore",
    "score_band_name",
    "tokenize",
    "looks_like_personal_name",
    "is_two_word_band_name",
    "has_the_sandwich",
    "descriptor_after_the",
    "descriptor_uniqueness_boost",
    "juvenile_penalty",
    "descriptor_penalty",
    "randomness_penalty",
    "long_name_penalty",
    "nonsense_penalty",
    "style_boost",
]
