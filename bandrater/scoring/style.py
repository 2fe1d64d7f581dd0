"""Genre style evaluator ("bouba/kiki" boost).

Phonetic symbolism: harsh consonants (k, s, t, z, ...) suit heavy genres,
soft rounded ones (m, n, l, b, ...) suit pop. Each genre adds its own
pattern bonuses on top.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from .genres import Genre
from .lexicons import (
    DARK_WORDS,
    HARSH_CHARS,
    HIP_HOP_PREFIXES,
    RURAL_WORDS,
    SOFT_CHARS,
    STYLE_COLORS,
    SYNTH_WORDS,
    TECH_CHARS,
)
from .names import has_the_sandwich, looks_like_personal_name
from .tokenizer import clamp, round2, split_words, tokenize

MIN_STYLE = -1.5
MAX_STYLE = 1.8


def _whole_words(words: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"\b(" + "|".join(words) + r")\b", re.IGNORECASE | re.ASCII)


_HARSH = re.compile(f"[{HARSH_CHARS}]", re.IGNORECASE | re.ASCII)
_SOFT = re.compile(f"[{SOFT_CHARS}]", re.IGNORECASE | re.ASCII)
_TECH = re.compile(f"[{TECH_CHARS}]", re.IGNORECASE | re.ASCII)
_PINK = re.compile("pink", re.IGNORECASE | re.ASCII)
# Any character but a line terminator, repeated
_DOUBLED_CHAR = re.compile("([^\n\r\u2028\u2029])\\1")
_DARK = re.compile("|".join(DARK_WORDS), re.IGNORECASE | re.ASCII)
_NON_LETTER = re.compile(r"[^a-z]", re.IGNORECASE | re.ASCII)
_DIGIT = re.compile(r"[0-9]")
_SEPARATOR = re.compile(r"[-_/]")
_HIP_HOP_PREFIX = _whole_words(HIP_HOP_PREFIXES)
_SYNTH = _whole_words(SYNTH_WORDS)
_RURAL = _whole_words(RURAL_WORDS)
_AND = re.compile(r"&|\band\b", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class PhoneticProfile:
    """Harsh and soft character counts of a raw name."""

    harsh: int
    soft: int

    @classmethod
    def of(cls, text: str) -> "PhoneticProfile":
        return cls(harsh=len(_HARSH.findall(text)), soft=len(_SOFT.findall(text)))

    @property
    def is_soft(self) -> bool:
        return self.soft >= self.harsh

    @property
    def is_harsh(self) -> bool:
        return self.harsh > self.soft


def _pop_style(text: str, profile: PhoneticProfile) -> float:
    # Round sounds, colour pairings, compact names, doubled letters
    boost = 0.0
    if profile.is_soft:
        boost += 0.6
    has_color = any(t in STYLE_COLORS for t in tokenize(text))
    if has_color and _PINK.search(text):
        boost += 0.6
    if len(split_words(text)) <= 2:
        boost += 0.3
    if _DOUBLED_CHAR.search(text):
        boost += 0.2
    return boost


def _indie_style(text: str, profile: PhoneticProfile) -> float:
    boost = 0.0
    if has_the_sandwich(text):
        boost += 0.6
    if profile.is_soft:
        boost += 0.2
    return boost


def _heavy_style(text: str, profile: PhoneticProfile) -> float:
    boost = 0.0
    if profile.is_harsh:
        boost += 0.6
    if _DARK.search(text):
        boost += 0.6
    if len(_NON_LETTER.sub("", text)) >= 6:
        boost += 0.2
    return boost


def _math_rock_style(text: str, profile: PhoneticProfile) -> float:
    # Numbers, separators and clicky consonants ("Toe-7/8")
    boost = 0.0
    if _DIGIT.search(text):
        boost += 0.6
    if _SEPARATOR.search(text):
        boost += 0.3
    if len(_TECH.findall(text)) >= 2:
        boost += 0.4
    return boost


def _hip_hop_style(text: str, profile: PhoneticProfile) -> float:
    boost = 0.0
    if _HIP_HOP_PREFIX.search(text):
        boost += 0.6
    if len(split_words(text)) <= 3:
        boost += 0.2
    return boost


def _electronic_style(text: str, profile: PhoneticProfile) -> float:
    boost = 0.0
    if _DIGIT.search(text):
        boost += 0.4
    if _SYNTH.search(text):
        boost += 0.6
    return boost


def _country_style(text: str, profile: PhoneticProfile) -> float:
    # Places, roads and the personal-name tradition
    boost = 0.0
    if _RURAL.search(text):
        boost += 0.6
    if looks_like_personal_name(text):
        boost += 0.4
    if _AND.search(text):
        boost += 0.2
    return boost


StyleRule = Callable[[str, PhoneticProfile], float]

# Genre.NONE deliberately has no entry
STYLE_RULES: dict[Genre, StyleRule] = {
    Genre.POP: _pop_style,
    Genre.K_POP: _pop_style,
    Genre.INDIE_ALT: _indie_style,
    Genre.METAL: _heavy_style,
    Genre.ROCK: _heavy_style,
    Genre.MATH_ROCK: _math_rock_style,
    Genre.HIP_HOP: _hip_hop_style,
    Genre.ELECTRONIC: _electronic_style,
    Genre.COUNTRY: _country_style,
}


def style_boost(text: str, genre: Genre | str | None) -> float:
    """Score how well a name fits the conventions of a genre.

    Args:
        text: Raw name (case and punctuation matter)
        genre: Genre or genre label; unknown labels contribute nothing

    Returns:
        Boost in [-1.5, 1.8], rounded to two decimals
    """
    rule = STYLE_RULES.get(Genre.from_label(genre))
    if rule is None:
        return 0.0
    boost = rule(text, PhoneticProfile.of(text))
    return clamp(round2(boost), MIN_STYLE, MAX_STYLE)
