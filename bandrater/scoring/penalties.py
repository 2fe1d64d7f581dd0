"""Penalty evaluators.

Each evaluator returns a non-negative penalty rounded to two decimals and
capped at MAX_PENALTY.
"""

import re

from .lexicons import (
    COMPOUND_PREFIXES,
    COMPOUND_SUFFIXES,
    DESCRIPTOR_WORDS,
    JUVENILE_WORDS,
    NONSENSE_COLORS,
    ODD_PHRASES,
    VOWELS,
)
from .tokenizer import SPACE_CLASS, round2

MAX_PENALTY = 4.0

# Word count above which every extra word costs LONG_NAME_STEP
LONG_NAME_THRESHOLD = 6
LONG_NAME_STEP = 0.6

SHOUTING_RATIO = 0.7

_ALL_DIGITS = re.compile(r"[0-9]+")
_DIGIT = re.compile(r"[0-9]")
_LETTER = re.compile(r"[a-z]")
_VOWEL = re.compile(f"[{VOWELS}]")
_CONSONANT_RUN = re.compile(rf"[^{VOWELS}{SPACE_CLASS}]{{5,}}")
_NON_LETTER = re.compile(r"[^a-z]", re.IGNORECASE | re.ASCII)
_UPPER = re.compile(r"[A-Z]")
_ASCII_LETTER = re.compile(r"[A-Za-z]")


def _capped(penalty: float) -> float:
    return min(MAX_PENALTY, round2(penalty))


def _lexicon_hits(tokens: list[str], lexicon: tuple[str, ...]) -> int:
    """Count lexicon words present among tokens (repeats count once)."""
    present = set(tokens)
    return sum(1 for word in lexicon if word in present)


def juvenile_penalty(tokens: list[str]) -> float:
    """Full point per silly word ("taco", "narwhal", ...)."""
    hits = _lexicon_hits(tokens, JUVENILE_WORDS)
    if not hits:
        return 0.0
    return _capped(1.0 * hits)


def descriptor_penalty(tokens: list[str]) -> float:
    """Penalize filler descriptors like "band", "project" or "feat"."""
    return _capped(1.2 * _lexicon_hits(tokens, DESCRIPTOR_WORDS))


def token_noise(token: str) -> float:
    """Orthographic noise of a single token (digits, missing vowels, ...)."""
    noise = 0.0
    if _ALL_DIGITS.fullmatch(token):
        noise += 0.8
    if _DIGIT.search(token) and _LETTER.search(token):
        noise += 0.8
    if not _VOWEL.search(token) and _LETTER.search(token):
        noise += 1.2
    if _CONSONANT_RUN.search(token):
        noise += 1.0
    if len(token) <= 2 and _NON_LETTER.search(token):
        noise += 0.5
    return noise


def is_shouting(text: str) -> bool:
    """More than 70% of the ASCII letters are uppercase."""
    letters = len(_ASCII_LETTER.findall(text))
    if not letters:
        return False
    return len(_UPPER.findall(text)) / letters > SHOUTING_RATIO


def randomness_penalty(text: str, tokens: list[str]) -> float:
    """Penalize keyboard-mash looking names ("XJ9QP", "3000", "BRKLN").

    Args:
        text: Raw name, used for the all-caps check
        tokens: Tokenized name
    """
    penalty = sum(token_noise(t) for t in tokens)
    if is_shouting(text):
        penalty += 0.5
    return _capped(penalty)


def long_name_penalty(tokens: list[str]) -> float:
    extra = len(tokens) - LONG_NAME_THRESHOLD
    if extra <= 0:
        return 0.0
    return _capped(LONG_NAME_STEP * extra)


def _is_weird_compound(token: str) -> bool:
    # "coldplay": adjective glued to a generic noun
    return (
        token.startswith(COMPOUND_PREFIXES)
        and token.endswith(COMPOUND_SUFFIXES)
        and len(token) >= 7
    )


def nonsense_penalty(tokens: list[str]) -> float:
    """Penalize semantically odd names ("Maroon 5", "Coldplay")."""
    penalty = 0.0

    if " ".join(tokens) in ODD_PHRASES:
        penalty += 1.5

    has_color = any(t in NONSENSE_COLORS for t in tokens)
    has_number = any(_DIGIT.search(t) for t in tokens)
    if has_color and has_number:
        penalty += 1.0

    if len(tokens) == 1 and _is_weird_compound(tokens[0]):
        penalty += 0.8

    return _capped(penalty)
