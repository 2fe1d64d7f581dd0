"""Personal-name classification and structural detectors.

A two-word input is either a personal name ("Taylor Swift") or a generic
two-word band name ("Foo Fighters"), never both.
"""

import re
import unicodedata

from .lexicons import (
    AGENTIVE_SUFFIXES,
    COMMON_SURNAMES,
    CREATIVE_ROLES,
    FIRST_NAMES,
    GENERIC_NOUN_HINTS,
    GENERIC_ROLES,
    SURNAME_PREFIXES,
    SURNAME_SUFFIXES,
)
from .tokenizer import SPACE_CLASS, clamp, round2, split_words

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_ASCII_LETTERS = re.compile(r"[^A-Za-z]")
_ASCII_WORD = re.compile(r"[A-Za-z]+")
_THE_SANDWICH = re.compile(
    rf"\b\w+[\w.'-]*[{SPACE_CLASS}]+the[{SPACE_CLASS}]+\w+", re.IGNORECASE | re.ASCII
)


def normalize_name_part(part: str) -> str:
    """Reduce a name part to lowercase ASCII letters.

    Diacritics are stripped ("Beyoncé" -> "beyonce") and apostrophes,
    hyphens and other punctuation are dropped ("O'Connor" -> "oconnor").
    """
    decomposed = unicodedata.normalize("NFKD", part)
    without_marks = _COMBINING_MARKS.sub("", decomposed)
    return _NON_ASCII_LETTERS.sub("", without_marks).lower()


def _is_surname_like(word: str) -> bool:
    if word in COMMON_SURNAMES:
        return True
    if any(word.startswith(p) and len(word) - len(p) >= 2 for p in SURNAME_PREFIXES):
        return True
    return word.endswith(SURNAME_SUFFIXES)


def looks_like_personal_name(text: str) -> bool:
    """Check whether text looks like "FirstName Surname".

    Whitelist heuristic: the first word must be a known first name and the
    second a known surname or match a common surname prefix/suffix.
    """
    parts = split_words(text)
    if len(parts) != 2:
        return False

    first, last = (normalize_name_part(p) for p in parts)
    if not first or not last:
        return False

    if first in GENERIC_NOUN_HINTS or last in GENERIC_NOUN_HINTS:
        return False

    return first in FIRST_NAMES and _is_surname_like(last)


def is_two_word_band_name(text: str) -> bool:
    """Two purely alphabetic words that are not a personal name."""
    parts = split_words(text)
    if len(parts) != 2:
        return False
    if not all(_ASCII_WORD.fullmatch(p) for p in parts):
        return False
    return not looks_like_personal_name(text)


def has_the_sandwich(text: str) -> bool:
    """Detect the "X the Y" pattern, e.g. "Young the Giant"."""
    return _THE_SANDWICH.search(text) is not None


def descriptor_after_the(tokens: list[str]) -> str | None:
    """Return the token following the first "the", if any."""
    try:
        idx = tokens.index("the")
    except ValueError:
        return None
    if idx + 1 < len(tokens):
        return tokens[idx + 1]
    return None


def descriptor_uniqueness_boost(tokens: list[str]) -> float:
    """Reward an inventive word after "the" and punish a generic role.

    Returns:
        Value in [-1.0, 1.2]; -0.6 for "the rapper", up to 1.2 for
        "the cartographer".
    """
    descriptor = descriptor_after_the(tokens)
    if not descriptor:
        return 0.0

    desc = descriptor.lower()
    if desc in GENERIC_ROLES:
        return -0.6

    boost = 0.0
    if desc in CREATIVE_ROLES:
        boost += 0.9
    if desc.endswith(AGENTIVE_SUFFIXES):
        boost += 0.5
    if len(desc) >= 6:
        boost += 0.2
    return clamp(round2(boost), -1.0, 1.2)
