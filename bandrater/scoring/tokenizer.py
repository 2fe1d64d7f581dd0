"""Tokenization and rounding helpers shared by all evaluators."""

import re
from decimal import ROUND_HALF_UP, Decimal

# Whitespace as a character-class body. Unlike str.isspace() this excludes
# the \x1c-\x1f separators and \x85, and includes the byte order mark.
SPACE_CLASS = "\t\n\x0b\x0c\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_SPACE_RUN = re.compile(f"[{SPACE_CLASS}]+")
_EDGE_SPACE = re.compile(rf"^[{SPACE_CLASS}]+|[{SPACE_CLASS}]+\Z")
_NON_TOKEN_CHARS = re.compile(f"[^a-z0-9{SPACE_CLASS}']")
_CENT = Decimal("0.01")


def strip_text(text: str) -> str:
    """Trim leading and trailing whitespace."""
    return _EDGE_SPACE.sub("", text)


def _split(text: str) -> list[str]:
    return [part for part in _SPACE_RUN.split(text) if part]


def tokenize(text: str) -> list[str]:
    """Split a name into lowercase word tokens.

    Every character outside ``[a-z0-9']`` and whitespace becomes a space,
    so punctuation, control characters and non-ASCII letters act as
    separators.

    Example:
        >>> tokenize("Portugal. The Man")
        ['portugal', 'the', 'man']
    """
    return _split(_NON_TOKEN_CHARS.sub(" ", text.lower()))


def split_words(text: str) -> list[str]:
    """Split the raw text on whitespace, keeping case and punctuation."""
    return _split(text)


def round2(value: float) -> float:
    """Round to two decimals, ties away from zero.

    Works on the exact binary value of ``value`` so that e.g. 0.125 rounds
    to 0.13 rather than to the even neighbour.
    """
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
