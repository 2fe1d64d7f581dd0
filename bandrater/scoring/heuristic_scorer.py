"""Heuristic scorer for band and artist names."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from bandrater.config import Settings

from .genres import Genre
from .lexicons import PERFECT_NAME
from .names import (
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
from .tokenizer import clamp, round2, strip_text, tokenize

logger = logging.getLogger(__name__)

BASE_SCORE = 5.0
# Positives are amplified, penalties are not
POSITIVE_MULTIPLIER = 1.12
MIN_SCORE = 0.0
MAX_SCORE = 10.0

TWO_WORD_BONUS = 0.4
THE_SANDWICH_BONUS = 1.5
BLACK_PINK_BONUS = 0.6

_NON_LETTER = re.compile(r"[^a-z]", re.IGNORECASE | re.ASCII)
_BLACK_PINK = re.compile("blackpink", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class BandScore:
    """Scoring result for a band name with its breakdown."""

    name: str
    genre: Genre
    score: float  # 0-10
    reason: str  # empty | override | personal_name | heuristic
    positive: float = 0.0
    negative: float = 0.0
    contributions: dict[str, float] = field(default_factory=dict)
    min_acceptable_score: float = 5.0

    @property
    def passed(self) -> bool:
        """Check if the name reached the minimum acceptable score."""
        return self.score >= self.min_acceptable_score

    @property
    def bonuses(self) -> list[str]:
        return [k for k, v in self.contributions.items() if v > 0]

    @property
    def penalties(self) -> list[str]:
        return [k for k, v in self.contributions.items() if v < 0]


class BandNameScorer:
    """Rule-based band name scorer.

    Combines structural bonuses, genre style and penalties into a single
    score. Every name gets a result: the scorer never raises for string
    input.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize scorer with settings.

        Args:
            settings: Configuration settings, defaults when omitted
        """
        self.settings = settings or Settings()

    def _result(self, name: str, genre: Genre, score: float, reason: str, **kwargs) -> BandScore:
        return BandScore(
            name=name,
            genre=genre,
            score=score,
            reason=reason,
            min_acceptable_score=self.settings.scoring.min_acceptable_score,
            **kwargs,
        )

    def evaluate(self, name: str, genre: Genre | str | None = Genre.NONE) -> BandScore:
        """Score a name and keep the breakdown.

        Args:
            name: Raw band/artist name
            genre: Genre or genre label; unknown labels mean no genre

        Returns:
            BandScore with the final score and each signal's contribution
        """
        genre = Genre.from_label(genre)
        text = strip_text(name)
        if not text:
            return self._result(name, genre, MIN_SCORE, "empty")

        tokens = tokenize(text)
        if " ".join(tokens) == PERFECT_NAME:
            return self._result(name, genre, MAX_SCORE, "override")

        # Solo artists using their real name are anchored at the midpoint
        if looks_like_personal_name(text):
            return self._result(name, genre, BASE_SCORE, "personal_name")

        signals: dict[str, float] = {}
        positive = 0.0
        negative = 0.0

        if is_two_word_band_name(text):
            signals["two_word"] = TWO_WORD_BONUS
        if has_the_sandwich(text):
            signals["the_sandwich"] = THE_SANDWICH_BONUS
        signals["descriptor_uniqueness"] = descriptor_uniqueness_boost(tokens)
        signals["style"] = style_boost(text, genre)
        if genre in (Genre.POP, Genre.K_POP) and _BLACK_PINK.search(_NON_LETTER.sub("", text)):
            signals["black_pink"] = BLACK_PINK_BONUS

        for value in signals.values():
            if value >= 0:
                positive += value
            else:
                negative += -value

        penalties = {
            "descriptor_words": descriptor_penalty(tokens),
            "juvenile_words": juvenile_penalty(tokens),
            "randomness": randomness_penalty(text, tokens),
            "long_name": long_name_penalty(tokens),
            "nonsense": nonsense_penalty(tokens),
        }
        for value in penalties.values():
            negative += value

        raw_score = BASE_SCORE + POSITIVE_MULTIPLIER * positive - negative
        final_score = clamp(round2(raw_score), MIN_SCORE, MAX_SCORE)

        contributions = {k: v for k, v in signals.items() if v}
        contributions.update({k: -v for k, v in penalties.items() if v})

        logger.debug(
            "Scored %r (%s): %.2f pos=%.2f neg=%.2f %s",
            text, genre.label, final_score, positive, negative, contributions,
        )

        return self._result(
            name,
            genre,
            final_score,
            "heuristic",
            positive=round2(positive),
            negative=round2(negative),
            contributions=contributions,
        )

    def score(self, name: str, genre: Genre | str | None = Genre.NONE) -> float:
        """Score a name, returning only the number in [0, 10]."""
        return self.evaluate(name, genre).score

    def score_batch(
        self, names: Iterable[str], genre: Genre | str | None = Genre.NONE
    ) -> list[BandScore]:
        """Score a batch of names.

        Args:
            names: Names to score
            genre: Genre applied to every name

        Returns:
            List of BandScore objects, sorted by score descending
        """
        scores = [self.evaluate(n, genre) for n in names]
        return sorted(scores, key=lambda s: s.score, reverse=True)

    def filter_by_score(
        self,
        names: Iterable[str],
        genre: Genre | str | None = Genre.NONE,
        min_score: float | None = None,
    ) -> list[BandScore]:
        """Score and filter names by minimum score.

        Args:
            names: Names to score
            genre: Genre applied to every name
            min_score: Minimum score threshold, configured minimum when None

        Returns:
            List of BandScore objects above threshold, sorted by score
        """
        if min_score is None:
            min_score = self.settings.scoring.min_acceptable_score
        return [s for s in self.score_batch(names, genre) if s.score >= min_score]


_default_scorer = BandNameScorer()


def score_band_name(name: str, genre: Genre | str | None = Genre.NONE) -> float:
    """Score a band name in [0, 10] for the given genre.

    Example:
        >>> score_band_name("Taylor Swift", Genre.POP)
        5.0
    """
    return _default_scorer.score(name, genre)
