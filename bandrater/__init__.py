"""Heuristic band name rater."""

from .scoring import BandNameScorer, BandScore, Genre, score_band_name
from .config import Settings, load_settings

__version__ = "0.1.0"

__all__ = [
    "BandNameScorer",
    "BandScore",
    "Genre",
    "Settings",
    "load_settings",
    "score_band_name",
]
