"""Configuration for the band name rater."""

from .settings import DEFAULT_EXAMPLES, ScoringConfig, Settings, load_settings

__all__ = ["DEFAULT_EXAMPLES", "ScoringConfig", "Settings", "load_settings"]
