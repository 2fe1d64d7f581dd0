"""Settings loader and configuration dataclass."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from bandrater.scoring.genres import Genre

# Names offered as quick picks by the rater front end
DEFAULT_EXAMPLES: list[str] = [
    "Taylor Swift",
    "BLACKPINK",
    "Mastodon",
    "Young the Giant",
    "Portugal. The Man",
    "The Taco Unicorns 3000",
    "DJ XJ9QP",
    "Foo Fighters",
    "Arctic Monkeys",
    "Toe-7/8",
]


@dataclass
class ScoringConfig:
    """Score thresholds used for pass/fail and display."""

    min_acceptable_score: float = 5.0
    excellent_score: float = 7.0


@dataclass
class Settings:
    """Main settings container for the band name rater."""

    default_genre: str = Genre.NONE.label
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    examples: list[str] = field(default_factory=lambda: list(DEFAULT_EXAMPLES))

    def __post_init__(self) -> None:
        if Genre.parse(self.default_genre) is None:
            raise ValueError(
                f"Unknown default_genre '{self.default_genre}'. "
                f"Valid genres: {', '.join(Genre.labels())}"
            )

    @property
    def genre(self) -> Genre:
        """Default genre as an enum member."""
        return Genre.from_label(self.default_genre)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create Settings from dictionary.

        Keys that are not part of Settings are ignored.
        """
        scoring_data = data.get("scoring") or {}
        kwargs: dict[str, Any] = {}
        if "default_genre" in data:
            kwargs["default_genre"] = str(data["default_genre"])
        if data.get("examples"):
            kwargs["examples"] = [str(e) for e in data["examples"]]

        try:
            scoring = ScoringConfig(**scoring_data) if scoring_data else ScoringConfig()
        except TypeError as e:
            raise ValueError(f"Invalid scoring configuration: {e}") from e

        return cls(scoring=scoring, **kwargs)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML configuration file.

    Args:
        config_path: Path to configuration file. If None, uses default config.yaml

    Returns:
        Settings object with loaded configuration

    Raises:
        ValueError: If the file is not a YAML mapping, names an unknown genre
            or has unknown scoring keys
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        return Settings()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")

    return Settings.from_dict(data)
