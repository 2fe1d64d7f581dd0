"""Genre enumeration used to bias style scoring."""

import re
from enum import Enum


class Genre(Enum):
    """Style category selected by the caller.

    Values are the display labels shown to users.
    """

    NONE = "None"
    POP = "Pop"
    K_POP = "K-Pop"
    INDIE_ALT = "Indie/Alt"
    METAL = "Metal"
    MATH_ROCK = "Math Rock"
    ROCK = "Rock"
    HIP_HOP = "Hip Hop"
    ELECTRONIC = "Electronic"
    COUNTRY = "Country"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def labels(cls) -> list[str]:
        """Return all genre labels in display order."""
        return [genre.value for genre in cls]

    @classmethod
    def parse(cls, label: "Genre | str | None") -> "Genre | None":
        """Parse a genre label, returning None if it names no genre.

        Matching ignores case, spaces and punctuation, so "k-pop", "KPop"
        and "kpop" all resolve to K_POP.
        """
        if isinstance(label, Genre):
            return label
        if label is None:
            return None
        key = _label_key(label)
        if not key:
            return None
        return _LABEL_INDEX.get(key)

    @classmethod
    def from_label(cls, label: "Genre | str | None") -> "Genre":
        """Parse a genre label, falling back to Genre.NONE when unknown."""
        return cls.parse(label) or cls.NONE


def _label_key(label: str) -> str:
    return re.sub(r"[^a-z0-9]", "", label.lower())


_LABEL_INDEX: dict[str, Genre] = {}
for _genre in Genre:
    _LABEL_INDEX[_label_key(_genre.value)] = _genre
    _LABEL_INDEX[_label_key(_genre.name)] = _genre
