"""
Language
========

One enum covers two different things:
- Semantic vocabularies for Character entries (Canonical, Energy, Values, Society)
- Representation kinds for Colour entries (Hex, Name)
"""

from enum import Enum
from typing import Optional


class Language(str, Enum):
    """A semantic vocabulary or a representation kind."""

    CANONICAL = "canonical"
    """The canonical vocabulary of Elementary Systematics."""

    ENERGY = "energy"
    """Energy vocabulary (affirming, denying, reconciling)."""

    VALUES = "values"
    """Values vocabulary."""

    SOCIETY = "society"
    """Society vocabulary."""

    HEX = "hex"
    """Hexadecimal colour, e.g. "#FF0000"."""

    NAME = "name"
    """Named colour, e.g. "Red"."""

    @property
    def label(self) -> str:
        """Display form, e.g. "Canonical"."""
        return self.value.capitalize()

    def is_vocabulary(self) -> bool:
        return self in VOCABULARIES

    def is_representation(self) -> bool:
        return self in REPRESENTATIONS

    @classmethod
    def vocabularies(cls) -> tuple["Language", ...]:
        return VOCABULARIES

    @classmethod
    def representations(cls) -> tuple["Language", ...]:
        return REPRESENTATIONS

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["Language"]:
        """Case-insensitive lookup by value or label; None when unknown."""
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.label


VOCABULARIES: tuple[Language, ...] = (
    Language.CANONICAL,
    Language.ENERGY,
    Language.VALUES,
    Language.SOCIETY,
)

REPRESENTATIONS: tuple[Language, ...] = (Language.HEX, Language.NAME)
