"""
Oxidation levels for the one-pole low-pass filter.

Each level maps to the smoothing coefficient (alpha) of the filter.
Lower alpha means a lower cutoff frequency and a darker tone.
"""

from enum import Enum

from oxidizer.errors import InvalidValue


class OxidationLevel(Enum):
    """Intensity of the oxidation (low-pass) effect."""

    CLEAR = 0.1  # Warm and clean, most treble retained
    DEEP = 0.02  # Deep and mellow, high end noticeably reduced
    MUFFLED = 0.005  # Extreme low pass, almost nothing above the bass

    @property
    def alpha(self) -> float:
        """Filter coefficient for the one-pole low-pass recursion."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "OxidationLevel":
        """
        Parse a level name, ignoring case.

        Args:
            text: One of "clear", "deep" or "muffled".

        Returns:
            The matching OxidationLevel.

        Raises:
            InvalidValue: If the name is not a known level.
        """
        try:
            return cls[text.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidValue(text, f"Unknown oxidation level: {text}") from None

    @classmethod
    def names(cls) -> list[str]:
        return [level.name.lower() for level in cls]

    def __str__(self) -> str:
        return self.name.lower()
