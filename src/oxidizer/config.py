"""
User-facing configuration for an oxidation run.
"""

from dataclasses import dataclass
from typing import Union

from oxidizer.core.levels import OxidationLevel
from oxidizer.core.noise import BrownianNoise, NoiseGenerator, WhiteNoise
from oxidizer.errors import InvalidValue

NOISE_TYPES = ("white", "brown")


def make_noise_generator(name: str, seed: int | None = None) -> NoiseGenerator:
    """
    Build a noise generator by name.

    Args:
        name: "white" or "brown" (case-insensitive).
        seed: Optional seed for the generator's random source.
    """
    key = name.strip().lower()
    if key == "white":
        return WhiteNoise(seed=seed)
    if key == "brown":
        return BrownianNoise(seed=seed)
    raise InvalidValue(name, f"Unknown noise type: {name} (expected one of {', '.join(NOISE_TYPES)})")


@dataclass
class OxidizerConfig:
    """Settings for a single file-to-file oxidation."""

    level: Union[OxidationLevel, str] = OxidationLevel.DEEP
    noise: str = "brown"  # "white", "brown"
    intensity: float = 0.05  # 0.0 - 1.0, mapped to a logarithmic curve
    passes: int = 1
    sample_rate: int | None = None  # None keeps the decoded rate
    seed: int | None = None

    def __post_init__(self):
        if isinstance(self.level, str):
            self.level = OxidationLevel.parse(self.level)

        self.noise = self.noise.strip().lower()
        if self.noise not in NOISE_TYPES:
            raise InvalidValue(
                self.noise,
                f"Unknown noise type: {self.noise} (expected one of {', '.join(NOISE_TYPES)})",
            )

        if not 0.0 <= self.intensity <= 1.0:
            raise InvalidValue(
                self.intensity, f"Intensity must be within [0.0, 1.0], got {self.intensity}"
            )
        if self.passes < 0:
            raise InvalidValue(self.passes, f"Passes must be non-negative, got {self.passes}")
        if self.sample_rate is not None and self.sample_rate <= 0:
            raise InvalidValue(
                self.sample_rate, f"Sample rate must be positive, got {self.sample_rate}"
            )

    def make_noise_generator(self) -> NoiseGenerator:
        return make_noise_generator(self.noise, seed=self.seed)
