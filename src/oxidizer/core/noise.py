"""
Noise generators for the oxidation texture stage.

Every generator owns its own numpy random Generator, so two instances
never share state and a seeded instance is fully reproducible.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from oxidizer.errors import InvalidValue


@runtime_checkable
class NoiseGenerator(Protocol):
    """Anything that can produce one noise sample in [-1.0, 1.0] per call."""

    def next_sample(self) -> float:
        ...


@runtime_checkable
class BlockNoiseGenerator(NoiseGenerator, Protocol):
    """A generator that can also hand out many samples at once."""

    def next_block(self, n: int) -> np.ndarray:
        """Return the next n samples, as n successive next_sample() calls would."""
        ...


class WhiteNoise:
    """
    Simple white noise (radio static).

    Independent uniform draws in [-1.0, 1.0), flat spectrum.
    """

    def __init__(self, seed: int | None = None):
        self.rng = np.random.default_rng(seed)

    def next_sample(self) -> float:
        return float(self.rng.uniform(-1.0, 1.0))

    def next_block(self, n: int) -> np.ndarray:
        return self.rng.uniform(-1.0, 1.0, n).astype(np.float32)

    def __repr__(self) -> str:
        return "WhiteNoise()"


class BrownianNoise:
    """
    Leaky random walk (brown noise).

    Each step decays the previous state by ``damping`` and adds a
    uniform perturbation scaled by ``step``. The result is a first-order
    leaky integrator of white noise, so energy concentrates in the low
    frequencies.
    """

    def __init__(
        self,
        damping: float = 0.98,
        step: float = 0.1,
        seed: int | None = None,
    ):
        """
        Initialize the walk.

        Args:
            damping: Fraction of the previous state retained each step (0.0-1.0).
            step: Maximum per-sample perturbation.
            seed: Seed for this generator's random source. None draws fresh entropy.
        """
        if not 0.0 <= damping <= 1.0:
            raise InvalidValue(damping, f"Damping must be within [0.0, 1.0], got {damping}")
        if step < 0.0:
            raise InvalidValue(step, f"Step must be non-negative, got {step}")

        self.damping = damping
        self.step = step
        self.state = 0.0
        self.rng = np.random.default_rng(seed)

    def _advance(self, white: float) -> float:
        self.state = min(1.0, max(-1.0, self.state * self.damping + white * self.step))
        return self.state

    def next_sample(self) -> float:
        return self._advance(float(self.rng.uniform(-1.0, 1.0)))

    def next_block(self, n: int) -> np.ndarray:
        # The walk is sequential; only the white draws are vectorized.
        whites = self.rng.uniform(-1.0, 1.0, n)
        out = np.empty(n, dtype=np.float32)
        for i, white in enumerate(whites):
            out[i] = self._advance(float(white))
        return out

    def __repr__(self) -> str:
        return f"BrownianNoise(damping={self.damping}, step={self.step})"
