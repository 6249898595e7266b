"""Core signal processing: filter levels, noise generators and the engine."""

from oxidizer.core.engine import Oxidizer
from oxidizer.core.levels import OxidationLevel
from oxidizer.core.noise import BlockNoiseGenerator, BrownianNoise, NoiseGenerator, WhiteNoise

__all__ = ["Oxidizer", "OxidationLevel", "NoiseGenerator", "BlockNoiseGenerator", "WhiteNoise", "BrownianNoise"]
