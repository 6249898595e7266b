"""Audio oxidation: low-pass darkening, noise texture and soft saturation."""

from oxidizer.config import OxidizerConfig, make_noise_generator
from oxidizer.core.engine import Oxidizer
from oxidizer.core.levels import OxidationLevel
from oxidizer.core.noise import BlockNoiseGenerator, BrownianNoise, NoiseGenerator, WhiteNoise
from oxidizer.errors import (
    ChannelLayoutError,
    DecodingError,
    EncodingError,
    InvalidValue,
    OxidizerError,
)
from oxidizer.io.audio import load_audio, save_audio
from oxidizer.pipeline import OxidationPipeline

__version__ = "0.1.0"
__all__ = [
    "Oxidizer",
    "OxidationLevel",
    "NoiseGenerator",
    "BlockNoiseGenerator",
    "WhiteNoise",
    "BrownianNoise",
    "OxidizerConfig",
    "make_noise_generator",
    "OxidationPipeline",
    "load_audio",
    "save_audio",
    "OxidizerError",
    "InvalidValue",
    "ChannelLayoutError",
    "DecodingError",
    "EncodingError",
]
