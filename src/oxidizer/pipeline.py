"""
File-to-file oxidation pipeline.

Orchestrates the complete flow from an input audio file to an
oxidized 16-bit PCM WAV.
"""

import logging
from pathlib import Path
from typing import Any, Union

import numpy as np

from oxidizer.config import OxidizerConfig
from oxidizer.core.engine import Oxidizer
from oxidizer.io.audio import load_audio, save_audio

logger = logging.getLogger(__name__)


class OxidationPipeline:
    """
    Complete audio-to-audio processing pipeline.

    Combines decoding, filtering, noise texture, normalization and
    encoding behind a single interface. The engine, and with it the
    filter and noise state, is created once per pipeline.
    """

    def __init__(self, config: OxidizerConfig | None = None):
        """
        Initialize the pipeline.

        Args:
            config: Run settings. Defaults to OxidizerConfig().
        """
        self.config = config or OxidizerConfig()
        self.engine = Oxidizer(self.config.make_noise_generator())

    def load(self, audio_path: Union[str, Path]) -> tuple[np.ndarray, int]:
        """
        Phase A: Decode audio into an interleaved stereo buffer.

        Returns:
            Tuple of (samples, sample_rate).
        """
        return load_audio(audio_path)

    def oxidize(self, samples: np.ndarray) -> np.ndarray:
        """
        Phase B: Filter, texture and normalize a buffer.

        Args:
            samples: Interleaved stereo samples. Mutated in place.

        Returns:
            The processed buffer.
        """
        cfg = self.config
        logger.info(
            "Oxidizing %d frames: level=%s passes=%d noise=%s intensity=%s",
            len(samples) // 2,
            cfg.level,
            cfg.passes,
            cfg.noise,
            cfg.intensity,
        )
        return (
            self.engine.consume(samples)
            .process_multiple(cfg.level, cfg.passes)
            .apply_noise_texture(cfg.intensity)
            .normalize()
            .collect_samples()
        )

    def save(
        self,
        samples: np.ndarray,
        output_path: Union[str, Path],
        sample_rate: int,
    ) -> Path:
        """
        Phase C: Encode to 16-bit PCM WAV.
        """
        return save_audio(output_path, samples, sample_rate)

    def process(
        self,
        audio_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> dict[str, Any]:
        """
        Run the complete pipeline from input file to output file.

        Args:
            audio_path: Path to input audio file.
            output_path: Path for the output WAV.

        Returns:
            Dictionary describing the written file.
        """
        samples, source_rate = self.load(audio_path)
        samples = self.oxidize(samples)

        sample_rate = self.config.sample_rate or source_rate
        written_path = self.save(samples, output_path, sample_rate)

        n_frames = len(samples) // 2
        return {
            "output_path": str(written_path),
            "n_frames": n_frames,
            "sample_rate": sample_rate,
            "source_sample_rate": source_rate,
            "duration": n_frames / sample_rate,
            "peak": float(np.max(np.abs(samples))) if samples.size else 0.0,
        }
