"""
The oxidation engine.

Owns an interleaved stereo buffer and the low-pass filter state, and
exposes the processing stages as chainable methods:

    output = (
        Oxidizer(BrownianNoise())
        .consume(samples)
        .process_multiple(OxidationLevel.DEEP, 2)
        .apply_noise_texture(0.05)
        .normalize()
        .collect_samples()
    )
"""

import logging
from typing import Sequence, Union

import numpy as np
from scipy import signal as scipy_signal

from oxidizer.core.levels import OxidationLevel
from oxidizer.core.noise import BlockNoiseGenerator, NoiseGenerator
from oxidizer.errors import ChannelLayoutError, InvalidValue

logger = logging.getLogger(__name__)

# Peak target after normalization, roughly -0.5 dBFS of headroom.
NORMALIZE_CEILING = 0.95

LevelLike = Union[OxidationLevel, str]


def perceived_intensity(intensity: float) -> float:
    """
    Map a linear 0-1 intensity onto a logarithmic-feel curve.

    0.0 maps to 0.0 and 1.0 maps to 1.0, but low settings stay subtle
    instead of jumping out as they would on a linear scale.
    """
    return (10.0 ** intensity - 1.0) / 9.0


class Oxidizer:
    """
    Stateful oxidation engine for interleaved stereo audio.

    The filter state (last output per channel) lives as long as the
    engine and is carried across every ``process`` call and every
    consume/collect cycle. Create a new engine to start from silence,
    or call ``reset_filter``.
    """

    def __init__(self, noise_generator: NoiseGenerator):
        """
        Initialize the engine.

        Args:
            noise_generator: Source of texture noise, used by apply_noise_texture.
        """
        self.noise_generator = noise_generator
        self.last_l = 0.0
        self.last_r = 0.0
        self._buffer = np.empty(0, dtype=np.float32)

    @property
    def samples(self) -> np.ndarray:
        """The buffer currently held by the engine."""
        return self._buffer

    @property
    def n_frames(self) -> int:
        """Number of complete stereo frames in the buffer."""
        return self._buffer.size // 2

    @property
    def filter_state(self) -> tuple[float, float]:
        return self.last_l, self.last_r

    def reset_filter(self) -> "Oxidizer":
        """Return the filter to silence."""
        self.last_l = 0.0
        self.last_r = 0.0
        return self

    def _require_stereo(self) -> None:
        if self._buffer.size % 2:
            raise ChannelLayoutError(self._buffer.size)

    def consume(self, samples: Union[np.ndarray, Sequence[float]]) -> "Oxidizer":
        """
        Take ownership of an interleaved sample buffer.

        A writable float32 array is adopted as-is and mutated in place
        by later stages; anything else is converted to float32 once.
        The previous buffer, if any, is dropped.

        Args:
            samples: Interleaved stereo samples (L0, R0, L1, R1, ...), or
                a frame-major array of shape (n_frames, 2).

        Raises:
            ChannelLayoutError: If a multi-dimensional array is not (n_frames, 2).
        """
        buffer = np.asarray(samples, dtype=np.float32)
        if buffer.ndim != 1:
            if buffer.ndim != 2 or buffer.shape[1] != 2:
                raise ChannelLayoutError(
                    buffer.size,
                    f"Expected interleaved samples or an (n_frames, 2) array, got shape {buffer.shape}",
                )
            # Row-major flattening gives L, R, L, R, ...
            buffer = buffer.reshape(-1)
        if not buffer.flags.writeable:
            buffer = buffer.copy()
        self._buffer = buffer
        logger.debug("Consumed %d samples (%d frames)", self._buffer.size, self.n_frames)
        return self

    def process(self, level: LevelLike) -> "Oxidizer":
        """
        Apply one pass of the one-pole low-pass filter to both channels.

        For every frame, ``last = last + alpha * (x - last)`` per channel.
        The recursion picks up from the state left by the previous call.

        Args:
            level: Oxidation level or its name.

        Raises:
            ChannelLayoutError: If the buffer length is odd.
        """
        if isinstance(level, str):
            level = OxidationLevel.parse(level)
        self._require_stereo()

        if self._buffer.size == 0:
            return self

        alpha = level.alpha
        # y[n] = alpha * x[n] + (1 - alpha) * y[n-1]
        b = [alpha]
        a = [1.0, alpha - 1.0]

        left, _ = scipy_signal.lfilter(
            b, a, self._buffer[0::2], zi=[(1.0 - alpha) * self.last_l]
        )
        right, _ = scipy_signal.lfilter(
            b, a, self._buffer[1::2], zi=[(1.0 - alpha) * self.last_r]
        )

        self._buffer[0::2] = left
        self._buffer[1::2] = right
        self.last_l = float(left[-1])
        self.last_r = float(right[-1])

        return self

    def process_multiple(self, level: LevelLike, passes: int) -> "Oxidizer":
        """
        Run ``process`` the given number of times.

        Each extra pass steepens the roll-off and lowers the energy of
        any non-DC content. Zero passes leaves the buffer untouched.
        """
        if passes < 0:
            raise InvalidValue(passes, f"Number of passes must be non-negative, got {passes}")
        if isinstance(level, str):
            level = OxidationLevel.parse(level)
        self._require_stereo()

        logger.debug("Filtering %d pass(es) at level %s (alpha=%s)", passes, level, level.alpha)
        for _ in range(passes):
            self.process(level)
        return self

    def apply_noise_texture(self, intensity: float) -> "Oxidizer":
        """
        Mix in noise and soft-saturate.

        Draws one noise value per channel per frame (left first, then
        right), adds it scaled by the perceived intensity, then passes
        the result through tanh so the output stays inside (-1, 1).

        Args:
            intensity: Linear texture amount, nominally 0.0-1.0.

        Raises:
            ChannelLayoutError: If the buffer length is odd.
        """
        self._require_stereo()

        amount = perceived_intensity(intensity)
        n = self._buffer.size

        if isinstance(self.noise_generator, BlockNoiseGenerator):
            noise = np.asarray(self.noise_generator.next_block(n), dtype=np.float32)
        else:
            noise = np.fromiter(
                (self.noise_generator.next_sample() for _ in range(n)),
                dtype=np.float32,
                count=n,
            )

        np.add(self._buffer, noise * np.float32(amount), out=self._buffer)
        np.tanh(self._buffer, out=self._buffer)

        logger.debug("Applied noise texture (intensity=%s, perceived=%.4f)", intensity, amount)
        return self

    def normalize(self) -> "Oxidizer":
        """
        Scale the buffer so its loudest sample reaches 0.95.

        NaN and infinite samples are zeroed first so the result is always
        finite. A silent buffer is left unchanged.
        """
        if self._buffer.size == 0:
            return self

        np.nan_to_num(self._buffer, copy=False, nan=0.0, posinf=0.0, neginf=0.0)
        max_peak = float(np.max(np.abs(self._buffer)))
        if max_peak > 0.0:
            self._buffer *= np.float32(NORMALIZE_CEILING / max_peak)
            logger.debug("Normalized peak %.6f -> %.2f", max_peak, NORMALIZE_CEILING)

        return self

    def collect_samples(self) -> np.ndarray:
        """
        Hand the buffer back to the caller.

        The engine is left holding an empty buffer, ready for the next
        ``consume``. Filter and noise state are kept.
        """
        samples = self._buffer
        self._buffer = np.empty(0, dtype=np.float32)
        return samples
