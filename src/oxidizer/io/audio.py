"""
Audio file input and output.

Decodes anything librosa can read into an interleaved stereo float32
buffer, and writes interleaved buffers back out as 16-bit PCM WAV.
"""

import logging
from pathlib import Path
from typing import Union

import librosa
import numpy as np
import soundfile as sf

from oxidizer.errors import ChannelLayoutError, DecodingError, EncodingError, InvalidValue

logger = logging.getLogger(__name__)

PCM16_SCALE = 32767


def interleave(y: np.ndarray) -> np.ndarray:
    """
    Convert a librosa signal to an interleaved stereo buffer.

    Mono input is duplicated into both channels. Inputs with more than
    two channels keep only the first two.

    Args:
        y: Shape (n,) for mono or (channels, n) for multichannel audio.

    Returns:
        1-D float32 array laid out as L0, R0, L1, R1, ...
    """
    y = np.asarray(y, dtype=np.float32)

    if y.ndim == 1:
        left = right = y
    else:
        left = y[0]
        right = y[1] if y.shape[0] > 1 else y[0]

    out = np.empty(2 * left.size, dtype=np.float32)
    out[0::2] = left
    out[1::2] = right
    return out


def load_audio(audio_path: Union[str, Path]) -> tuple[np.ndarray, int]:
    """
    Load audio from file at its native sample rate.

    Args:
        audio_path: Path to audio file (wav, mp3, flac, ...).

    Returns:
        Tuple of (interleaved_samples, sample_rate).

    Raises:
        DecodingError: If the file is missing or cannot be decoded.
    """
    audio_path = Path(audio_path)
    if not audio_path.exists():
        raise DecodingError(f"Input file not found: {audio_path}")

    try:
        y, sr = librosa.load(audio_path, sr=None, mono=False)
    except Exception as e:
        raise DecodingError(f"Could not decode {audio_path}: {e}") from e

    samples = interleave(y)
    logger.info(
        "Decoded %s: %d frames at %d Hz (%d source channel(s))",
        audio_path,
        samples.size // 2,
        sr,
        1 if y.ndim == 1 else y.shape[0],
    )
    return samples, int(sr)


def to_pcm16(samples: np.ndarray) -> np.ndarray:
    """
    Convert float samples to 16-bit integers.

    Values are clipped to [-1.0, 1.0], scaled by 32767 and truncated
    toward zero. NaN becomes silence.
    """
    clipped = np.clip(np.nan_to_num(np.asarray(samples, dtype=np.float32)), -1.0, 1.0)
    return (clipped * PCM16_SCALE).astype(np.int16)


def save_audio(
    output_path: Union[str, Path],
    samples: np.ndarray,
    sample_rate: int,
) -> Path:
    """
    Write interleaved stereo samples to a 16-bit PCM WAV file.

    Args:
        output_path: Destination path. Parent directories are created.
        samples: Interleaved stereo float samples.
        sample_rate: Output sample rate in Hz.

    Returns:
        Path to the written file.

    Raises:
        ChannelLayoutError: If the sample count is odd.
        EncodingError: If the file cannot be written.
    """
    if sample_rate <= 0:
        raise InvalidValue(sample_rate, f"Sample rate must be positive, got {sample_rate}")

    samples = np.asarray(samples)
    if samples.size % 2:
        raise ChannelLayoutError(samples.size)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    frames = to_pcm16(samples).reshape(-1, 2)
    try:
        sf.write(output_path, frames, sample_rate, subtype="PCM_16", format="WAV")
    except (RuntimeError, ValueError, OSError) as e:
        raise EncodingError(f"Could not write {output_path}: {e}") from e

    logger.info("Wrote %s: %d frames at %d Hz", output_path, len(frames), sample_rate)
    return output_path
