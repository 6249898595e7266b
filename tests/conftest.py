"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

# Default sample rate for test audio
TEST_SR = 44100


@pytest.fixture
def sample_rate() -> int:
    """Default sample rate for tests."""
    return TEST_SR


@pytest.fixture
def stereo_sine(sample_rate: int) -> np.ndarray:
    """
    Generate half a second of interleaved stereo sine.

    Left is 440Hz, right is 660Hz so the channels can be told apart.
    """
    duration = 0.5
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    left = 0.5 * np.sin(2 * np.pi * 440.0 * t)
    right = 0.5 * np.sin(2 * np.pi * 660.0 * t)

    samples = np.empty(2 * len(t), dtype=np.float32)
    samples[0::2] = left
    samples[1::2] = right
    return samples


@pytest.fixture
def nyquist_square() -> np.ndarray:
    """
    Per-channel alternating square wave, 1000 frames.

    Frames go (1, 1), (-1, -1), (1, 1), ... so each channel flips sign
    every sample.
    """
    frames = np.where(np.arange(1000) % 2 == 0, 1.0, -1.0).astype(np.float32)
    return np.repeat(frames, 2)


@pytest.fixture
def temp_audio_file(tmp_path, sample_rate):
    """Create a temporary stereo WAV file for testing file I/O."""
    import soundfile as sf

    t = np.linspace(0, 0.25, int(sample_rate * 0.25), endpoint=False)
    left = 0.4 * np.sin(2 * np.pi * 220.0 * t)
    right = 0.4 * np.sin(2 * np.pi * 330.0 * t)
    audio_path = tmp_path / "test_audio.wav"
    sf.write(audio_path, np.column_stack([left, right]).astype(np.float32), sample_rate)
    return audio_path


@pytest.fixture
def temp_mono_file(tmp_path, sample_rate):
    """Create a temporary mono WAV file."""
    import soundfile as sf

    t = np.linspace(0, 0.1, int(sample_rate * 0.1), endpoint=False)
    y = (0.3 * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)
    audio_path = tmp_path / "mono.wav"
    sf.write(audio_path, y, sample_rate)
    return audio_path
