"""Audio decoding and encoding."""

from oxidizer.io.audio import interleave, load_audio, save_audio, to_pcm16

__all__ = ["interleave", "load_audio", "save_audio", "to_pcm16"]
