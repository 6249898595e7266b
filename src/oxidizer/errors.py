"""
Exception hierarchy for the oxidizer package.
"""


class OxidizerError(Exception):
    """Base class for all oxidizer failures."""


class InvalidValue(OxidizerError, ValueError):
    """A user-supplied value could not be parsed or is out of range."""

    def __init__(self, value, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid value: {value!r}")


class ChannelLayoutError(OxidizerError, ValueError):
    """An interleaved stereo buffer has an odd length or an unusable shape."""

    def __init__(self, n_samples: int, message: str | None = None):
        self.n_samples = n_samples
        super().__init__(
            message
            or f"Interleaved stereo buffer must have an even length, got {n_samples} samples"
        )


class DecodingError(OxidizerError):
    """The input audio could not be read or decoded."""


class EncodingError(OxidizerError):
    """The output audio could not be written."""
