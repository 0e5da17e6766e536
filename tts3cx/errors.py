from __future__ import annotations

from typing import Optional


class WavError(ValueError):
    """Base class for everything the audio core raises on bad input."""


class FormatError(WavError):
    """The buffer is not a well-formed RIFF/WAVE container."""


class UnsupportedFormatError(WavError):
    """A valid WAV container whose sample encoding cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        format_code: Optional[int] = None,
        bits_per_sample: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.format_code = format_code
        self.bits_per_sample = bits_per_sample


class UpstreamError(RuntimeError):
    """The speech-synthesis API answered with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message or f"Upstream error ({status})")
        self.status = int(status)
        self.message = message
