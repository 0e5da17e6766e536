from __future__ import annotations

import math
import struct

import numpy as np

from tts3cx.errors import FormatError, UnsupportedFormatError
from tts3cx.types import AudioFormat

SUPPORTED_BITS = {
    AudioFormat.PCM: (8, 16, 24),
    AudioFormat.IEEE_FLOAT: (32,),
}


def _clamp(x: float, lo: float, hi: float) -> float:
    if math.isnan(x):
        return 0.0
    return float(min(max(x, lo), hi))


def check_supported(audio_format: int, bits_per_sample: int) -> None:
    try:
        fmt = AudioFormat(int(audio_format))
    except ValueError:
        raise UnsupportedFormatError(
            f"Unsupported WAV format code: {audio_format}", format_code=int(audio_format)
        ) from None
    if int(bits_per_sample) not in SUPPORTED_BITS[fmt]:
        kind = "PCM" if fmt is AudioFormat.PCM else "float"
        raise UnsupportedFormatError(
            f"Unsupported {kind} bit depth: {bits_per_sample}",
            format_code=int(audio_format),
            bits_per_sample=int(bits_per_sample),
        )


def decode_sample(buf: bytes, offset: int, audio_format: int, bits_per_sample: int) -> float:
    """Decode one raw sample at ``offset`` into a float in [-1, 1]."""
    check_supported(audio_format, bits_per_sample)
    bits = int(bits_per_sample)
    if offset < 0 or offset + bits // 8 > len(buf):
        raise FormatError(f"Truncated sample at offset {offset}")

    if int(audio_format) == AudioFormat.IEEE_FLOAT:
        (value,) = struct.unpack_from("<f", buf, offset)
        return _clamp(value, -1.0, 1.0)

    if bits == 16:
        (v,) = struct.unpack_from("<h", buf, offset)
        return v / 32768.0 if v < 0 else v / 32767.0
    if bits == 8:
        return (buf[offset] - 128) / 128.0

    v = buf[offset] | (buf[offset + 1] << 8) | (buf[offset + 2] << 16)
    if v & 0x800000:
        v -= 0x1000000
    return _clamp(v / 8388608.0, -1.0, 1.0)


def decode_samples(raw: bytes, audio_format: int, bits_per_sample: int) -> np.ndarray:
    """Vectorised ``decode_sample`` over a packed run of samples.

    ``raw`` must hold a whole number of samples. Returns float64 so callers
    can mix channels before narrowing to float32.
    """
    check_supported(audio_format, bits_per_sample)
    bits = int(bits_per_sample)

    if int(audio_format) == AudioFormat.IEEE_FLOAT:
        values = np.frombuffer(raw, dtype="<f4").astype(np.float64)
        return np.clip(np.nan_to_num(values, nan=0.0), -1.0, 1.0)

    if bits == 16:
        ints = np.frombuffer(raw, dtype="<i2").astype(np.float64)
        return np.where(ints < 0, ints / 32768.0, ints / 32767.0)
    if bits == 8:
        return (np.frombuffer(raw, dtype=np.uint8).astype(np.float64) - 128.0) / 128.0

    triples = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
    ints = triples[:, 0] | (triples[:, 1] << 8) | (triples[:, 2] << 16)
    ints = np.where(ints & 0x800000, ints - 0x1000000, ints)
    return np.clip(ints.astype(np.float64) / 8388608.0, -1.0, 1.0)
