from __future__ import annotations

import struct

import numpy as np

WAV_HEADER_SIZE = 44


def pcm16_wav_header(sample_rate: int, data_size: int) -> bytes:
    sample_rate = int(sample_rate)
    return struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        b"RIFF",
        36 + int(data_size),
        b"WAVE",
        b"fmt ",
        16,
        1,  # PCM
        1,  # mono
        sample_rate,
        sample_rate * 2,
        2,
        16,
        b"data",
        int(data_size),
    )


def float_to_pcm16(samples: np.ndarray) -> np.ndarray:
    x = np.asarray(samples, dtype=np.float64).reshape(-1)
    x = np.clip(np.nan_to_num(x, nan=0.0), -1.0, 1.0)
    scaled = np.where(x < 0, x * 32768.0, x * 32767.0)
    return scaled.astype("<i2")


def encode_pcm16_wav(samples: np.ndarray, sample_rate: int) -> bytes:
    """Serialize mono float samples as a canonical 44-byte-header PCM16 WAV."""
    pcm = float_to_pcm16(samples)
    payload = pcm.tobytes()
    return pcm16_wav_header(sample_rate, len(payload)) + payload
