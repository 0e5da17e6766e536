from __future__ import annotations

import logging

import numpy as np

from tts3cx.audio.riff import scan_wave
from tts3cx.audio.samples import check_supported, decode_samples
from tts3cx.errors import FormatError
from tts3cx.types import DecodedAudio

logger = logging.getLogger(__name__)


def decode_wav(buf: bytes) -> DecodedAudio:
    """Decode a RIFF/WAVE buffer into mono float32 samples.

    Channels are mixed down with an unweighted mean. A trailing partial frame
    is dropped. The sample rate is passed through unchanged.
    """
    fmt, data = scan_wave(buf)
    check_supported(fmt.audio_format, fmt.bits_per_sample)
    if fmt.num_channels <= 0:
        raise FormatError("fmt chunk declares zero channels")

    logger.debug(
        "WAV format=%d channels=%d rate=%d bits=%d data=%d bytes",
        fmt.audio_format,
        fmt.num_channels,
        fmt.sample_rate,
        fmt.bits_per_sample,
        data.size_bytes,
    )

    # Streamed responses may declare a placeholder size larger than the payload.
    available = max(0, len(buf) - data.payload_offset)
    data_size = min(int(data.size_bytes), available)

    frame_size = fmt.frame_size
    frame_count = data_size // frame_size
    start = data.payload_offset
    raw = bytes(buf[start : start + frame_count * frame_size])

    values = decode_samples(raw, fmt.audio_format, fmt.bits_per_sample)
    if fmt.num_channels > 1:
        values = values.reshape(frame_count, fmt.num_channels).mean(axis=1)

    return DecodedAudio(samples=values.astype(np.float32), sample_rate=int(fmt.sample_rate))
