from __future__ import annotations

import logging

from tts3cx.audio.riff import has_wave_signature
from tts3cx.audio.wav_reader import decode_wav
from tts3cx.audio.wav_writer import encode_pcm16_wav
from tts3cx.dsp.resample import resample_linear
from tts3cx.errors import FormatError

logger = logging.getLogger(__name__)

TELEPHONY_SAMPLE_RATE = 8000


def is_wav(raw: bytes) -> bool:
    return has_wave_signature(raw)


def to_telephony_wav(raw: bytes, *, target_sr: int = TELEPHONY_SAMPLE_RATE) -> bytes:
    """Re-encode any supported WAV as mono 16-bit PCM at ``target_sr``."""
    if not is_wav(raw):
        raise FormatError("Audio is not a WAV file (missing RIFF/WAVE signature)")

    decoded = decode_wav(raw)
    resampled = resample_linear(decoded.samples, orig_sr=decoded.sample_rate, target_sr=target_sr)
    logger.debug(
        "Converted %.2fs (%d samples @ %d Hz) -> %d samples @ %d Hz",
        decoded.duration_sec,
        decoded.samples.size,
        decoded.sample_rate,
        resampled.size,
        target_sr,
    )
    return encode_pcm16_wav(resampled, int(target_sr))
