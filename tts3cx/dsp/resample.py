from __future__ import annotations

import numpy as np


def resampled_length(num_samples: int, orig_sr: int, target_sr: int) -> int:
    # floor(n / (orig/target)) in exact integer arithmetic.
    return max(1, (int(num_samples) * int(target_sr)) // int(orig_sr))


def resample_linear(audio: np.ndarray, orig_sr: int, target_sr: int) -> np.ndarray:
    """Resample mono audio by linear interpolation between neighbouring samples.

    No anti-aliasing filter is applied; good enough for telephony speech.
    Equal rates return ``audio`` itself.
    """
    if int(orig_sr) <= 0 or int(target_sr) <= 0:
        raise ValueError(f"Sample rates must be positive, got {orig_sr} -> {target_sr}")
    if int(orig_sr) == int(target_sr):
        return audio

    audio = np.asarray(audio, dtype=np.float32).reshape(-1)
    if audio.size == 0:
        return audio

    ratio = float(orig_sr) / float(target_sr)
    out_len = resampled_length(audio.size, orig_sr, target_sr)
    last = audio.size - 1

    x = np.arange(out_len, dtype=np.float64) * ratio
    x0 = np.minimum(np.floor(x).astype(np.int64), last)
    x1 = np.minimum(x0 + 1, last)
    t = x - x0

    src = audio.astype(np.float64)
    out = src[x0] * (1.0 - t) + src[x1] * t
    return out.astype(np.float32)
