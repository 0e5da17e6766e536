from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np


class AudioFormat(IntEnum):
    PCM = 1
    IEEE_FLOAT = 3


@dataclass(frozen=True)
class WaveFormat:
    audio_format: int  # raw code from the fmt chunk, see AudioFormat
    num_channels: int
    sample_rate: int
    bits_per_sample: int

    @property
    def bytes_per_sample(self) -> int:
        return int(self.bits_per_sample) // 8

    @property
    def frame_size(self) -> int:
        return self.bytes_per_sample * int(self.num_channels)


@dataclass(frozen=True)
class Chunk:
    id: str
    size_bytes: int
    payload_offset: int


@dataclass(frozen=True)
class DecodedAudio:
    samples: np.ndarray  # float32 mono, values in [-1, 1]
    sample_rate: int

    @property
    def duration_sec(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return float(self.samples.size) / float(self.sample_rate)
