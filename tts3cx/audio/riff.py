from __future__ import annotations

import logging
import struct
from typing import Iterator, Optional, Tuple

from tts3cx.errors import FormatError
from tts3cx.types import Chunk, WaveFormat

logger = logging.getLogger(__name__)

RIFF_HEADER_SIZE = 12
CHUNK_HEADER_SIZE = 8
FMT_MIN_SIZE = 16


def read_fourcc(buf: bytes, offset: int) -> str:
    """Return the 4-byte ASCII tag at ``offset``."""
    raw = bytes(buf[offset : offset + 4])
    if len(raw) != 4:
        raise FormatError(f"Truncated chunk id at offset {offset}")
    return raw.decode("latin-1")


def has_wave_signature(buf: bytes) -> bool:
    if len(buf) < RIFF_HEADER_SIZE:
        return False
    return read_fourcc(buf, 0) == "RIFF" and read_fourcc(buf, 8) == "WAVE"


def iter_chunks(buf: bytes, *, start: int = RIFF_HEADER_SIZE) -> Iterator[Chunk]:
    offset = int(start)
    total = len(buf)
    while offset + CHUNK_HEADER_SIZE <= total:
        chunk_id = read_fourcc(buf, offset)
        (size,) = struct.unpack_from("<I", buf, offset + 4)
        yield Chunk(id=chunk_id, size_bytes=int(size), payload_offset=offset + CHUNK_HEADER_SIZE)
        # Odd-sized chunks are followed by one pad byte.
        offset += CHUNK_HEADER_SIZE + int(size) + (int(size) & 1)


def parse_fmt(buf: bytes, chunk: Chunk) -> WaveFormat:
    if chunk.size_bytes < FMT_MIN_SIZE or chunk.payload_offset + FMT_MIN_SIZE > len(buf):
        raise FormatError(f"fmt chunk too short ({chunk.size_bytes} bytes)")
    audio_format, channels, sample_rate, _byte_rate, _block_align, bits = struct.unpack_from(
        "<HHIIHH", buf, chunk.payload_offset
    )
    return WaveFormat(
        audio_format=int(audio_format),
        num_channels=int(channels),
        sample_rate=int(sample_rate),
        bits_per_sample=int(bits),
    )


def scan_wave(buf: bytes) -> Tuple[WaveFormat, Chunk]:
    """Locate the format and sample-data chunks of a RIFF/WAVE buffer.

    Chunks may appear in any order and unknown chunks are skipped using their
    size field. Only the first ``fmt `` and first ``data`` chunk are used.

    Raises:
        FormatError: bad signature, or a required chunk is missing.
    """
    if not has_wave_signature(buf):
        raise FormatError("Not a RIFF/WAVE buffer")

    fmt: Optional[WaveFormat] = None
    data: Optional[Chunk] = None
    for chunk in iter_chunks(buf):
        if chunk.id == "fmt " and fmt is None:
            fmt = parse_fmt(buf, chunk)
        elif chunk.id == "data" and data is None:
            data = chunk
        else:
            logger.debug("Skipping %r chunk (%d bytes)", chunk.id, chunk.size_bytes)
        if fmt is not None and data is not None:
            break

    if fmt is None:
        raise FormatError("missing fmt chunk")
    if data is None:
        raise FormatError("missing data chunk")
    return fmt, data
