import struct

import pytest
from helpers.wav_utils import build_wav, chunk

from tts3cx.audio.riff import iter_chunks, read_fourcc, scan_wave
from tts3cx.errors import FormatError


def test_read_fourcc():
    assert read_fourcc(b"xxRIFFyy", 2) == "RIFF"
    with pytest.raises(FormatError):
        read_fourcc(b"RI", 0)


def test_scan_wave_finds_fmt_and_data():
    buf = build_wav(b"\x01\x00\x02\x00", sample_rate=22050, channels=2)
    fmt, data = scan_wave(buf)
    assert fmt.audio_format == 1
    assert fmt.num_channels == 2
    assert fmt.sample_rate == 22050
    assert fmt.bits_per_sample == 16
    assert data.size_bytes == 4
    assert buf[data.payload_offset : data.payload_offset + 4] == b"\x01\x00\x02\x00"


def test_scan_wave_skips_unknown_chunks_with_odd_padding():
    odd = chunk(b"LIST", b"abc")  # 3 bytes + pad
    meta = chunk(b"fact", b"\x10\x00\x00\x00")
    buf = build_wav(b"\x00\x00", before=(odd,), between=(meta,))
    fmt, data = scan_wave(buf)
    assert fmt.sample_rate == 16000
    assert data.size_bytes == 2


def test_scan_wave_accepts_data_before_fmt():
    buf = build_wav(b"\x00\x00\x00\x00", data_first=True, sample_rate=8000)
    fmt, data = scan_wave(buf)
    assert fmt.sample_rate == 8000
    assert data.size_bytes == 4


def test_iter_chunks_walks_even_boundaries():
    buf = build_wav(b"\x00", bits=8, before=(chunk(b"junk", b"x"),))
    ids = [c.id for c in iter_chunks(buf)]
    assert ids == ["junk", "fmt ", "data"]


@pytest.mark.parametrize(
    "buf",
    [
        b"",
        b"RIFX\x00\x00\x00\x00WAVE",
        b"RIFF\x00\x00\x00\x00AVI ",
        b"ID3\x04" + b"\x00" * 40,
    ],
)
def test_scan_wave_rejects_bad_signature(buf):
    with pytest.raises(FormatError):
        scan_wave(buf)


def test_scan_wave_missing_fmt():
    body = b"WAVE" + chunk(b"data", b"\x00\x00")
    buf = b"RIFF" + struct.pack("<I", len(body)) + body
    with pytest.raises(FormatError, match="missing fmt chunk"):
        scan_wave(buf)


def test_scan_wave_missing_data():
    buf = build_wav(b"")
    buf = buf[: -8]  # drop the empty data chunk header
    with pytest.raises(FormatError, match="missing data chunk"):
        scan_wave(buf)


def test_scan_wave_short_fmt_chunk():
    body = b"WAVE" + chunk(b"fmt ", b"\x01\x00\x01\x00") + chunk(b"data", b"")
    buf = b"RIFF" + struct.pack("<I", len(body)) + body
    with pytest.raises(FormatError):
        scan_wave(buf)
