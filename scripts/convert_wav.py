from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tts3cx.errors import WavError
from tts3cx.pipeline import TELEPHONY_SAMPLE_RATE, to_telephony_wav


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Convert a WAV file to mono 16-bit PCM for telephony playback."
    )
    parser.add_argument("input", help="Source WAV file (PCM 8/16/24-bit or 32-bit float)")
    parser.add_argument(
        "-o",
        "--output",
        default="",
        help="Destination file (default: <input>-3cx.wav next to the input)",
    )
    parser.add_argument(
        "--rate",
        type=int,
        default=TELEPHONY_SAMPLE_RATE,
        help=f"Output sample rate in Hz (default: {TELEPHONY_SAMPLE_RATE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoder details.")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    src = Path(args.input).expanduser().resolve()
    if not src.exists():
        raise SystemExit(f"No such file: {src}")
    dst = Path(args.output).expanduser().resolve() if args.output else src.with_name(f"{src.stem}-3cx.wav")

    try:
        out = to_telephony_wav(src.read_bytes(), target_sr=int(args.rate))
    except WavError as exc:
        raise SystemExit(f"{src.name}: {exc}") from exc

    dst.write_bytes(out)
    print(f"Wrote: {dst} ({len(out)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
