"""Find DTMF digits in a mono 16-bit WAV file and blank them out."""

from __future__ import annotations

import argparse
import struct
from pathlib import Path
from typing import Sequence

from sysdemos.dsp import DtmfDetector
from sysdemos.wave import WaveError, WaveHeader, read_samples

OUTPUT_FILENAME = "out.wav"
CLOCK_RATE = 8000
FRAME_LEN_MS = 10
FRAME_SAMPLES = CLOCK_RATE * FRAME_LEN_MS // 1000


def read_wave_file(path: str | Path) -> tuple[WaveHeader, list[int]]:
    """Read a WAV file and return its header and samples."""
    with open(path, "rb") as stream:
        header = WaveHeader.from_bytes(stream.read(44))
        header.check()
        samples = read_samples(header, stream)
    return header, samples


def write_wave_file(path: str | Path, header: WaveHeader, samples: Sequence[int]) -> None:
    """Write ``header`` followed by its count of 16-bit little-endian samples."""
    count = header.num_samples
    if len(samples) < count:
        raise ValueError(f"header announces {count} samples, only {len(samples)} given")
    with open(path, "wb") as stream:
        stream.write(header.to_bytes())
        stream.write(struct.pack(f"<{count}h", *samples[:count]))


def strip_dtmf(samples: Sequence[int], sample_rate: int) -> tuple[list[int], list[str]]:
    """Zero every 10 ms frame during which a DTMF digit is held.

    Returns the cleaned samples and the digits in the order they began.
    """
    detector = DtmfDetector(sample_rate)
    cleaned = list(samples)
    digits: list[str] = []
    seen = 0
    for start in range(0, len(cleaned) - FRAME_SAMPLES + 1, FRAME_SAMPLES):
        end = start + FRAME_SAMPLES
        hit = detector.detect(cleaned[start:end], squelch=False, relax=True)
        if hit is None:
            continue
        if detector.detected_digits > seen:
            seen = detector.detected_digits
            digits.append(hit)
        cleaned[start:end] = [0] * FRAME_SAMPLES
    return cleaned, digits


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Detect and remove DTMF tones from a WAV file.")
    parser.add_argument("filename", help="input WAV file (PCM)")
    parser.add_argument("--output", default=OUTPUT_FILENAME, help="output WAV file")
    args = parser.parse_args(argv)

    if not args.filename:
        parser.error("empty file name")

    try:
        header, samples = read_wave_file(args.filename)
    except OSError as exc:
        print(f"Error: Can't open file {args.filename} ({exc.strerror or exc})")
        return 1
    except WaveError as exc:
        print(f"Error: {exc}")
        return 3

    print(header.describe(), end="")
    cleaned, digits = strip_dtmf(samples, header.sample_rate)
    for digit in digits:
        print(f"detect DTMF digit {digit}")

    try:
        write_wave_file(args.output, header, cleaned)
    except OSError as exc:
        print(f"Error: Can't create file {args.output} ({exc.strerror or exc})")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())