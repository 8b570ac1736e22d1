"""Reading and describing RIFF/WAVE files holding PCM samples."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

HEADER_RIFF_TAG = b"RIFF"
HEADER_WAVE_TAG = b"WAVE"
HEADER_FMT_TAG = b"fmt "
HEADER_DATA_TAG = b"data"
HEADER_FACT_TAG = b"fact"

_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")
HEADER_SIZE = _LAYOUT.size

_FORMAT_NAMES = {1: "PCM", 3: "float", 6: "A-law", 7: "U-law"}


class WaveError(Exception):
    """Raised for WAV files that cannot be read or are not supported."""


def _wrap16(value: int) -> int:
    """Wrap an integer to the signed 16-bit range."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


@dataclass
class WaveHeader:
    """The canonical 44-byte RIFF/WAVE header: RIFF, fmt and data chunks."""

    riff: bytes = HEADER_RIFF_TAG
    file_len: int = 36
    wave: bytes = HEADER_WAVE_TAG
    fmt: bytes = HEADER_FMT_TAG
    fmt_len: int = 16
    fmt_tag: int = 1
    nchan: int = 1
    sample_rate: int = 8000
    bytes_per_sec: int = 16000
    block_align: int = 2
    bits_per_sample: int = 16
    data: bytes = HEADER_DATA_TAG
    data_len: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> WaveHeader:
        """Decode a header from the first 44 bytes of ``raw``."""
        if len(raw) < HEADER_SIZE:
            raise WaveError(f"header too short: {len(raw)} of {HEADER_SIZE} bytes")
        return cls(*_LAYOUT.unpack_from(raw))

    def to_bytes(self) -> bytes:
        """Encode the header as 44 little-endian bytes."""
        return _LAYOUT.pack(
            self.riff,
            self.file_len,
            self.wave,
            self.fmt,
            self.fmt_len,
            self.fmt_tag,
            self.nchan,
            self.sample_rate,
            self.bytes_per_sec,
            self.block_align,
            self.bits_per_sample,
            self.data,
            self.data_len,
        )

    def check(self) -> WaveHeader:
        """Raise WaveError unless the RIFF and WAVE tags are present."""
        if self.riff != HEADER_RIFF_TAG or self.wave != HEADER_WAVE_TAG:
            raise WaveError("Invalid file header")
        return self

    @property
    def sample_size(self) -> int:
        """Bytes in one frame of samples across all channels."""
        return (self.nchan * self.bits_per_sample) // 8

    @property
    def num_samples(self) -> int:
        """Number of sample frames in the data chunk."""
        bits = self.nchan * self.bits_per_sample
        if bits == 0:
            raise WaveError("header has no channels or zero bits per sample")
        return (8 * self.data_len) // bits

    @property
    def format_name(self) -> str:
        return _FORMAT_NAMES.get(self.fmt_tag, "Unknown")

    def describe(self) -> str:
        """Human-readable summary of the header and derived values."""
        duration = self.file_len / self.bytes_per_sec if self.bytes_per_sec else float("inf")
        lines = [
            "Header info:",
            f"\tFile len:            {self.file_len + 8}",
            f"\tFormat type:         {self.fmt_tag} ({self.format_name})",
            f"\tChannels:            {self.nchan}",
            f"\tSample rate:         {self.sample_rate}",
            f"\tByte Rate:           {self.bytes_per_sec}",
            f"\tBit Rate:            {self.bytes_per_sec * 8}",
            f"\tBlock Alignment:     {self.block_align}",
            f"\tBits per sample:     {self.bits_per_sample}",
            f"\tData len:            {self.data_len}",
            "Calculated info:",
            f"\tNumber of samples:   {self.num_samples} ",
            f"\tSize of sample:      {self.sample_size} bytes",
            f"\tDuration:            {duration:f} seconds",
        ]
        return "\n".join(lines) + "\n"


def sample_limits(bits_per_sample: int) -> tuple[int, int]:
    """Smallest and largest signed value for a sample width in bits."""
    limits = {
        8: (-128, 127),
        16: (-32768, 32767),
        32: (-2147483648, 2147483647),
    }
    try:
        return limits[bits_per_sample]
    except KeyError:
        raise WaveError(f"Incorrect bits_per_sample val ({bits_per_sample})") from None


def read_samples(header: WaveHeader, stream: BinaryIO) -> list[int]:
    """Read the data chunk as 16-bit samples, one per frame (last channel wins)."""
    if header.fmt_tag != 1:
        raise WaveError("WAV file not PCM format, not supported")
    count = header.num_samples
    frame_size = header.sample_size
    width = frame_size // header.nchan
    if width * header.nchan != frame_size or width == 0:
        raise WaveError(f"{width} x {header.nchan} != {frame_size}")
    sample_limits(header.bits_per_sample)

    samples: list[int] = []
    for _ in range(count):
        frame = stream.read(frame_size)
        if len(frame) != frame_size:
            raise WaveError("Can't read file: unexpected end of data")
        last = frame[-width:]
        if width == 1:
            # 8-bit WAV samples are unsigned.
            value = last[0] - 128
        else:
            value = int.from_bytes(last, "little", signed=True)
        samples.append(_wrap16(value))
    return samples