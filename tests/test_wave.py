import io
import struct

import pytest

from sysdemos.wave import (
    HEADER_SIZE,
    WaveError,
    WaveHeader,
    read_samples,
    sample_limits,
)


def _header(**changes):
    header = WaveHeader()
    for key, value in changes.items():
        setattr(header, key, value)
    return header


def test_header_round_trip():
    header = _header(sample_rate=44100, data_len=200, file_len=236)
    raw = header.to_bytes()
    assert len(raw) == HEADER_SIZE
    assert WaveHeader.from_bytes(raw) == header


def test_header_bytes_start_with_tags():
    raw = WaveHeader().to_bytes()
    assert raw[:4] == b"RIFF"
    assert raw[8:16] == b"WAVEfmt "
    assert raw[36:40] == b"data"


def test_header_too_short_raises():
    with pytest.raises(WaveError):
        WaveHeader.from_bytes(b"RIFF")


def test_check_accepts_valid_header():
    header = WaveHeader()
    assert header.check() is header


@pytest.mark.parametrize("field", ["riff", "wave"])
def test_check_rejects_bad_tags(field):
    header = _header(**{field: b"XXXX"})
    with pytest.raises(WaveError):
        header.check()


def test_sample_limits_known_widths():
    assert sample_limits(16) == (-32768, 32767)
    assert sample_limits(8) == (-128, 127)
    assert sample_limits(32) == (-2147483648, 2147483647)


def test_sample_limits_unknown_width():
    with pytest.raises(WaveError):
        sample_limits(24)


def test_read_16bit_samples_round_trip():
    values = [0, 1, -1, 32767, -32768, 1234]
    header = _header(data_len=2 * len(values))
    stream = io.BytesIO(struct.pack(f"<{len(values)}h", *values))
    assert read_samples(header, stream) == values


def test_read_8bit_samples_are_unsigned():
    header = _header(bits_per_sample=8, data_len=3, block_align=1, bytes_per_sec=8000)
    stream = io.BytesIO(bytes([0x80, 0x00, 0xFF]))
    assert read_samples(header, stream) == [0, -128, 127]


def test_stereo_keeps_last_channel():
    header = _header(nchan=2, data_len=8)
    stream = io.BytesIO(struct.pack("<4h", 10, 20, 30, 40))
    assert read_samples(header, stream) == [20, 40]


def test_non_pcm_rejected():
    header = _header(fmt_tag=3, data_len=4)
    with pytest.raises(WaveError):
        read_samples(header, io.BytesIO(b"\x00" * 4))


def test_truncated_data_raises():
    header = _header(data_len=10)
    with pytest.raises(WaveError):
        read_samples(header, io.BytesIO(b"\x00" * 4))


def test_num_samples_and_sample_size():
    header = _header(nchan=2, data_len=400)
    assert header.sample_size == 4
    assert header.num_samples == 100


def test_zero_channels_raises():
    with pytest.raises(WaveError):
        _header(nchan=0).num_samples


def test_describe_mentions_format_and_counts():
    header = _header(data_len=160, file_len=196)
    text = header.describe()
    assert "(PCM)" in text
    assert f"Number of samples:   {header.num_samples}" in text
    assert f"Sample rate:         {header.sample_rate}" in text


def test_describe_unknown_format():
    assert "(Unknown)" in _header(fmt_tag=99, data_len=2).describe()