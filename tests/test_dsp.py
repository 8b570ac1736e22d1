import math

import pytest

from sysdemos.dsp import (
    DTMF_COL,
    DTMF_GSIZE,
    DTMF_POSITIONS,
    DTMF_ROW,
    MAX_DTMF_DIGITS,
    MF_HIT,
    DtmfDetector,
    Goertzel,
    MfDetector,
)

RATE = 8000


def tone(freqs, count, amplitude=6000, rate=RATE):
    return [
        int(round(sum(amplitude * math.sin(2 * math.pi * f * i / rate) for f in freqs)))
        for i in range(count)
    ]


def dtmf(digit, count):
    index = DTMF_POSITIONS.index(digit)
    return tone((DTMF_ROW[index // 4], DTMF_COL[index % 4]), count)


def silence(count):
    return [0] * count


def test_goertzel_reset_clears_energy():
    g = Goertzel(DTMF_ROW[0], RATE)
    for value in tone([DTMF_ROW[0]], DTMF_GSIZE):
        g.sample(value)
    assert g.result() > 0
    g.reset()
    assert (g.v2, g.v3, g.chunky) == (0, 0, 0)
    assert g.result() == 0.0


def test_goertzel_prefers_its_own_frequency():
    on = Goertzel(DTMF_COL[1], RATE)
    off = Goertzel(DTMF_COL[1], RATE)
    for a, b in zip(tone([DTMF_COL[1]], DTMF_GSIZE), tone([DTMF_ROW[0]], DTMF_GSIZE)):
        on.sample(a)
        off.sample(b)
    assert on.result() > 10 * off.result()


@pytest.mark.parametrize("digit", list(DTMF_POSITIONS))
@pytest.mark.parametrize("relax", [False, True])
def test_detects_every_dtmf_digit(digit, relax):
    detector = DtmfDetector(RATE)
    assert detector.detect(dtmf(digit, 4 * DTMF_GSIZE), relax=relax) == digit
    assert detector.digits == [digit]
    assert detector.detected_digits == 1


def test_silence_detects_nothing():
    detector = DtmfDetector(RATE)
    assert detector.detect(silence(1000)) is None
    assert detector.digits == []
    assert detector.detected_digits == 0


def test_callback_sequence_and_digit_lengths():
    events = []
    detector = DtmfDetector(RATE)
    detector.set_callback(lambda on, digit: events.append((on, digit)))
    block = 4 * DTMF_GSIZE
    signal = dtmf("1", block) + silence(block) + dtmf("5", block)
    assert detector.detect(signal, relax=True) == "5"
    assert detector.digits == ["1", "5"]
    assert events == [(True, "1"), (False, "1"), (True, "5")]
    for length in detector.digit_lengths:
        assert length >= DTMF_GSIZE
        assert length % DTMF_GSIZE == 0


def test_chunked_feeding_matches_single_call():
    signal = dtmf("7", 500) + silence(500) + dtmf("#", 500) + silence(500)
    whole = DtmfDetector(RATE)
    whole.detect(signal, relax=True)
    chunked = DtmfDetector(RATE)
    for start in range(0, len(signal), 80):
        chunked.detect(signal[start : start + 80], relax=True)
    assert chunked.digits == whole.digits
    assert chunked.digit_lengths == whole.digit_lengths
    assert chunked.current_hit == whole.current_hit


def test_digit_buffer_overflow_counts_lost_digits():
    detector = DtmfDetector(RATE)
    piece = dtmf("5", 2 * DTMF_GSIZE) + silence(3 * DTMF_GSIZE)
    repeats = MAX_DTMF_DIGITS + 2
    detector.detect(piece * repeats)
    assert detector.detected_digits == repeats
    assert len(detector.digits) == MAX_DTMF_DIGITS
    assert detector.lost_digits == repeats - MAX_DTMF_DIGITS


def test_squelch_carries_mute_past_buffer_end():
    detector = DtmfDetector(RATE)
    detector.detect(dtmf("9", 2 * DTMF_GSIZE), squelch=True)
    assert detector.mute_samples == DTMF_GSIZE


def test_mf_detects_two_tones_and_ends_on_silence():
    events = []
    detector = MfDetector([700.0, 900.0], RATE)
    detector.set_callback(lambda on, digit: events.append((on, digit)))
    assert detector.detect(tone([700.0, 900.0], 8 * 120, amplitude=4000)) == MF_HIT
    assert detector.digits == [MF_HIT]
    assert detector.detect(silence(4 * 120)) is None
    assert events == [(True, MF_HIT), (False, MF_HIT)]


def test_mf_silence_has_no_hit():
    detector = MfDetector([700.0, 900.0], RATE)
    assert detector.detect(silence(10 * 120)) is None
    assert detector.detected_digits == 0


def test_mf_tone_count_is_capped():
    detector = MfDetector([700.0, 900.0, 1100.0], RATE)
    assert detector.tone_count == 2
    assert len(detector.tone_out) == 2