"""Goertzel-based DTMF and MF tone detection on 16-bit PCM samples."""

from __future__ import annotations

import math
import struct
from typing import Callable, Sequence

MAX_DTMF_DIGITS = 128

DTMF_THRESHOLD = 8.0e7
DEF_DTMF_NORMAL_TWIST = 6.31  # 8.0 dB
DEF_RELAX_DTMF_NORMAL_TWIST = 6.31  # 8.0 dB
DEF_DTMF_REVERSE_TWIST = 2.51  # 4.01 dB
DEF_RELAX_DTMF_REVERSE_TWIST = 3.98  # 6.0 dB
DTMF_RELATIVE_PEAK_ROW = 5.0
DTMF_RELATIVE_PEAK_COL = 5.0
DTMF_TO_TOTAL_ENERGY = 32.0

BELL_MF_THRESHOLD = 5.4e6  # -29 dB
BELL_MF_TWIST = 4.0  # 6 dB
BELL_MF_TO_TOTAL_ENERGY = 22.0

MF_GSIZE = 120
DTMF_GSIZE = 102

DEF_DTMF_HITS_TO_BEGIN = 1
DEF_DTMF_MISSES_TO_END = 2

DTMF_ROW = (697.0, 770.0, 852.0, 941.0)
DTMF_COL = (1209.0, 1336.0, 1477.0, 1633.0)
DTMF_POSITIONS = "123A456B789C*0#D"

# Marker recorded as the "digit" when all configured MF tones are present.
MF_HIT = "\xff"

DigitCallback = Callable[[bool, str], object]

_F32 = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def _wrap32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return ((value + 0x8000_0000) & 0xFFFF_FFFF) - 0x8000_0000


def _wrap16(value: int) -> int:
    """Wrap an integer to the signed 16-bit range."""
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


class Goertzel:
    """Fixed-point Goertzel filter tuned to one frequency."""

    def __init__(self, freq: float, sample_rate: int) -> None:
        self.fac = int(32768.0 * 2.0 * math.cos(2.0 * math.pi * _f32(freq) / sample_rate))
        self.v2 = 0
        self.v3 = 0
        self.chunky = 0

    def sample(self, value: int) -> None:
        """Feed one sample into the filter."""
        v1 = self.v2
        self.v2 = self.v3
        v3 = _wrap32(self.fac * self.v2) >> 15
        v3 = _wrap32(v3 - v1 + (value >> self.chunky))
        if abs(v3) > 32768:
            # The result grew too large: scale everything down.
            self.chunky += 1
            v3 >>= 1
            self.v2 >>= 1
        self.v3 = v3

    def result(self) -> float:
        """Energy of the tone seen since the last reset."""
        value = _wrap32(self.v3 * self.v3 + self.v2 * self.v2)
        value = _wrap32(value - _wrap32((_wrap32(self.v2 * self.v3) >> 15) * self.fac))
        power = self.chunky * 2
        return _f32(_f32(float(value)) * float(2**power))

    def reset(self) -> None:
        self.v2 = 0
        self.v3 = 0
        self.chunky = 0


class DigitDetector:
    """Digit buffer and on/off notification shared by the tone detectors."""

    def __init__(self) -> None:
        self.digits: list[str] = []
        self.digit_lengths: list[int] = []
        self.detected_digits = 0
        self.lost_digits = 0
        self.mute_samples = 0
        self._callback: DigitCallback | None = None

    def set_callback(self, callback: DigitCallback | None) -> None:
        """Call ``callback(on, digit)`` when a digit starts or ends."""
        self._callback = callback

    def _indicate(self, on: bool, digit: str) -> None:
        if self._callback is not None:
            self._callback(on, digit)

    def _store(self, digit: str) -> None:
        self.detected_digits += 1
        if len(self.digits) < MAX_DTMF_DIGITS:
            self.digits.append(digit)
            self.digit_lengths.append(0)
        else:
            self.lost_digits += 1


class DtmfDetector(DigitDetector):
    """DTMF digit detector working on blocks of DTMF_GSIZE samples."""

    def __init__(self, sample_rate: int) -> None:
        super().__init__()
        self.row_out = [Goertzel(freq, sample_rate) for freq in DTMF_ROW]
        self.col_out = [Goertzel(freq, sample_rate) for freq in DTMF_COL]
        self.hits_to_begin = DEF_DTMF_HITS_TO_BEGIN
        self.misses_to_end = DEF_DTMF_MISSES_TO_END
        self.hits = 0
        self.misses = 0
        self.lasthit: str | None = None
        self.current_hit: str | None = None
        self.energy = 0.0
        self.current_sample = 0

    def _classify_block(self, relax: bool) -> str | None:
        row_energy = [g.result() for g in self.row_out]
        col_energy = [g.result() for g in self.col_out]
        best_row = max(range(4), key=row_energy.__getitem__)
        best_col = max(range(4), key=col_energy.__getitem__)
        row_peak = row_energy[best_row]
        col_peak = col_energy[best_col]
        reverse_twist = _f32(DEF_RELAX_DTMF_REVERSE_TWIST if relax else DEF_DTMF_REVERSE_TWIST)
        normal_twist = _f32(DEF_RELAX_DTMF_NORMAL_TWIST if relax else DEF_DTMF_NORMAL_TWIST)

        if not (
            row_peak >= DTMF_THRESHOLD
            and col_peak >= DTMF_THRESHOLD
            and col_peak < _f32(row_peak * reverse_twist)
            and row_peak < _f32(col_peak * normal_twist)
        ):
            return None
        for i in range(4):
            if (i != best_col and col_energy[i] * DTMF_RELATIVE_PEAK_COL > col_peak) or (
                i != best_row and row_energy[i] * DTMF_RELATIVE_PEAK_ROW > row_peak
            ):
                return None
        if row_peak + col_peak > DTMF_TO_TOTAL_ENERGY * self.energy:
            return DTMF_POSITIONS[(best_row << 2) + best_col]
        return None

    def detect(self, samples: Sequence[int], squelch: bool = False, relax: bool = False) -> str | None:
        """Feed samples; return the digit currently held on, if any."""
        total = len(samples)
        mute_end = 0
        if squelch and self.mute_samples > 0:
            mute_end = min(self.mute_samples, total)
            self.mute_samples -= mute_end

        start = 0
        while start < total:
            needed = DTMF_GSIZE - self.current_sample
            limit = start + needed if total - start >= needed else total
            energy = self.energy
            for raw in samples[start:limit]:
                samp = _wrap16(raw)
                energy = _f32(energy + samp * samp)
                for g in self.row_out:
                    g.sample(samp)
                for g in self.col_out:
                    g.sample(samp)
            self.energy = energy
            self.current_sample += limit - start
            if self.current_sample < DTMF_GSIZE:
                start = limit
                continue

            hit = self._classify_block(relax)

            if self.current_hit is not None:
                if hit != self.current_hit:
                    self.misses += 1
                    if self.misses == self.misses_to_end:
                        self._indicate(False, self.current_hit)
                        self.current_hit = None
                else:
                    self.misses = 0
                    self.digit_lengths[-1] += DTMF_GSIZE

            # A new digit may begin before the previous one is considered ended.
            if hit != self.lasthit:
                self.lasthit = hit
                self.hits = 0
            if hit is not None and hit != self.current_hit:
                self.hits += 1
                if self.hits > 0:
                    if self.current_hit is not None:
                        self._indicate(False, self.current_hit)
                    self._indicate(True, hit)
                    self._store(hit)
                    self.digit_lengths[-1] = self.hits_to_begin * DTMF_GSIZE
                    self.current_hit = hit
                    self.misses = 0

            if squelch and hit is not None:
                mute_end = limit + DTMF_GSIZE

            for g in (*self.row_out, *self.col_out):
                g.reset()
            self.energy = 0.0
            self.current_sample = 0
            start = limit

        if squelch and mute_end and mute_end > total:
            self.mute_samples = mute_end - total

        return self.current_hit


class MfDetector(DigitDetector):
    """Detector for the simultaneous presence of up to two MF tones."""

    def __init__(self, freqs: Sequence[float], sample_rate: int) -> None:
        super().__init__()
        self.tone_count = min(len(freqs), 2)
        self.tone_out = [Goertzel(freq, sample_rate) for freq in freqs[: self.tone_count]]
        self.current_hit: str | None = None
        self.hits: list[str | None] = [None] * 5
        self.energy = 0.0
        self.current_sample = 0

    def detect(self, samples: Sequence[int], squelch: bool = False, relax: bool = False) -> str | None:
        """Feed samples; return MF_HIT while the tones are held on, else None."""
        total = len(samples)
        energy_tot = 0.0
        mute_end = 0
        if squelch and self.mute_samples > 0:
            mute_end = min(self.mute_samples, total)
            self.mute_samples -= mute_end

        start = 0
        while start < total:
            needed = MF_GSIZE - self.current_sample
            limit = start + needed if total - start >= needed else total
            energy = self.energy
            for raw in samples[start:limit]:
                samp = _wrap16(raw)
                energy = _f32(energy + float(samp) ** 4)
                for g in self.tone_out:
                    g.sample(samp)
            self.energy = energy
            self.current_sample += limit - start
            if self.current_sample < MF_GSIZE:
                start = limit
                continue

            energies = [g.result() for g in self.tone_out]
            hit_count = 0
            for i, level in enumerate(energies):
                if level >= BELL_MF_THRESHOLD:
                    for other in energies[i + 1 :]:
                        if level >= other * BELL_MF_TWIST or level * BELL_MF_TWIST <= other:
                            break
                    else:
                        hit_count += 1
                    energy_tot = _f32(energy_tot + level)
            self.energy = _f32(math.sqrt(_f32(self.energy * MF_GSIZE)))

            if hit_count != self.tone_count or energy_tot < BELL_MF_TO_TOTAL_ENERGY * self.energy:
                hit = None
            else:
                hit = MF_HIT

            hits = self.hits
            if hit is not None and hit != self.current_hit:
                if (
                    hit == hits[4]
                    and hit == hits[3]
                    and (
                        (hit != "*" and hit != hits[2] and hit != hits[1])
                        or (hit == "*" and hit == hits[2] and hit != hits[1] and hit != hits[0])
                    )
                ):
                    self._indicate(True, hit)
                    self._store(hit)
                    self.current_hit = hit

            if self.current_hit is not None and hit != hits[4] and hit != hits[3]:
                # Two successive blocks without a hit end the current digit.
                self._indicate(False, self.current_hit)
                self.current_hit = None

            self.hits = [*hits[1:], hit]

            if squelch and hit is not None:
                mute_end = limit + MF_GSIZE

            for g in self.tone_out:
                g.reset()
            self.energy = 0.0
            self.current_sample = 0
            start = limit

        if squelch and mute_end and mute_end > total:
            self.mute_samples = mute_end - total

        return self.current_hit