"""Measuring elapsed time with several clocks."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

OUTER_LOOPS = 1000
INNER_LOOPS = 2900


def format_timeval_diff(start: tuple[int, int], end: tuple[int, int]) -> str:
    """Difference of two ``(seconds, microseconds)`` pairs, in whole ms.

    A negative microsecond part is folded as ``1 - ms``, as the
    original measurement did.
    """
    delta_us = end[1] - start[1]
    ms = abs(delta_us) // 1000
    if delta_us < 0:
        ms = -ms
    seconds = end[0] - start[0]
    if ms < 0:
        ms = 1 - ms
    return f"Spent time 1 (timeval):  {seconds * 1000 + ms} ms"


def format_timespec_diff(start_ns: int, end_ns: int) -> str:
    """Difference of two nanosecond readings as ms with six decimals."""
    ms, fraction = divmod(end_ns - start_ns, 1_000_000)
    return f"Spent time 2 (timespec): {ms}.{fraction:06d} ms"


def busy_loop(outer: int = OUTER_LOOPS, inner: int = INNER_LOOPS) -> int:
    """Spin through ``outer * inner`` iterations and return how many ran."""
    return sum(1 for _ in range(outer) for _ in range(inner))


def _timeval() -> tuple[int, int]:
    seconds, micros = divmod(time.time_ns() // 1000, 1_000_000)
    return seconds, micros


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare ways of measuring elapsed time.")
    parser.add_argument("--outer", type=int, default=OUTER_LOOPS)
    parser.add_argument("--inner", type=int, default=INNER_LOOPS)
    args = parser.parse_args(argv)

    start_tv = _timeval()
    start_clock = time.process_time()
    start_time = int(time.time())
    start_ns = time.monotonic_ns()

    busy_loop(args.outer, args.inner)

    end_tv = _timeval()
    end_clock = time.process_time()
    end_time = int(time.time())
    end_ns = time.monotonic_ns()

    print(format_timeval_diff(start_tv, end_tv))
    print(format_timespec_diff(start_ns, end_ns))
    print(f"Spent time 3 (clock):    {(end_clock - start_clock) * 1000:f} ms")
    print(f"Spent time 4 (time):     {float(end_time - start_time) * 1000:f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())