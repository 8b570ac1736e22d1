"""A loop that rewrites a file, pausing for a timeout read from another file."""

from __future__ import annotations

import argparse
import re
import time
from pathlib import Path
from typing import Sequence

DEF_TIMEOUT = 100_000
COUNTER_LINES = 10_000
TIMEOUT_FILE = "timeout.txt"
OUTPUT_FILE = "tmp.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_timeout(path: str | Path) -> int:
    """Timeout in microseconds from the leading integer in ``path``.

    A missing, unparsable or non-positive value gives DEF_TIMEOUT;
    a file that cannot be opened raises OSError.
    """
    with open(path, encoding="utf-8") as stream:
        text = stream.read()
    match = _LEADING_INT.match(text)
    value = int(match.group(1)) if match else DEF_TIMEOUT
    return value if value > 0 else DEF_TIMEOUT


def write_counter_file(path: str | Path, count: int = COUNTER_LINES) -> None:
    """Write the numbers ``0 .. count-1``, one per line."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.writelines(f"{number}\n" for number in range(count))


def loop(
    timeout_path: str | Path = TIMEOUT_FILE,
    output_path: str | Path = OUTPUT_FILE,
    iterations: int | None = None,
) -> int:
    """Rewrite the output file and sleep; forever when ``iterations`` is None."""
    done = 0
    while iterations is None or done < iterations:
        timeout_us = read_timeout(timeout_path)
        write_counter_file(output_path)
        time.sleep(timeout_us / 1_000_000)
        done += 1
    return done


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="File-writing loop for profiling.")
    parser.add_argument("--timeout-file", default=TIMEOUT_FILE)
    parser.add_argument("--output", default=OUTPUT_FILE)
    parser.add_argument("--iterations", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        loop(args.timeout_file, args.output, args.iterations)
    except OSError as exc:
        print(f"Error: can't open file {exc.filename}!")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())