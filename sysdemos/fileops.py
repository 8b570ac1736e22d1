"""Basic text file operations: writing, reading lines, looking up parameters."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Iterator, Sequence

FILE_NAME = "tmp_file.txt"
_STATIC_BUFFER = 512


def write_sample_file(path: str | Path) -> None:
    """Write two copies of a line and a ``tmp_param = 123`` setting."""
    text = "Buffered string"
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(text)
        stream.write("\n")
        stream.write(text)
        stream.write("\n")
        stream.write(f"\t{'tmp_param'} = {123}\n")


def read_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a text file, newline included."""
    with open(path, encoding="utf-8") as stream:
        yield from stream


def _read_chunks(path: str | Path, size: int = _STATIC_BUFFER) -> Iterator[str]:
    """Yield lines cut to at most ``size - 1`` characters, like a fixed buffer."""
    with open(path, encoding="utf-8") as stream:
        while chunk := stream.readline(size - 1):
            yield chunk


def get_param_value(path: str | Path, name: str) -> str:
    """Value following ``name`` (case-insensitive) on the first line naming it.

    Tabs, spaces and equal signs between the name and the value are
    skipped and a trailing newline is dropped. Raises KeyError when no
    line mentions the name.
    """
    wanted = name.lower()
    for line in read_lines(path):
        position = line.lower().find(wanted)
        if position < 0:
            continue
        value = line[position + len(name):].lstrip("\t =")
        if value.endswith("\n"):
            value = value[:-1]
        return value
    raise KeyError(name)


def format_elapsed(ns: int) -> str:
    """Render a duration in nanoseconds as milliseconds with six decimals."""
    ms, fraction = divmod(ns, 1_000_000)
    return f"Spent time: {ms}.{fraction:06d} ms"


def _timed(reader: Iterator[str]) -> int:
    start = time.perf_counter_ns()
    for _ in reader:
        pass
    return time.perf_counter_ns() - start


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Basic text file operations.")
    parser.add_argument("path", nargs="?", default=FILE_NAME)
    args = parser.parse_args(argv)
    path = Path(args.path)

    try:
        write_sample_file(path)
    except OSError as exc:
        print(f"Could not open file: {exc}")
        return 1

    try:
        # Fixed-size buffer: long lines would arrive in several pieces.
        print(format_elapsed(_timed(_read_chunks(path))))
        print()
        # Whole lines, one at a time.
        print(format_elapsed(_timed(read_lines(path))))
        print()

        try:
            value = get_param_value(path, "tmp_param")
        except KeyError:
            print("Can't get param_value")
        else:
            print(f"param_value = '{value}' ")
    finally:
        path.unlink(missing_ok=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())