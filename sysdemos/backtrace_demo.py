"""Printing the call stack from mutually recursive functions."""

from __future__ import annotations

import argparse
import traceback
from typing import Sequence

BACKTRACE_DEPTH = 10
START_DEPTH = 6


def format_backtrace(limit: int = BACKTRACE_DEPTH) -> str:
    """Describe up to ``limit`` innermost stack frames, innermost first."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    frames = list(traceback.extract_stack(limit=limit))
    frames.reverse()
    lines = ["", f"Obtained {len(frames)} stack frames."]
    lines += [f"{frame.filename}({frame.name}) [line {frame.lineno}]" for frame in frames]
    return "\n".join(lines) + "\n\n"


def foo(depth: int) -> str:
    """Recurse through :func:`bar`; at depth 0 print and return a backtrace."""
    if depth > 0:
        return bar(depth - 1)
    print(f"foo: depth = {depth}")
    trace = format_backtrace()
    print(trace, end="")
    return trace


def bar(depth: int) -> str:
    """Recurse through :func:`foo`; at depth 0 print and return a backtrace."""
    if depth > 0:
        return foo(depth - 1)
    print(f"bar: depth = {depth}")
    trace = format_backtrace()
    print(trace, end="")
    return trace


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Backtraces from recursive calls.")
    parser.add_argument("--depth", type=int, default=START_DEPTH)
    args = parser.parse_args(argv)

    print("Started")
    print(format_backtrace(), end="")
    foo(args.depth)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())