"""Waiting on standard input and a pipe fed by a background thread."""

from __future__ import annotations

import argparse
import os
import select
import sys
import threading
import time
from typing import Iterator, Sequence

TICK_INTERVAL = 5.0
SELECT_TIMEOUT = 1.5
_PIPE_CHUNK = 128
_STDIN_CHUNK = 4096


def ticker(write_fd: int, interval: float = TICK_INTERVAL, count: int | None = None) -> None:
    """Every ``interval`` seconds write ``thread_msg_<n>`` plus a NUL to ``write_fd``.

    Runs forever when ``count`` is None.
    """
    number = 0
    while count is None or number < count:
        time.sleep(interval)
        os.write(write_fd, f"thread_msg_{number}".encode() + b"\0")
        number += 1


def read_events(
    stdin_fd: int, pipe_fd: int, timeout: float = SELECT_TIMEOUT
) -> Iterator[tuple[str, bytes]]:
    """Yield ``(source, data)`` pairs from the two descriptors.

    ``source`` is ``"stdin"``, ``"pipe"`` or ``"timeout"`` (with empty
    data). Input is preferred when both are ready. The generator ends
    at end of input; a closed pipe is simply no longer watched.
    """
    watched = [stdin_fd, pipe_fd]
    while True:
        ready, _, _ = select.select(watched, [], [], timeout)
        if not ready:
            yield ("timeout", b"")
            continue
        if stdin_fd in ready:
            data = os.read(stdin_fd, _STDIN_CHUNK)
            if not data:
                return
            yield ("stdin", data)
        elif pipe_fd in ready:
            data = os.read(pipe_fd, _PIPE_CHUNK)
            if not data:
                watched.remove(pipe_fd)
                continue
            yield ("pipe", data)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="select() over stdin and a pipe.")
    parser.add_argument("--interval", type=float, default=TICK_INTERVAL)
    parser.add_argument("--timeout", type=float, default=SELECT_TIMEOUT)
    args = parser.parse_args(argv)

    print("[main()] started")
    read_fd, write_fd = os.pipe()
    print("[thread_func()] child started")
    threading.Thread(target=ticker, args=(write_fd, args.interval, None), daemon=True).start()

    for source, data in read_events(sys.stdin.fileno(), read_fd, args.timeout):
        if source == "timeout":
            print("[main()] timeout")
        elif source == "stdin":
            text = data.decode(errors="replace")
            print(f"[main()] read {len(data)} bytes from keyboard: {text}", end="")
        else:
            text = data.split(b"\0", 1)[0].decode(errors="replace")
            print(f"[main()] read {len(data)} bytes from pipe: {text}")
    print("[main()] keyboard done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())