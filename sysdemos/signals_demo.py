"""Installing signal handlers and sending signals to the own process."""

from __future__ import annotations

import argparse
import signal
import sys
import time
from typing import Callable, Sequence, TextIO

_HANDLED = (
    (signal.SIGUSR1, "get_sigusr1"),
    (signal.SIGTERM, "get_sigterm"),
    (signal.SIGUSR2, "get_sigusr2"),
)


def _handler(name: str, out: TextIO) -> Callable[[int, object], None]:
    def handle(signum: int, frame: object) -> None:
        out.write(f"{name}(): Recv signal {int(signum)}\n")
        out.flush()

    return handle


def install_handlers(out: TextIO | None = None) -> dict[int, object]:
    """Report SIGUSR1, SIGTERM and SIGUSR2 to ``out``; return the previous handlers."""
    stream = out if out is not None else sys.stdout
    return {signum: signal.signal(signum, _handler(name, stream)) for signum, name in _HANDLED}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Receive and handle signals.")
    parser.parse_args(argv)

    install_handlers(sys.stdout)
    print(f"main(): Send signal SIGUSR1 ({int(signal.SIGUSR1)})", flush=True)
    signal.raise_signal(signal.SIGUSR1)
    print(f"main(): Send signal SIGUSR2 ({int(signal.SIGUSR2)})", flush=True)
    signal.raise_signal(signal.SIGUSR2)

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())