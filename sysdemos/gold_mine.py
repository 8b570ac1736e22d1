"""Worker threads sharing a gold mine guarded by a lock."""

from __future__ import annotations

import argparse
import os
import random
import sys
import threading
import time
from typing import Sequence, TextIO

THREAD_COUNT = 10
GOLD_ONE = 20
GOLD_ALL = 600

# Half-open ranges in microseconds.
DIG_TIME_US = (20_000, 40_000)
REST_TIME_US = (10_000, 100_000)


def _pick(rng: random.Random, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return rng.randrange(low, high) if high > low else low


class GoldMine:
    """A pile of gold that workers take from one at a time."""

    def __init__(
        self,
        gold: int = GOLD_ALL,
        *,
        dig_time_us: tuple[int, int] = DIG_TIME_US,
        out: TextIO | None = None,
    ) -> None:
        self.gold = gold
        self._lock = threading.Lock()
        self._dig_time_us = dig_time_us
        self._out = out
        self._rng = random.Random()

    def take(self, worker_id: int, amount: int = GOLD_ONE) -> bool:
        """Take ``amount`` of gold; return False once the mine is empty."""
        with self._lock:
            if self.gold <= 0:
                return False
            self.gold = max(self.gold - amount, 0)
            spent_us = _pick(self._rng, self._dig_time_us)
            time.sleep(spent_us / 1_000_000)
            if self._out is not None:
                print(
                    f"[pid = {os.getpid()}, tid = {threading.get_native_id()}] "
                    f"{worker_id + 1:2d} unit took gold, spending {spent_us} us. "
                    f"Left in mine: {self.gold}",
                    file=self._out,
                )
            return True


def mine(workers: int = THREAD_COUNT, total: int = GOLD_ALL, per_take: int = GOLD_ONE) -> list[int]:
    """Run ``workers`` threads until the mine is empty; return takes per worker."""
    gold_mine = GoldMine(total, out=sys.stdout)
    takes = [0] * workers

    def work(worker_id: int) -> None:
        rng = random.Random(int(time.time()) + worker_id * 2)
        while gold_mine.take(worker_id, per_take):
            takes[worker_id] += 1
            time.sleep(_pick(rng, REST_TIME_US) / 1_000_000)

    threads = [threading.Thread(target=work, args=(worker_id,)) for worker_id in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return takes


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Threads taking gold from a shared mine.")
    parser.add_argument("--workers", type=int, default=THREAD_COUNT)
    parser.add_argument("--total", type=int, default=GOLD_ALL)
    parser.add_argument("--per-take", type=int, default=GOLD_ONE)
    args = parser.parse_args(argv)

    print(f"Gold mining started. Gold in mine: {args.total}")
    mine(args.workers, args.total, args.per_take)
    print("Gold in mine: 0")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())