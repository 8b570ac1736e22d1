"""Worker processes sharing a gold counter guarded by a semaphore."""

from __future__ import annotations

import argparse
import multiprocessing
import os
import random
import time
from typing import Sequence

CHILD_COUNT = 10
GOLD_ONE = 20
GOLD_ALL = 600
REST_SECONDS = (1, 4)


def _worker(index, gold, takes, semaphore, per_take, rest) -> None:
    pid = os.getpid()
    rng = random.Random(pid)
    print(f"[{pid}] child {index + 1} started", flush=True)
    while gold.value > 0:
        with semaphore:
            if gold.value > 0:
                gold.value -= per_take
                takes[index] += 1
                print(f"[{pid}] {index + 1} unit took gold, left in mine: {gold.value}", flush=True)
        low, high = rest
        time.sleep(rng.randint(low, high) if high > low else low)


def mine_with_processes(
    workers: int = CHILD_COUNT,
    total: int = GOLD_ALL,
    per_take: int = GOLD_ONE,
) -> tuple[int, list[int]]:
    """Run ``workers`` processes taking gold until none is left.

    Returns the gold left (negative when the last take overshoots)
    and how many takes each worker made.
    """
    if workers <= 0:
        raise ValueError("need at least one worker")
    if per_take <= 0:
        raise ValueError("each take must remove some gold")
    ctx = multiprocessing.get_context()
    gold = ctx.Value("i", total, lock=False)
    takes = ctx.Array("i", workers, lock=False)
    semaphore = ctx.Semaphore(1)
    processes = [
        ctx.Process(
            target=_worker,
            args=(index, gold, takes, semaphore, per_take, REST_SECONDS),
        )
        for index in range(workers)
    ]
    for process in processes:
        process.start()
    for process in processes:
        process.join()
    return gold.value, list(takes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Processes taking gold from shared memory.")
    parser.add_argument("--workers", type=int, default=CHILD_COUNT)
    parser.add_argument("--total", type=int, default=GOLD_ALL)
    parser.add_argument("--per-take", type=int, default=GOLD_ONE)
    args = parser.parse_args(argv)

    pid = os.getpid()
    print(f"[{pid}] wait child process", flush=True)
    try:
        left, _ = mine_with_processes(args.workers, args.total, args.per_take)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"[{pid}] Gold in mine: {left}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())