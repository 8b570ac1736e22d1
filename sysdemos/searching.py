"""Linear and binary search with a timing harness."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from typing import Callable, MutableSequence, Sequence

ARRAY_SIZE = 10_000_000
MAX_VALUE = 100_000

SearchFunc = Callable[[Sequence[int], int], "int | None"]

_RULE = "+-----------------+-----------------+-----------------+---------------+--------------------+"
_TITLE = "| Algorithm       | Element founded | Element correct |      Time, ms | Time with sort, ms |"


def _format_ms(ns: int) -> str:
    ms, fraction = divmod(ns, 1_000_000)
    return f"{ms:6d}.{fraction:06d}"


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Index of the first element equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Index of an element equal to ``target`` in sorted ``values``, or None."""
    if not values:
        return None
    left, right = 0, len(values)
    while True:
        pivot = (left + right) // 2
        value = values[pivot]
        if value == target:
            return pivot
        if right - left <= 1:
            return None
        if value < target:
            left = pivot
        else:
            right = pivot


@dataclass(frozen=True)
class SearchReport:
    """Outcome of one timed search."""

    index: int | None
    correct: bool
    search_ns: int
    sort_ns: int = 0

    @property
    def found(self) -> bool:
        return self.index is not None

    @property
    def total_ns(self) -> int:
        return self.search_ns + self.sort_ns

    def format(self) -> str:
        found = "+" if self.found else "-"
        correct = "+" if self.correct else "-"
        return (
            f"       {found}        |        {correct}        | "
            f"{_format_ms(self.search_ns)} |      {_format_ms(self.total_ns)} |"
        )


def time_search(
    values: MutableSequence[int],
    target: int,
    search_func: SearchFunc,
    need_sort: bool = False,
) -> SearchReport:
    """Time ``search_func``; with ``need_sort`` the values are sorted in place first."""
    if not values or search_func is None:
        raise ValueError("incorrect input: empty array or no search function")
    sort_ns = 0
    if need_sort:
        start = time.perf_counter_ns()
        values.sort()
        sort_ns = time.perf_counter_ns() - start
    start = time.perf_counter_ns()
    index = search_func(values, target)
    search_ns = time.perf_counter_ns() - start
    correct = index is not None and values[index] == target
    return SearchReport(index, correct, search_ns, sort_ns)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare linear and binary search.")
    parser.add_argument("--size", type=int, default=ARRAY_SIZE)
    parser.add_argument("--max-value", type=int, default=MAX_VALUE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    values = [rng.randrange(args.max_value) for _ in range(args.size)]
    target = rng.randrange(args.max_value)

    print(f"Start search value {target} in array of {args.size} elements")
    print(_RULE)
    print(_TITLE)
    print(_RULE)
    print("| Linear search   | " + time_search(values, target, linear_search).format())
    print(_RULE)
    print("| Binary search   | " + time_search(values, target, binary_search, need_sort=True).format())
    print(_RULE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())