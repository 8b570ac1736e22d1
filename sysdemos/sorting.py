"""Classic array sorting algorithms and a small timing harness."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from itertools import pairwise, repeat
from typing import Callable, MutableSequence, Sequence

ARRAY_SIZE = 100_000
MAX_VALUE = 100_000

SortFunc = Callable[[MutableSequence[int]], object]


def _format_ms(ns: int) -> str:
    ms, fraction = divmod(ns, 1_000_000)
    return f"{ms:6d}.{fraction:06d}"


@dataclass(frozen=True)
class SortReport:
    """Outcome of one timed sort: whether it worked and how long it took."""

    sorted_ok: bool
    elapsed_ns: int

    def format(self) -> str:
        status = "sorted" if self.sorted_ok else "failed"
        return f"Array {status}, time: {_format_ms(self.elapsed_ns)} ms"


def fill_array(size: int, max_value: int = MAX_VALUE, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random values in ``range(max_value)``."""
    rng = rng or random.Random()
    return [rng.randrange(max_value) for _ in range(size)]


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values never decrease."""
    return all(a <= b for a, b in pairwise(values))


def primitive_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Swap the first out-of-order pair and restart from the beginning."""
    i = 0
    while i < len(values) - 1:
        if values[i] > values[i + 1]:
            values[i], values[i + 1] = values[i + 1], values[i]
            i = 0
        else:
            i += 1
    return values


def bubble_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort in place by bubble sort and return the sequence."""
    size = len(values)
    for rest in range(1, size):
        for i in range(size - rest):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
    return values


def selection_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort in place by exchange selection and return the sequence."""
    size = len(values)
    for j in range(size - 1):
        for i in range(j + 1, size):
            if values[i] < values[j]:
                values[i], values[j] = values[j], values[i]
    return values


def counting_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort non-negative integers in place by counting occurrences."""
    if not values:
        return values
    if min(values) < 0:
        raise ValueError("counting sort needs non-negative values")
    spectrum = [0] * (max(values) + 1)
    for value in values:
        spectrum[value] += 1
    values[:] = [value for value, count in enumerate(spectrum) for value in repeat(value, count)]
    return values


def _partition(values: MutableSequence[int], first: int, last: int) -> int:
    pivot = first
    left = first + 1
    right = last
    while True:
        while values[right] >= values[pivot] and first < right:
            right -= 1
        while values[left] <= values[pivot] and left < last:
            left += 1
        if left >= right:
            break
        values[left], values[right] = values[right], values[left]
    if values[right] < values[pivot]:
        values[pivot], values[right] = values[right], values[pivot]
    return right


def quick_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort in place by quicksort with the first element as pivot."""
    if len(values) < 2:
        return values
    pending = [(0, len(values) - 1)]
    while pending:
        first, last = pending.pop()
        pivot = _partition(values, first, last)
        if first < pivot - 1:
            pending.append((first, pivot - 1))
        if pivot + 1 < last:
            pending.append((pivot + 1, last))
    return values


def std_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort in place with the built-in list sort."""
    values.sort()
    return values


def time_sort(values: Sequence[int], sort_func: SortFunc) -> SortReport:
    """Sort a copy of ``values`` with ``sort_func``, check and time it."""
    if not values:
        raise ValueError("cannot sort an empty array")
    if sort_func is None:
        raise ValueError("no sort function given")
    work = list(values)
    start = time.perf_counter_ns()
    sort_func(work)
    end = time.perf_counter_ns()
    return SortReport(is_sorted(work), end - start)


_SORTERS: tuple[tuple[str, SortFunc], ...] = (
    ("Bubble sort:    ", bubble_sort),
    ("Selection sort: ", selection_sort),
    ("Counting sort:  ", counting_sort),
    ("Quick sort:     ", quick_sort),
    ("Std qsort:      ", std_sort),
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare sorting algorithms on random data.")
    parser.add_argument("--size", type=int, default=ARRAY_SIZE)
    parser.add_argument("--max-value", type=int, default=MAX_VALUE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--with-primitive", action="store_true", help="also run the (very slow) primitive sort")
    args = parser.parse_args(argv)

    data = fill_array(args.size, args.max_value, random.Random(args.seed))
    sorters = list(_SORTERS)
    if args.with_primitive:
        sorters.insert(0, ("Primitive sort: ", primitive_sort))
    for label, func in sorters:
        print(f"{label}{time_sort(data, func).format()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())