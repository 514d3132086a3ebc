"""Comparison-counting sorts, heap and insertion sort, and presorting checks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Iterable


@dataclass
class SortResult:
    """A sorted list together with the number of key comparisons counted."""

    values: list[int] = field(default_factory=list)
    comparisons: int = 0


def _merge(a: list[int], low: int, mid: int, high: int) -> int:
    left = a[low : mid + 1]
    right = a[mid + 1 : high + 1]
    merged: list[int] = []
    i = j = 0
    comparisons = 0
    while i < len(left) and j < len(right):
        comparisons += 1
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    a[low : high + 1] = merged
    return comparisons


def _merge_sort(a: list[int], low: int, high: int) -> int:
    if low >= high:
        return 0
    mid = (low + high) // 2
    comparisons = _merge_sort(a, low, mid)
    comparisons += _merge_sort(a, mid + 1, high)
    return comparisons + _merge(a, low, mid, high)


def merge_sort(values: Iterable[int]) -> SortResult:
    """Sort with top-down merge sort, counting element comparisons in merges."""
    a = list(values)
    comparisons = _merge_sort(a, 0, len(a) - 1)
    return SortResult(a, comparisons)


def _partition(a: list[int], low: int, high: int) -> tuple[int, int]:
    pivot = a[low]
    i, j = low + 1, high
    comparisons = 0
    while True:
        while i <= high and pivot >= a[i]:
            i += 1
            comparisons += 1
        while j != low and pivot < a[j]:
            j -= 1
            comparisons += 1
        if i < j:
            a[i], a[j] = a[j], a[i]
        else:
            a[j], a[low] = a[low], a[j]
            return j, comparisons


def quick_sort(values: Iterable[int]) -> SortResult:
    """Sort with Hoare-style quicksort (first element as pivot), counting scans."""
    a = list(values)
    comparisons = 0
    pending = [(0, len(a) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split, counted = _partition(a, low, high)
            comparisons += counted
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return SortResult(a, comparisons)


def _build_max_heap(a: list[int], size: int) -> None:
    for start in range(size // 2 - 1, -1, -1):
        k = start
        value = a[k]
        while 2 * k + 1 < size:
            child = 2 * k + 1
            if child + 1 < size and a[child] < a[child + 1]:
                child += 1
            if a[child] <= value:
                break
            a[k] = a[child]
            k = child
        a[k] = value


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by heap sort, rebuilding the heap after each swap."""
    a = list(values)
    _build_max_heap(a, len(a))
    for end in range(len(a) - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        _build_max_heap(a, end)
    return a


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by straight insertion."""
    a = list(values)
    for i in range(1, len(a)):
        item = a[i]
        j = i - 1
        while j >= 0 and a[j] > item:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = item
    return a


def elements_unique(values: Iterable[int]) -> bool:
    """Tell whether all elements differ, by presorting and checking neighbours."""
    ordered = insertion_sort(values)
    return all(a != b for a, b in zip(ordered, ordered[1:]))


def comparison_table(
    sorter: Callable[[list[int]], SortResult],
    limit: int = 1000,
    seed: int | None = None,
) -> list[tuple[int, int, int, int]]:
    """Count comparisons on ascending, descending and random inputs.

    Sizes start at 16 and double while below ``limit``. Each row is
    ``(size, ascending, descending, random)``.
    """
    rng = random.Random(seed)
    rows = []
    size = 16
    while size < limit:
        ascending = list(range(size))
        descending = list(range(size - 1, -1, -1))
        shuffled = [rng.randrange(size) for _ in range(size)]
        rows.append(
            (
                size,
                sorter(ascending).comparisons,
                sorter(descending).comparisons,
                sorter(shuffled).comparisons,
            )
        )
        size *= 2
    return rows