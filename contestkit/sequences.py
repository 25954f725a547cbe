"""Sorting and maximum contiguous sum routines."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


def merge_sort(values: Iterable) -> list:
    """Return the values sorted with a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    left, right = merge_sort(items[:middle]), merge_sort(items[middle:])
    merged = []
    p = q = 0
    while p < len(left) or q < len(right):
        if p >= len(left) or (q < len(right) and left[p] > right[q]):
            merged.append(right[q])
            q += 1
        else:
            merged.append(left[p])
            p += 1
    return merged


def quick_sort(values: Iterable) -> list:
    """Return the values sorted by quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if low + 1 >= high:
            continue
        pivot = items[low]
        i, j = low + 1, high - 1
        while i != j:
            while i != j and not items[i] > pivot:
                i += 1
            while j != i and not items[j] < pivot:
                j -= 1
            if i != j:
                items[i], items[j] = items[j], items[i]
        if items[low] > items[i]:
            items[low], items[i] = items[i], items[low]
        pending.append((i, high))
        pending.append((low, i))
    return items


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run, where the empty run counts as 0."""
    best = lowest = total = 0
    for value in values:
        total += value
        best = max(best, total - lowest)
        lowest = min(lowest, total)
    return best


def _divide(values: Sequence[int], low: int, high: int) -> int:
    if high - low == 1:
        return values[low]
    middle = low + (high - low) // 2
    best = max(_divide(values, low, middle), _divide(values, middle, high))
    left = max(accumulate(reversed(values[low:middle])))
    right = max(accumulate(values[middle:high]))
    return max(best, left + right)


def max_subarray_divide(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return _divide(items, 0, len(items))


def max_subarray_span(values: Iterable[int]) -> tuple[int, int, int]:
    """Largest non-empty run sum with its first and last positions, counted from 1."""
    best = None
    run_sum = 0
    run_start = 0
    for index, value in enumerate(values):
        if index == 0 or value > run_sum + value:
            run_sum, run_start = value, index
        else:
            run_sum += value
        if best is None or run_sum > best[0]:
            best = (run_sum, run_start + 1, index + 1)
    if best is None:
        raise ValueError("values must not be empty")
    return best