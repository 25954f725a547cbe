"""Assorted problems: decimal addition, zero-sum quadruples, building plans, pancakes, names."""

from __future__ import annotations

import string
from collections import Counter
from typing import Iterable, Sequence

_COUNTRY_LETTERS = string.ascii_lowercase + string.ascii_uppercase


def _check_digits(text: str) -> None:
    if any(ch not in string.digits for ch in text):
        raise ValueError(f"not a decimal number: {text!r}")


def add_decimal_strings(first: str, second: str) -> str:
    """Add two decimal digit strings, keeping the width of the longer one."""
    _check_digits(first)
    _check_digits(second)
    width = max(len(first), len(second))
    total = int(first or "0") + int(second or "0")
    return str(total).zfill(width)


def count_zero_sum_quadruples(
    a: Iterable[int], b: Iterable[int], c: Iterable[int], d: Iterable[int]
) -> int:
    """Count choices of one value from each list whose sum is zero."""
    c, d = list(c), list(d)
    right = Counter(x + y for x in c for y in d)
    d_items = list(b)
    return sum(right[-(x + y)] for x in a for y in d_items)


def building_plan(n: int) -> list[list[str]]:
    """Two n by n floors in which every pair of the n countries shares a wall or floor."""
    if not 1 <= n <= len(_COUNTRY_LETTERS):
        raise ValueError(f"n must be between 1 and {len(_COUNTRY_LETTERS)}")
    letters = _COUNTRY_LETTERS[:n]
    lower = [letter * n for letter in letters]
    upper = [letters for _ in range(n)]
    return [lower, upper]


def pancake_flips(stack: Sequence[int]) -> list[int]:
    """Flips that sort a stack (listed top first) with the largest at the bottom.

    Each flip is the position, counted from the bottom starting at 1, where the
    spatula goes in; everything above it is turned over.
    """
    items = list(stack)
    size = len(items)
    flips: list[int] = []
    for unsorted in range(size, 1, -1):
        largest = 0
        for index, value in enumerate(items[:unsorted]):
            if value > items[largest]:
                largest = index
        if largest == unsorted - 1:
            continue
        if largest != 0:
            items[: largest + 1] = reversed(items[: largest + 1])
            flips.append(size - largest)
        items[:unsorted] = reversed(items[:unsorted])
        flips.append(size - unsorted + 1)
    return flips


def most_common_name(names: Iterable[str]) -> str:
    """The most frequent name; ties go to the alphabetically first."""
    counts = Counter(names)
    if not counts:
        raise ValueError("at least one name is required")
    top = max(counts.values())
    return min(name for name, seen in counts.items() if seen == top)