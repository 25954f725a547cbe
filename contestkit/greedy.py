"""Greedy and divide-and-conquer problems: packing, intervals, Huffman, tournaments, pairings."""

from __future__ import annotations

import heapq
from itertools import accumulate, count
from math import atan2
from typing import Hashable, Iterable, Optional, Sequence


def max_items_within(weights: Iterable[int], capacity: int) -> int:
    """How many of the lightest items fit together within capacity."""
    return sum(1 for total in accumulate(sorted(weights)) if total <= capacity)


def fractional_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Value packed when items (weight, value) may be split, using whole-number value per unit."""
    ranked = sorted(
        ((weight, value, value // weight) for weight, value in items),
        key=lambda entry: entry[2],
        reverse=True,
    )
    used = gained = 0
    for weight, value, rate in ranked:
        if used + weight <= capacity:
            used += weight
            gained += value
        else:
            if used < capacity:
                gained += rate * (capacity - used)
            break
    return gained


def min_boats(weights: Iterable[int], capacity: int) -> int:
    """Fewest boats carrying at most two people each with total weight within capacity."""
    ordered = sorted(weights)
    if ordered and ordered[-1] > capacity:
        raise ValueError("someone is heavier than a boat can carry")
    light, heavy = 0, len(ordered) - 1
    boats = 0
    while light <= heavy:
        if light < heavy and ordered[light] + ordered[heavy] <= capacity:
            light += 1
        heavy -= 1
        boats += 1
    return boats


def max_disjoint_intervals(intervals: Sequence[tuple[int, int]]) -> list[int]:
    """Indices of a largest set of non-overlapping intervals, chosen by earliest end."""
    order = sorted(range(len(intervals)), key=lambda k: (intervals[k][1], -intervals[k][0]))
    chosen: list[int] = []
    for index in order:
        if not chosen or intervals[chosen[-1]][1] <= intervals[index][0]:
            chosen.append(index)
    return chosen


def max_overlap(intervals: Iterable[tuple[int, int]]) -> int:
    """Greatest number of closed intervals sharing a common point."""
    events = []
    for start, end in intervals:
        if start > end:
            raise ValueError(f"interval ({start}, {end}) ends before it starts")
        events.append((start, 0))
        events.append((end, 1))
    events.sort()
    depth = best = 0
    for _, closing in events:
        depth += -1 if closing else 1
        best = max(best, depth)
    return best


def min_interval_cover(
    intervals: Iterable[tuple[int, int]], start: int, end: int
) -> Optional[int]:
    """Fewest intervals covering [start, end], or None if they cannot cover it."""
    ordered = sorted(intervals)
    reached = start
    used = 0
    position = 0
    while reached < end:
        furthest = reached
        while position < len(ordered) and ordered[position][0] <= reached:
            furthest = max(furthest, ordered[position][1])
            position += 1
        if furthest == reached:
            return None
        reached = furthest
        used += 1
    return used


def huffman_order(symbols: Iterable[tuple[Hashable, int]]) -> list:
    """Leaves of a Huffman tree from left to right, lighter subtrees placed on the left."""
    serial = count()
    heap = [(weight, next(serial), [symbol]) for symbol, weight in symbols]
    if not heap:
        raise ValueError("at least one symbol is required")
    heapq.heapify(heap)
    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (left_weight + right_weight, next(serial), left + right))
    return heap[0][2]


def round_robin_table(k: int) -> list[list[int]]:
    """Schedule for 2**k players: row i lists player i+1 and, by day, whom they meet."""
    if k < 0:
        raise ValueError("k must not be negative")
    table = [[1]]
    for _ in range(k):
        half = len(table)
        top = [row + [player + half for player in row] for row in table]
        bottom = [[player + half for player in row] + row for row in table]
        table = top + bottom
    return table


def pair_giants(points: Sequence[tuple[int, int, bool]]) -> list[int]:
    """Pair each giant with a ghost so that no two connecting segments cross.

    Points are (x, y, is_giant); the result gives each point's partner index.
    """
    giants = sum(1 for _, _, giant in points if giant)
    if giants * 2 != len(points):
        raise ValueError("there must be as many giants as ghosts")
    partner = [0] * len(points)

    def solve(ids: list[int]) -> None:
        if len(ids) < 2:
            return
        pivot = min(ids, key=lambda k: (points[k][0], points[k][1]))
        px, py, pivot_giant = points[pivot]
        rest = sorted(
            (k for k in ids if k != pivot),
            key=lambda k: atan2(points[k][1] - py, points[k][0] - px),
        )
        same = other = 0
        split = 0
        for split in range(len(rest) - 1, -1, -1):
            giant = bool(points[rest[split]][2])
            if same == other and giant != bool(pivot_giant):
                break
            if giant == bool(pivot_giant):
                same += 1
            else:
                other += 1
        mate = rest[split]
        partner[pivot] = mate
        partner[mate] = pivot
        solve(rest[:split])
        solve(rest[split + 1:])

    solve(list(range(len(points))))
    return partner