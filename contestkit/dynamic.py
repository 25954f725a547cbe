"""Dynamic programming: schedules, lamps, grids, towers, knapsacks and subsequences."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from itertools import accumulate
from math import dist, inf
from typing import Iterable, Optional, Sequence

# Length of the closing song that is always played last on the jukebox.
CLOSING_SONG_LENGTH = 678


def metro_waiting_time(
    n: int,
    total_time: int,
    travel: Sequence[int],
    left_departures: Iterable[int],
    right_departures: Iterable[int],
) -> Optional[int]:
    """Least time spent waiting on platforms to reach station n at total_time, or None.

    ``travel[k]`` is the time between stations k+1 and k+2; trains leave station 1
    at the left departures and station n at the right departures.
    """
    travel = list(travel)
    if n < 1:
        raise ValueError("there must be at least one station")
    if len(travel) != n - 1:
        raise ValueError("travel must hold one time for each pair of neighbouring stations")
    if total_time < 0:
        raise ValueError("total_time must not be negative")

    eastbound: set[tuple[int, int]] = set()
    for departure in left_departures:
        time = departure
        for station in range(1, n + 1):
            if time > total_time:
                break
            eastbound.add((time, station))
            if station < n:
                time += travel[station - 1]

    westbound: set[tuple[int, int]] = set()
    for departure in right_departures:
        time = departure
        for station in range(n, 0, -1):
            if time > total_time:
                break
            westbound.add((time, station))
            if station > 1:
                time += travel[station - 2]

    best = [[inf] * (n + 1) for _ in range(total_time + 1)]
    best[total_time][n] = 0
    for time in range(total_time - 1, -1, -1):
        for station in range(1, n + 1):
            value = best[time + 1][station] + 1
            if station < n and (time, station) in eastbound:
                arrival = time + travel[station - 1]
                if arrival <= total_time:
                    value = min(value, best[arrival][station + 1])
            if station > 1 and (time, station) in westbound:
                arrival = time + travel[station - 2]
                if arrival <= total_time:
                    value = min(value, best[arrival][station - 1])
            best[time][station] = value
    answer = best[0][1]
    return None if answer == inf else int(answer)


@dataclass(frozen=True)
class Bulb:
    """A lamp category: its voltage, power source cost, cost per lamp and lamps needed."""

    voltage: int
    source_cost: int
    lamp_cost: int
    count: int


def lighting_cost(bulbs: Iterable[Bulb]) -> int:
    """Cheapest cost when lamps may be replaced by lamps of a higher voltage category."""
    ordered = sorted(bulbs, key=lambda bulb: bulb.voltage)
    if not ordered:
        raise ValueError("at least one bulb category is required")
    prefix = list(accumulate(bulb.count for bulb in ordered))
    best: list[int] = []
    for total, bulb in zip(prefix, ordered):
        candidates = [total * bulb.lamp_cost] + [
            earlier + (total - covered) * bulb.lamp_cost
            for earlier, covered in zip(best, prefix)
        ]
        best.append(min(candidates) + bulb.source_cost)
    return best[-1]


def min_path_unidirectional(matrix: Sequence[Sequence[int]]) -> tuple[list[int], int]:
    """Lexicographically smallest cheapest left-to-right path through a wrapping grid.

    Returns the rows visited (counted from 1) and the path's weight.
    """
    grid = [list(row) for row in matrix]
    if not grid or not grid[0]:
        raise ValueError("the matrix must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    height = len(grid)

    cost = [row[-1] for row in grid]
    following = [[0] * width for _ in range(height)]
    for col in range(width - 2, -1, -1):
        updated = []
        for row_index, row in enumerate(grid):
            candidates = {(row_index - 1) % height, row_index, (row_index + 1) % height}
            chosen = min(candidates, key=lambda r: (cost[r], r))
            following[row_index][col] = chosen
            updated.append(cost[chosen] + row[col])
        cost = updated

    row_index = min(range(height), key=lambda r: (cost[r], r))
    total = cost[row_index]
    path = []
    for col in range(width):
        path.append(row_index + 1)
        row_index = following[row_index][col]
    return path, total


def jukebox(songs: Iterable[int], time_left: int) -> tuple[int, int]:
    """Most songs, then longest playing time, that fit before time runs out, closing song included."""
    if time_left < 1:
        raise ValueError("time_left must be positive")
    count = [0] * time_left
    length = [0] * time_left
    for song in songs:
        if song <= 0:
            raise ValueError("song lengths must be positive")
        for slot in range(time_left - 1, song - 1, -1):
            more = count[slot - song] + 1
            longer = length[slot - song] + song
            if more > count[slot] or (more == count[slot] and longer > length[slot]):
                count[slot] = more
                length[slot] = longer
    return count[-1] + 1, length[-1] + CLOSING_SONG_LENGTH


def bitonic_tour(points: Iterable[tuple[float, float]]) -> float:
    """Length of the shortest closed tour going left to right and back through every point."""
    pts = sorted(points, key=lambda point: point[0])
    if not pts:
        raise ValueError("at least one point is required")
    if len(pts) == 1:
        return 0.0
    if len(pts) == 2:
        return 2 * dist(pts[0], pts[1])
    last = pts[-1]
    closing = dist(pts[-2], last)
    row = [closing + dist(point, last) for point in pts[:-2]]
    for i in range(len(pts) - 3, 0, -1):
        step = dist(pts[i], pts[i + 1])
        pivot = row[i]
        row = [
            min(value + step, pivot + dist(point, pts[i + 1]))
            for value, point in zip(row, pts[:i])
        ]
    return row[0] + dist(pts[1], pts[0])


def color_length(first: str, second: str) -> int:
    """Least total span of colours when merging two car queues into one."""
    a = " " + first
    b = " " + second
    la, lb = len(first), len(second)

    def bounds(text: str) -> tuple[dict[str, int], dict[str, int]]:
        starts: dict[str, int] = {}
        ends: dict[str, int] = {}
        for position, colour in enumerate(text, start=1):
            starts.setdefault(colour, position)
            ends[colour] = position
        return starts, ends

    sa, ea = bounds(first)
    sb, eb = bounds(second)

    prev_d = [0] * (lb + 1)
    prev_c = [0] * (lb + 1)
    for i in range(la + 1):
        cur_d = [0] * (lb + 1)
        cur_c = [0] * (lb + 1)
        for j in range(lb + 1):
            if i == 0 and j == 0:
                continue
            from_first = prev_d[j] + prev_c[j] if i else inf
            from_second = cur_d[j - 1] + cur_c[j - 1] if j else inf
            cur_d[j] = min(from_first, from_second)
            if i:
                colour = a[i]
                open_now = prev_c[j]
                if sa[colour] == i and sb.get(colour, inf) > j:
                    open_now += 1
                if ea[colour] == i and eb.get(colour, 0) <= j:
                    open_now -= 1
            else:
                colour = b[j]
                open_now = cur_c[j - 1]
                if sb[colour] == j and sa.get(colour, inf) > i:
                    open_now += 1
                if eb[colour] == j and ea.get(colour, 0) <= i:
                    open_now -= 1
            cur_c[j] = open_now
        prev_d, prev_c = cur_d, cur_c
    return int(prev_d[lb])


def tallest_tower(blocks: Iterable[tuple[int, int, int]]) -> int:
    """Tallest stack of blocks, each base strictly smaller in both sides than the one below."""
    faces = []
    for x, y, z in blocks:
        for a, b, h in ((x, y, z), (x, z, y), (y, z, x)):
            faces.append((max(a, b), min(a, b), h))
    faces.sort()
    best: list[int] = []
    for a, b, h in faces:
        below = [height for (a2, b2, _), height in zip(faces, best) if a2 < a and b2 < b]
        best.append(h + max(below, default=0))
    return max(best, default=0)


def triangle_max_path(rows: Sequence[Sequence[int]]) -> int:
    """Largest sum along a path from the apex down a number triangle."""
    triangle = [list(row) for row in rows]
    if not triangle:
        raise ValueError("the triangle must not be empty")
    for depth, row in enumerate(triangle, start=1):
        if len(row) != depth:
            raise ValueError(f"row {depth} must hold {depth} numbers")
    best = triangle[-1]
    for row in reversed(triangle[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]


def _check_coins(coins: Sequence[int], total: int) -> None:
    if total < 0:
        raise ValueError("total must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def coin_max_count(coins: Iterable[int], total: int) -> Optional[int]:
    """Most coins summing exactly to total, or None if no combination does."""
    coins = list(coins)
    _check_coins(coins, total)
    best: list[Optional[int]] = [0]
    for amount in range(1, total + 1):
        options = [
            best[amount - coin] + 1
            for coin in coins
            if coin <= amount and best[amount - coin] is not None
        ]
        best.append(max(options, default=None))
    return best[total]


def coin_path_extremes(coins: Iterable[int], total: int) -> Optional[tuple[int, int]]:
    """Fewest and most coins summing exactly to total, or None if no combination does."""
    coins = list(coins)
    _check_coins(coins, total)
    fewest: list[Optional[int]] = [0]
    most: list[Optional[int]] = [0]
    for amount in range(1, total + 1):
        reachable = [
            coin for coin in coins if coin <= amount and fewest[amount - coin] is not None
        ]
        fewest.append(min((fewest[amount - c] + 1 for c in reachable), default=None))
        most.append(max((most[amount - c] + 1 for c in reachable), default=None))
    if fewest[total] is None:
        return None
    return fewest[total], most[total]


def unbounded_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Greatest value within capacity when each (volume, value) item may be taken any number of times."""
    items = list(items)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(volume <= 0 for volume, _ in items):
        raise ValueError("volumes must be positive")
    best = [0]
    for room in range(1, capacity + 1):
        best.append(max([0] + [best[room - v] + w for v, w in items if v <= room]))
    return best[capacity]


def zero_one_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Greatest value within capacity when each (volume, value) item may be taken at most once."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for volume, value in items:
        if volume < 0:
            raise ValueError("volumes must not be negative")
        for room in range(capacity, volume - 1, -1):
            best[room] = max(best[room], best[room - volume] + value)
    return best[capacity]


def longest_increasing_subsequence(values: Iterable) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def longest_common_subsequence(first: Sequence, second: Sequence) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]