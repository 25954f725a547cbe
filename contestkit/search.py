"""Exhaustive search: sliding puzzle, water jugs, hard sequences, prime rings, queens, enumeration."""

from __future__ import annotations

import heapq
import itertools
import string
from collections import Counter, deque
from math import isqrt
from typing import Hashable, Iterable, Iterator, Optional, Sequence


def eight_puzzle_distance(start: Sequence[int], goal: Sequence[int]) -> Optional[int]:
    """Fewest moves from start to goal on a 3x3 board (0 is the blank), or None if unreachable."""
    start, goal = tuple(start), tuple(goal)
    for board in (start, goal):
        if len(board) != 9 or 0 not in board:
            raise ValueError("a board has nine cells, one of them 0")
    if start == goal:
        return 0
    distance = {start: 0}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        blank = board.index(0)
        x, y = divmod(blank, 3)
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = x + dx, y + dy
            if not (0 <= nx < 3 and 0 <= ny < 3):
                continue
            other = nx * 3 + ny
            cells = list(board)
            cells[blank], cells[other] = cells[other], cells[blank]
            following = tuple(cells)
            if following in distance:
                continue
            distance[following] = distance[board] + 1
            if following == goal:
                return distance[following]
            queue.append(following)
    return None


def pour_water(a: int, b: int, c: int, d: int) -> tuple[int, int]:
    """Pour among jugs of capacity a, b, c (c starts full) to measure d litres.

    Returns the water poured and the largest amount not above d that was reached.
    """
    if min(a, b, c, d) < 0:
        raise ValueError("capacities and target must not be negative")
    capacity = (a, b, c)
    best: dict[int, int] = {}
    start = (0, 0, c)
    seen = {(0, 0)}
    order = itertools.count(1)
    heap = [(0, 0, start)]
    while heap:
        poured, _, state = heapq.heappop(heap)
        for amount in state:
            if amount not in best or poured < best[amount]:
                best[amount] = poured
        if d in best:
            break
        for source, target in itertools.permutations(range(3), 2):
            if state[source] == 0 or state[target] == capacity[target]:
                continue
            moved = min(capacity[target], state[source] + state[target]) - state[target]
            jugs = list(state)
            jugs[source] -= moved
            jugs[target] += moved
            if (jugs[0], jugs[1]) not in seen:
                seen.add((jugs[0], jugs[1]))
                heapq.heappush(heap, (poured + moved, next(order), tuple(jugs)))
    reached = max(amount for amount in best if amount <= d)
    return best[reached], reached


def _has_square_suffix(sequence: str) -> bool:
    size = len(sequence)
    return any(
        sequence[size - half:] == sequence[size - 2 * half:size - half]
        for half in range(1, size // 2 + 1)
    )


def _hard_sequences(alphabet: str) -> Iterator[str]:
    def extend(prefix: str) -> Iterator[str]:
        yield prefix
        for letter in alphabet:
            candidate = prefix + letter
            if not _has_square_suffix(candidate):
                yield from extend(candidate)

    return extend("")


def hard_sequence(n: int, letters: int) -> str:
    """Return the n-th sequence (the empty one is 0th) with no adjacent repeated block."""
    if not 1 <= letters <= 26:
        raise ValueError("letters must be between 1 and 26")
    if n < 0:
        raise ValueError("n must not be negative")
    for index, sequence in enumerate(_hard_sequences(string.ascii_uppercase[:letters])):
        if index == n:
            return sequence
    raise ValueError(f"there are fewer than {n + 1} hard sequences on {letters} letters")


def format_hard_sequence(sequence: str) -> str:
    """Group the letters by four, break the line every 64 letters, then add the length."""
    parts: list[str] = []
    last = len(sequence) - 1
    for index, letter in enumerate(sequence):
        if index and index % 64 == 0:
            parts.append("\n")
        parts.append(letter)
        if index % 4 == 3 and index != last and index % 64 != 63:
            parts.append(" ")
    return "".join(parts) + f"\n{len(sequence)}"


def _is_prime(value: int) -> bool:
    return value >= 2 and all(value % divisor for divisor in range(2, isqrt(value) + 1))


def prime_rings(n: int) -> Iterator[list[int]]:
    """Yield every ring of 1..n starting at 1 in which neighbours sum to a prime."""
    if n < 1:
        raise ValueError("n must be positive")
    ring = [1]
    used = {1}

    def extend() -> Iterator[list[int]]:
        if len(ring) == n:
            if _is_prime(ring[0] + ring[-1]):
                yield list(ring)
            return
        for value in range(2, n + 1):
            if value not in used and _is_prime(ring[-1] + value):
                ring.append(value)
                used.add(value)
                yield from extend()
                used.discard(value)
                ring.pop()

    return extend()


def count_queens(n: int) -> int:
    """Count placements of n non-attacking queens on an n by n board."""
    if n < 0:
        raise ValueError("n must not be negative")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            total += place(row + 1)
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)
        return total

    return place(0)


def unique_permutations(values: Iterable[Hashable]) -> Iterator[tuple]:
    """Yield each distinct ordering of the values once."""
    values = list(values)
    counts = Counter(values)
    distinct = list(counts)
    current: list = []

    def extend() -> Iterator[tuple]:
        if len(current) == len(values):
            yield tuple(current)
            return
        for value in distinct:
            if counts[value]:
                counts[value] -= 1
                current.append(value)
                yield from extend()
                current.pop()
                counts[value] += 1

    return extend()


def subsets(n: int) -> Iterator[list[int]]:
    """Yield the subsets of 0..n-1 in the order of their bit masks."""
    if n < 0:
        raise ValueError("n must not be negative")
    return ([bit for bit in range(n) if mask >> bit & 1] for mask in range(1 << n))