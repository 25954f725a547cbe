"""Number theory: binomial ratios, Fibonacci residues, divisibility, square-free numbers, clocks."""

from __future__ import annotations

from fractions import Fraction
from functools import lru_cache
from math import comb, gcd, isqrt, lcm
from typing import Iterable, Iterator

_HALF_DAY = 12 * 60 * 60
# Relative angular speeds, in degrees per second, of the second/minute,
# second/hour and minute/hour hand pairs.
_SECOND_MINUTE = 59 / 10
_SECOND_HOUR = 719 / 120
_MINUTE_HOUR = 11 / 120


def choose_ratio(p: int, q: int, r: int, s: int) -> float:
    """Return C(p, q) / C(r, s)."""
    if not 0 <= q <= p or not 0 <= s <= r:
        raise ValueError("binomial arguments must satisfy 0 <= k <= n")
    return float(Fraction(comb(p, q), comb(r, s)))


@lru_cache(maxsize=None)
def _fibonacci_cycle(n: int) -> tuple[int, ...]:
    """Fibonacci numbers modulo n over one full period."""
    cycle = [0, 1]
    while True:
        following = (cycle[-1] + cycle[-2]) % n
        if cycle[-1] == 0 and following == 1:
            cycle.pop()
            return tuple(cycle)
        cycle.append(following)


def fibonacci_mod_power(a: int, b: int, n: int) -> int:
    """Return F(a ** b) modulo n, where F(0) = 0 and F(1) = 1."""
    if a < 0 or b < 0:
        raise ValueError("a and b must not be negative")
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    cycle = _fibonacci_cycle(n)
    period = len(cycle)
    return cycle[pow(a % period, b, period)]


def divides_product(values: Iterable[int]) -> bool:
    """Return True if the second value divides the product of all the others."""
    items = list(values)
    if len(items) < 2:
        raise ValueError("at least two values are required")
    if any(value <= 0 for value in items):
        raise ValueError("values must be positive")
    remaining = items[1]
    for value in items[:1] + items[2:]:
        remaining //= gcd(remaining, value)
    return remaining == 1


def squarefree_offsets(low: int, high: int) -> list[int]:
    """Offsets from low of the square-free numbers in [low, high]."""
    if low < 1:
        raise ValueError("low must be positive")
    if low > high:
        raise ValueError("low must not exceed high")
    limit = isqrt(high)
    composite = [False] * (limit + 1)
    squareful = [False] * (high - low + 1)
    for prime in range(2, limit + 1):
        if composite[prime]:
            continue
        for multiple in range(prime * prime, limit + 1, prime):
            composite[multiple] = True
        square = prime * prime
        first = -(-low // square) * square
        for multiple in range(first, high + 1, square):
            squareful[multiple - low] = True
    return [offset for offset, marked in enumerate(squareful) if not marked]


def lcm_all(values: Iterable[int]) -> int:
    """Least common multiple of the values; 1 when there are none."""
    return lcm(*values)


def _windows(speed: float, degrees: float, low: float, high: float) -> Iterator[tuple[float, float]]:
    """Times within [low, high] when two hands moving apart at speed are at least degrees apart."""
    turn = int((low * speed + degrees) / 360)
    if (360 * turn - degrees) / speed <= low:
        turn += 1
    while True:
        start = max((360 * turn - 360 + degrees) / speed, low)
        end = min((360 * turn - degrees) / speed, high)
        if start >= end:
            return
        yield start, end
        turn += 1


def happy_clock_percent(degrees: float) -> float:
    """Percentage of a half day in which all three clock hands are at least degrees apart."""
    if degrees < 0:
        raise ValueError("degrees must not be negative")
    d = float(degrees)
    total = 0.0
    turn = 1
    while True:
        low = (360 * turn - 360 + d) / _SECOND_MINUTE
        high = (360 * turn - d) / _SECOND_MINUTE
        if low > _HALF_DAY:
            break
        for low2, high2 in _windows(_SECOND_HOUR, d, low, high):
            for low3, high3 in _windows(_MINUTE_HOUR, d, low2, high2):
                total += high3 - low3
        turn += 1
    return total / _HALF_DAY * 100