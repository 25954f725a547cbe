import itertools
import random

import pytest

from contestkit.assorted import (
    add_decimal_strings,
    building_plan,
    count_zero_sum_quadruples,
    most_common_name,
    pancake_flips,
)


def _apply_flips(stack, flips):
    items = list(stack)
    size = len(items)
    for position in flips:
        top = size - position + 1
        items[:top] = reversed(items[:top])
    return items


def test_add_matches_integer_addition():
    for a, b in [(123, 989), (0, 0), (999, 1), (10**30 + 7, 5 * 10**29)]:
        assert int(add_decimal_strings(str(a), str(b))) == a + b


def test_add_is_commutative():
    assert add_decimal_strings("4821", "77") == add_decimal_strings("77", "4821")


def test_add_keeps_leading_zero_width():
    result = add_decimal_strings("0005", "3")
    assert len(result) == 4
    assert int(result) == int("0005") + int("3")


def test_add_rejects_non_digits():
    with pytest.raises(ValueError):
        add_decimal_strings("12a", "3")


def test_quadruples_sample():
    rows = [
        (-45, 22, 42, -16),
        (-41, -27, 56, 30),
        (-36, 53, -37, 77),
        (-36, 30, -75, -46),
        (26, -38, -10, 62),
        (-32, -54, -6, 45),
    ]
    a, b, c, d = zip(*rows)
    assert count_zero_sum_quadruples(a, b, c, d) == 5


def test_quadruples_all_zero():
    n = 4
    zeros = [0] * n
    assert count_zero_sum_quadruples(zeros, zeros, zeros, zeros) == n**4


def test_quadruples_negation_invariant():
    rng = random.Random(3)
    lists = [[rng.randint(-5, 5) for _ in range(6)] for _ in range(4)]
    negated = [[-x for x in values] for values in lists]
    assert count_zero_sum_quadruples(*lists) == count_zero_sum_quadruples(*negated)


def test_building_plan_shape_and_adjacency():
    n = 7
    lower, upper = building_plan(n)
    assert len(lower) == len(upper) == n
    assert all(len(row) == n for row in lower + upper)
    pairs = {(lower[i][j], upper[i][j]) for i in range(n) for j in range(n)}
    countries = {ch for row in lower for ch in row}
    assert len(countries) == n
    for x, y in itertools.combinations(sorted(countries), 2):
        assert (x, y) in pairs or (y, x) in pairs


def test_building_plan_rejects_bad_sizes():
    with pytest.raises(ValueError):
        building_plan(0)
    with pytest.raises(ValueError):
        building_plan(53)


def test_pancake_sample():
    assert pancake_flips([5, 1, 2, 3, 4]) == [1, 2]


def test_pancake_sorted_needs_no_flips():
    assert pancake_flips([1, 2, 3, 4, 5]) == []


def test_pancake_flips_sort_random_stacks():
    rng = random.Random(11)
    for size in range(1, 12):
        stack = [rng.randint(1, 20) for _ in range(size)]
        flips = pancake_flips(stack)
        assert _apply_flips(stack, flips) == sorted(stack)
        assert len(flips) <= 2 * max(size - 1, 0)
        assert all(1 <= position <= size for position in flips)


def test_most_common_name_prefers_alphabetical_tie():
    names = ["mia", "leo", "mia", "ava", "leo"]
    assert most_common_name(names) == "leo"


def test_most_common_name_picks_most_frequent():
    names = ["zed"] * 3 + ["amy", "bob"]
    assert most_common_name(names) == "zed"


def test_most_common_name_rejects_empty():
    with pytest.raises(ValueError):
        most_common_name([])