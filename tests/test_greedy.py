import pytest

from contestkit.greedy import (
    fractional_knapsack,
    huffman_order,
    max_disjoint_intervals,
    max_items_within,
    max_overlap,
    min_boats,
    min_interval_cover,
    pair_giants,
    round_robin_table,
)


def test_max_items_bounds():
    weights = [4, 2, 7, 1, 3]
    assert max_items_within(weights, 1000) == len(weights)
    assert max_items_within(weights, 0) == 0
    taken = max_items_within(weights, 6)
    assert sum(sorted(weights)[:taken]) <= 6
    assert sum(sorted(weights)[: taken + 1]) > 6


def test_fractional_all_fit():
    items = [(2, 10), (3, 9)]
    assert fractional_knapsack(items, 100) == sum(value for _, value in items)
    assert fractional_knapsack(items, 0) == 0


def test_fractional_not_above_whole_rate_bound():
    items = [(2, 10), (4, 8), (3, 3)]
    capacity = 5
    best_rate = max(value // weight for weight, value in items)
    assert fractional_knapsack(items, capacity) <= best_rate * capacity


def test_min_boats_everyone_alone():
    weights = [5, 5, 5]
    assert min_boats(weights, 5) == len(weights)


def test_min_boats_all_pairs():
    weights = [1, 1, 1, 1]
    assert min_boats(weights, 2) == len(weights) // 2


def test_min_boats_bounds():
    weights = [3, 8, 2, 7, 5, 1, 9]
    boats = min_boats(weights, 10)
    assert (len(weights) + 1) // 2 <= boats <= len(weights)


def test_min_boats_too_heavy():
    with pytest.raises(ValueError):
        min_boats([11], 10)


def test_disjoint_intervals_do_not_overlap():
    intervals = [(1, 3), (2, 5), (4, 7), (6, 9), (8, 10)]
    chosen = max_disjoint_intervals(intervals)
    spans = [intervals[k] for k in chosen]
    for (_, end), (start, _) in zip(spans, spans[1:]):
        assert end <= start
    assert max_disjoint_intervals([]) == []


def test_overlap_nested_and_disjoint():
    nested = [(0, 10), (1, 9), (2, 8)]
    assert max_overlap(nested) == len(nested)
    assert max_overlap([(0, 1), (2, 3), (4, 5)]) == 1
    assert max_overlap([]) == 0


def test_overlap_rejects_reversed():
    with pytest.raises(ValueError):
        max_overlap([(3, 1)])


def test_interval_cover():
    assert min_interval_cover([(0, 5), (4, 10)], 0, 10) == 2
    assert min_interval_cover([(0, 3), (5, 10)], 0, 10) is None
    assert min_interval_cover([(0, 3)], 2, 2) == 0


def test_huffman_order_is_permutation():
    symbols = [("a", 5), ("b", 1), ("c", 1), ("d", 3)]
    order = huffman_order(symbols)
    assert sorted(order) == sorted(symbol for symbol, _ in symbols)


def test_huffman_single_and_empty():
    assert huffman_order([("x", 4)]) == ["x"]
    with pytest.raises(ValueError):
        huffman_order([])


def test_round_robin_small():
    assert round_robin_table(0) == [[1]]
    assert round_robin_table(1) == [[1, 2], [2, 1]]


def test_round_robin_latin_square():
    table = round_robin_table(3)
    size = len(table)
    everyone = list(range(1, size + 1))
    assert table[0] == everyone
    for row in table:
        assert sorted(row) == everyone
    for column in zip(*table):
        assert sorted(column) == everyone
    assert all(table[i][j] == table[j][i] for i in range(size) for j in range(size))


def _orientation(p, q, r):
    value = (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])
    return (value > 0) - (value < 0)


def _cross(a, b, c, d):
    return (
        _orientation(a, b, c) * _orientation(a, b, d) < 0
        and _orientation(c, d, a) * _orientation(c, d, b) < 0
    )


def _check_pairing(points, partner):
    for index, mate in enumerate(partner):
        assert partner[mate] == index
        assert bool(points[index][2]) != bool(points[mate][2])
    segments = {tuple(sorted((i, m))) for i, m in enumerate(partner)}
    for first in segments:
        for second in segments:
            if first < second:
                a, b = (points[k][:2] for k in first)
                c, d = (points[k][:2] for k in second)
                assert not _cross(a, b, c, d)


def test_pair_giants_sample():
    points = [(0, 0, 1), (2, 1, 1), (2, 2, 0), (0, 3, 0)]
    partner = pair_giants(points)
    _check_pairing(points, partner)


def test_pair_giants_larger():
    points = [
        (0, 0, True), (5, 1, False), (2, 7, True), (8, 3, False),
        (3, 3, True), (6, 8, False), (9, 9, True), (1, 5, False),
    ]
    _check_pairing(points, pair_giants(points))


def test_pair_giants_unbalanced():
    with pytest.raises(ValueError):
        pair_giants([(0, 0, True), (1, 1, True)])