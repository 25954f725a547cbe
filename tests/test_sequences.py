import random

import pytest

from contestkit.sequences import (
    max_subarray_divide,
    max_subarray_span,
    max_subarray_sum,
    merge_sort,
    quick_sort,
)


def _random_lists():
    rng = random.Random(11)
    for size in range(0, 40):
        yield [rng.randint(-20, 20) for _ in range(size)]


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_sorters_match_sorted(sorter):
    for values in _random_lists():
        original = list(values)
        assert sorter(values) == sorted(values)
        assert values == original


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_sorters_handle_long_ordered_input(sorter):
    values = list(range(3000))
    assert sorter(values) == values
    assert sorter(reversed(values)) == values


def test_merge_sort_is_stable_for_equal_keys():
    values = [3.0, 1, 3, 1.0]
    result = merge_sort(values)
    assert result == sorted(values)
    assert [type(v) for v in result] == [type(v) for v in sorted(values)]


def test_maximum_sums_agree():
    for values in _random_lists():
        if not values:
            continue
        best = max_subarray_divide(values)
        assert max_subarray_span(values)[0] == best
        assert max_subarray_sum(values) == max(0, best)


def test_empty_run_counts_for_plain_sum():
    assert max_subarray_sum([-3, -1, -2]) == 0
    assert max_subarray_divide([-3, -1, -2]) == max([-3, -1, -2])


def test_span_sample():
    assert max_subarray_span([6, -1, 5, 4, -7]) == (14, 1, 4)


def test_span_positions_hold_the_sum():
    for values in _random_lists():
        if not values:
            continue
        best, start, end = max_subarray_span(values)
        assert 1 <= start <= end <= len(values)
        assert sum(values[start - 1:end]) == best


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        max_subarray_divide([])
    with pytest.raises(ValueError):
        max_subarray_span([])