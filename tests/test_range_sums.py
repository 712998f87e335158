import random

import pytest

from algokit.range_sums import RangeSum, mo_range_sums, range_sum

SQRT_INPUT = [1, 5, 2, 4, 6, 1, 3, 5, 7, 10]
MO_INPUT = [1, 1, 2, 1, 3, 4, 5, 2, 8]


@pytest.mark.parametrize("left, right", [(3, 8), (1, 6), (8, 8), (0, 9)])
def test_range_sum_matches_slice(left, right):
    assert range_sum(SQRT_INPUT, left, right) == sum(SQRT_INPUT[left : right + 1])


def test_range_sum_after_change():
    values = list(SQRT_INPUT)
    values[8] = 0
    assert range_sum(values, 8, 8) == 0


def test_range_sum_empty_range():
    assert range_sum(SQRT_INPUT, 5, 4) == 0


@pytest.mark.parametrize("left, right", [(-1, 3), (2, 10)])
def test_range_sum_out_of_bounds(left, right):
    with pytest.raises(IndexError):
        range_sum(SQRT_INPUT, left, right)


def test_mo_processing_order():
    results = mo_range_sums(MO_INPUT, [(0, 4), (1, 3), (2, 4)])
    assert [(r.left, r.right) for r in results] == [(1, 3), (0, 4), (2, 4)]


def test_mo_sums_match_direct_sums():
    results = mo_range_sums(MO_INPUT, [(0, 4), (1, 3), (2, 4)])
    for result in results:
        assert result.total == range_sum(MO_INPUT, result.left, result.right)


def test_mo_random_queries():
    rng = random.Random(5)
    values = [rng.randint(-100, 100) for _ in range(64)]
    queries = []
    for _ in range(100):
        left = rng.randrange(len(values))
        queries.append((left, rng.randrange(left, len(values))))
    results = mo_range_sums(values, queries)
    assert sorted((r.left, r.right) for r in results) == sorted(queries)
    for result in results:
        assert result.total == sum(values[result.left : result.right + 1])


def test_mo_no_queries():
    assert mo_range_sums(MO_INPUT, []) == []


def test_range_sum_text():
    assert str(RangeSum(1, 3, 4)) == "Sum of [1, 3] is 4"


@pytest.mark.parametrize("query", [(3, 2), (-1, 2), (0, 9)])
def test_mo_invalid_query(query):
    with pytest.raises(IndexError):
        mo_range_sums(MO_INPUT, [query])