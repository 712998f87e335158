import pytest

from algokit.subarrays import kadane, max_sum_rectangle, max_window_sum

SOURCE_MATRIX = [
    [1, 2, -1, -4, -20],
    [-8, -3, 4, 2, 1],
    [3, 8, 10, 1, 3],
    [-4, -1, 1, 7, -6],
]


def test_kadane_classic_example():
    assert kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_kadane_all_negative_returns_largest_element():
    values = [-8, -3, -6, -2, -5]
    assert kadane(values) == max(values)


def test_kadane_all_positive_returns_total():
    values = [3, 1, 4, 1, 5]
    assert kadane(values) == sum(values)


def test_kadane_at_least_every_element():
    values = [2, -7, 3, -1, 6, -9, 4]
    result = kadane(values)
    assert all(result >= v for v in values)


def test_kadane_rejects_empty():
    with pytest.raises(ValueError):
        kadane([])


def test_max_sum_rectangle_example():
    assert max_sum_rectangle(SOURCE_MATRIX) == 29


def test_max_sum_rectangle_single_row_matches_kadane():
    row = [2, -7, 3, -1, 6, -9, 4]
    assert max_sum_rectangle([row]) == kadane(row)


def test_max_sum_rectangle_single_column_matches_kadane():
    column = [2, -7, 3, -1, 6, -9, 4]
    assert max_sum_rectangle([[v] for v in column]) == kadane(column)


def test_max_sum_rectangle_all_positive_is_total():
    matrix = [[1, 2], [3, 4], [5, 6]]
    assert max_sum_rectangle(matrix) == sum(map(sum, matrix))


def test_max_sum_rectangle_all_negative_is_largest_cell():
    matrix = [[-4, -2], [-9, -3]]
    assert max_sum_rectangle(matrix) == max(map(max, matrix))


def test_max_sum_rectangle_rejects_empty():
    with pytest.raises(ValueError):
        max_sum_rectangle([])
    with pytest.raises(ValueError):
        max_sum_rectangle([[]])


def test_max_sum_rectangle_rejects_ragged():
    with pytest.raises(ValueError):
        max_sum_rectangle([[1, 2], [3]])


def test_max_window_sum_example():
    assert max_window_sum([1, 4, 2, 10, 2, 3, 1, 0, 20], 4) == 24


def test_max_window_sum_full_window_is_total():
    values = [1, 4, 2, 10, 2, 3, 1, 0, 20]
    assert max_window_sum(values, len(values)) == sum(values)


def test_max_window_sum_size_one_is_maximum():
    values = [1, 4, 2, 10, 2, 3, 1, 0, 20]
    assert max_window_sum(values, 1) == max(values)


def test_max_window_sum_bounded_by_kadane():
    values = [2, -7, 3, -1, 6, -9, 4]
    for k in range(1, len(values) + 1):
        assert max_window_sum(values, k) <= kadane(values)


@pytest.mark.parametrize("k", [0, -1, 10])
def test_max_window_sum_rejects_bad_size(k):
    with pytest.raises(ValueError):
        max_window_sum([1, 2, 3], k)