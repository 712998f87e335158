"""Maximum-sum subarrays, rectangles and fixed-size windows."""

from __future__ import annotations

from typing import Sequence


def kadane(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    best = values[0]
    current = 0
    for value in values:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def max_sum_rectangle(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest sum of a non-empty rectangular block of ``matrix``."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")

    best = None
    for left in range(cols):
        column_sums = [0] * len(matrix)
        for right in range(left, cols):
            column_sums = [total + row[right] for total, row in zip(column_sums, matrix)]
            found = kadane(column_sums)
            if best is None or found > best:
                best = found
    return best


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values."""
    if k <= 0:
        raise ValueError("window size must be positive")
    if k > len(values):
        raise ValueError("window is larger than the sequence")
    window = sum(values[:k])
    best = window
    for leaving, entering in zip(values, values[k:]):
        window += entering - leaving
        best = max(best, window)
    return best