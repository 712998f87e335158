"""Classic dynamic-programming problems."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def max_loot(values: Sequence[int]) -> int:
    """Return the largest total of values taken with no two neighbours taken.

    An empty sequence yields 0. A single house is always robbed, even when
    its value is negative.
    """
    before, best = 0, 0
    for index, value in enumerate(values):
        if index == 0:
            before, best = 0, value
        else:
            before, best = best, max(value + before, best)
    return best


def lcs_length(s1: Sequence, s2: Sequence) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_common_substring_length(s1: Sequence, s2: Sequence) -> int:
    """Return the length of the longest run shared by two sequences."""
    best = 0
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, start=1):
            run = previous[j - 1] + 1 if a == b else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (0/1 knapsack)."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        # Capacity 0 always holds nothing, zero-weight items included.
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    row = [1]
    for _ in range(n):
        rows.append(row)
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return rows