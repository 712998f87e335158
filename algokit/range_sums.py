"""Range sums by direct summation and by Mo's offline algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class RangeSum:
    """The sum of positions ``left .. right`` inclusive."""

    left: int
    right: int
    total: int

    def __str__(self) -> str:
        return f"Sum of [{self.left}, {self.right}] is {self.total}"


def range_sum(values: Sequence[int], left: int, right: int) -> int:
    """Return the sum of ``values[left .. right]``; an empty range gives 0."""
    if left > right:
        return 0
    if left < 0 or right >= len(values):
        raise IndexError(f"range [{left}, {right}] is out of bounds")
    return sum(values[left : right + 1])


def mo_range_sums(
    values: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[RangeSum]:
    """Answer inclusive range-sum queries offline with Mo's ordering.

    Results come in the order the queries are processed: grouped by the
    square-root block of their left end, then by increasing right end.
    """
    pending = [(left, right) for left, right in queries]
    for left, right in pending:
        if not 0 <= left <= right < len(values):
            raise IndexError(f"range [{left}, {right}] is invalid")

    block = max(1, math.isqrt(len(values)))
    pending.sort(key=lambda query: (query[0] // block, query[1]))

    cur_left = cur_right = 0
    total = 0
    results = []
    for left, right in pending:
        while cur_left < left:
            total -= values[cur_left]
            cur_left += 1
        while cur_left > left:
            cur_left -= 1
            total += values[cur_left]
        while cur_right <= right:
            total += values[cur_right]
            cur_right += 1
        while cur_right > right + 1:
            cur_right -= 1
            total -= values[cur_right]
        results.append(RangeSum(left, right, total))
    return results