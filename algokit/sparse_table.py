"""Range-minimum queries answered in constant time by a sparse table."""

from __future__ import annotations

from typing import Iterable, Sequence


class SparseTable:
    """Minimums of every power-of-two run of a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        level = list(values)
        if not level:
            raise ValueError("values must not be empty")
        self._size = len(level)
        self._levels = [level]
        width = 1
        while 2 * width <= self._size:
            level = [min(a, b) for a, b in zip(level, level[width:])]
            self._levels.append(level)
            width *= 2

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> int:
        """Return the minimum of positions ``left .. right`` inclusive."""
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] is invalid")
        j = (right - left + 1).bit_length() - 1
        level = self._levels[j]
        return min(level[left], level[right - (1 << j) + 1])


def solve_queries(
    values: Iterable[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Return the minimum of each inclusive ``(left, right)`` range of ``values``."""
    table = SparseTable(values)
    return [table.query(left, right) for left, right in queries]