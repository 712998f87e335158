"""Prefix sums with point updates on a binary indexed (Fenwick) tree."""

from __future__ import annotations

from typing import Iterable


class FenwickTree:
    """A binary indexed tree over a sequence of integers.

    Positions are zero-based, as in the sequence the tree is built from.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        tree = [0, *values]
        size = len(tree) - 1
        for i in range(1, size + 1):
            parent = i + (i & -i)
            if parent <= size:
                tree[parent] += tree[i]
        self._tree = tree

    def __len__(self) -> int:
        return len(self._tree) - 1

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        size = len(self)
        if not 0 <= index < size:
            raise IndexError(f"index {index} is out of range")
        i = index + 1
        while i <= size:
            self._tree[i] += delta
            i += i & -i

    def prefix_sum(self, index: int) -> int:
        """Return the sum of the values at positions ``0 .. index``.

        An index of -1 names the empty prefix, whose sum is 0.
        """
        if not -1 <= index < len(self):
            raise IndexError(f"index {index} is out of range")
        total = 0
        i = index + 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total