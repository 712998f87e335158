"""A persistent segment tree of range sums.

Every update leaves the version it started from untouched and creates a new
version that shares all unchanged nodes with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class _Node:
    total: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _build(values: list[int], low: int, high: int) -> _Node:
    if low == high:
        return _Node(values[low])
    mid = (low + high) // 2
    left = _build(values, low, mid)
    right = _build(values, mid + 1, high)
    return _Node(left.total + right.total, left, right)


def _upgrade(prev: _Node, low: int, high: int, index: int, value: int) -> _Node:
    if low == high:
        return _Node(value)
    mid = (low + high) // 2
    if index <= mid:
        left = _upgrade(prev.left, low, mid, index, value)
        right = prev.right
    else:
        left = prev.left
        right = _upgrade(prev.right, mid + 1, high, index, value)
    return _Node(left.total + right.total, left, right)


def _query(node: _Node, low: int, high: int, left: int, right: int) -> int:
    if left > high or right < low:
        return 0
    if left <= low and high <= right:
        return node.total
    mid = (low + high) // 2
    return _query(node.left, low, mid, left, right) + _query(
        node.right, mid + 1, high, left, right
    )


class PersistentSegmentTree:
    """Range sums over every version of a sequence. Version 0 is the original."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._size = len(items)
        self._roots = [_build(items, 0, self._size - 1)]

    def __len__(self) -> int:
        return self._size

    @property
    def versions(self) -> int:
        """Number of versions created so far."""
        return len(self._roots)

    def _root(self, version: int) -> _Node:
        if not 0 <= version < len(self._roots):
            raise IndexError(f"version {version} does not exist")
        return self._roots[version]

    def update(self, version: int, index: int, value: int) -> int:
        """Set ``index`` to ``value`` on top of ``version``; return the new version."""
        root = self._root(version)
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range")
        self._roots.append(_upgrade(root, 0, self._size - 1, index, value))
        return len(self._roots) - 1

    def query(self, version: int, left: int, right: int) -> int:
        """Return the sum of positions ``left .. right`` in ``version``.

        Positions outside the sequence contribute nothing.
        """
        root = self._root(version)
        if left > right:
            return 0
        return _query(root, 0, self._size - 1, left, right)