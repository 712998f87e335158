"""A k-dimensional tree supporting insertion and exact-point search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class _Node:
    point: tuple[int, ...]
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class KDTree:
    """Points of ``k`` coordinates split on one axis per level, cycling."""

    def __init__(self, k: int = 2) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._root: Optional[_Node] = None

    def _check(self, point: Sequence[int]) -> tuple[int, ...]:
        coords = tuple(point)
        if len(coords) != self.k:
            raise ValueError(f"point must have {self.k} coordinates, got {len(coords)}")
        return coords

    def insert(self, point: Sequence[int]) -> None:
        """Add ``point``; ties on the splitting axis go to the right."""
        coords = self._check(point)
        if self._root is None:
            self._root = _Node(coords)
            return
        node = self._root
        depth = 0
        while True:
            axis = depth % self.k
            if coords[axis] < node.point[axis]:
                if node.left is None:
                    node.left = _Node(coords)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(coords)
                    return
                node = node.right
            depth += 1

    def __contains__(self, point: object) -> bool:
        try:
            coords = self._check(point)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        node = self._root
        depth = 0
        while node is not None:
            if node.point == coords:
                return True
            axis = depth % self.k
            node = node.left if coords[axis] < node.point[axis] else node.right
            depth += 1
        return False