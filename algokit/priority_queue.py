"""A priority queue kept as an unsorted list and scanned on each access."""

from __future__ import annotations

from typing import Any


class ArrayPriorityQueue:
    """Items with integer priorities; the highest priority comes out first.

    Among items of equal priority the one with the larger value wins, and
    among equal values the one enqueued first.
    """

    def __init__(self) -> None:
        self._items: list[tuple[Any, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: Any, priority: int) -> None:
        """Add ``value`` with the given ``priority``."""
        self._items.append((value, priority))

    def _top_index(self) -> int:
        if not self._items:
            raise IndexError("peek from an empty priority queue")
        return max(
            range(len(self._items)),
            key=lambda i: (self._items[i][1], self._items[i][0]),
        )

    def peek(self) -> Any:
        """Return the value that would be dequeued next."""
        return self._items[self._top_index()][0]

    def dequeue(self) -> Any:
        """Remove and return the value with the highest priority."""
        value, _ = self._items.pop(self._top_index())
        return value