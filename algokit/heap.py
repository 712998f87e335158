"""An array-backed binary max-heap."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class MaxHeap:
    """A max-heap kept in level order in a list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        for index in reversed(range(len(self._items) // 2)):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the items in level order."""
        return iter(list(self._items))

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def push(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def pop_root(self) -> Any:
        """Remove and return the largest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Any:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]