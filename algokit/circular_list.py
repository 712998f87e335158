"""A singly linked circular list with positional insertion."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[_Node] = None


class CircularLinkedList:
    """A circular list reached through its last node.

    Positions are one-based: position 1 is the head.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value, self._size + 1)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        head = self._last.next
        node = head
        while True:
            yield node.data
            node = node.next
            if node is head:
                break

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, data: Any, pos: int) -> None:
        """Insert ``data`` so that it ends up at one-based position ``pos``.

        Valid positions run from 1 to one past the current length; any other
        position raises IndexError and leaves the list unchanged.
        """
        if not 1 <= pos <= self._size + 1:
            raise IndexError(f"Invalid position! {pos}")

        node = _Node(data)
        if self._last is None:
            node.next = node
            self._last = node
        elif pos == 1:
            node.next = self._last.next
            self._last.next = node
        else:
            curr = self._last.next
            for _ in range(pos - 2):
                curr = curr.next
            node.next = curr.next
            curr.next = node
            if curr is self._last:
                self._last = node
        self._size += 1