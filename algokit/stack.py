"""A stack with a fixed capacity, and an interactive command to drive it."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterator, Sequence, TextIO


class StackOverflowError(Exception):
    """A push onto a full stack."""


class StackUnderflowError(IndexError):
    """A pop or peek on an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("Stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("Underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("Stack is empty")
        return self._items[-1]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu-driven stack session on stdin until input ends."""
    parser = argparse.ArgumentParser(
        description="Push, pop and peek on a bounded stack interactively."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of blocks")
        stack = BoundedStack(int(next(tokens)))
        while True:
            print("\nEnter operation of stack            1-->Push     2-->Pop      3->Peek")
            choice = int(next(tokens))
            if choice == 1:
                if len(stack) >= stack.capacity:
                    print("Stack overflow")
                    continue
                print("Enter the element to be inserted")
                stack.push(int(next(tokens)))
            elif choice == 2:
                try:
                    print(f"Popped element is {stack.pop()}")
                except StackUnderflowError:
                    print("Underflow")
            elif choice == 3:
                try:
                    print(f"Peek element is {stack.peek()}")
                except StackUnderflowError:
                    print("Stack is empty")
    except StopIteration:
        return 0
    except ValueError as exc:
        parser.error(f"malformed input: {exc}")
    return 0