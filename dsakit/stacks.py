"""Array-backed and linked stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> int:
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items[-1]

    def second_largest(self) -> int | None:
        """Return the largest value strictly below the maximum, or None.

        The running second-largest starts at zero, so only a positive
        second-largest value is ever reported.
        """
        values = iter(self._items)
        largest = next(values, None)
        if largest is None:
            return None
        second = 0
        for value in values:
            if value > largest:
                second, largest = largest, value
            elif value > second and value != largest:
                second = value
        return None if second == 0 else second

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: int
    below: _Node | None


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflowError("Underflow")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> int:
        if self._top is None:
            raise StackUnderflowError("Stack is empty")
        return self._top.value

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size