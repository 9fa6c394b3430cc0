"""Singly linked and circular linked lists of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class EmptyListError(Exception):
    """Raised when an operation needs a non-empty list."""


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list with head and tail references."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_after(self, target: int, value: int) -> None:
        """Insert ``value`` right after the first node holding ``target``."""
        if self._head is None:
            raise EmptyListError("List is empty.")
        node = self._find(target)
        if node is None:
            raise ValueError("Position not found in the list.")
        new = _Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def pop_front(self) -> int:
        if self._head is None:
            raise EmptyListError("List is empty.")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> int:
        if self._head is None:
            raise EmptyListError("List is empty.")
        if self._head is self._tail:
            value = self._head.value
            self._head = self._tail = None
            self._size = 0
            return value
        prev = self._head
        while prev.next is not self._tail:
            prev = prev.next  # type: ignore[assignment]
        value = self._tail.value  # type: ignore[union-attr]
        prev.next = None
        self._tail = prev
        self._size -= 1
        return value

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise EmptyListError("List is empty.")
        prev: _Node | None = None
        node = self._head
        while node is not None and node.value != value:
            prev, node = node, node.next
        if node is None:
            raise ValueError("Info not found in the list")
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def middle(self) -> int | None:
        """Return the middle value, or None when the length is even."""
        if self._head is None:
            raise EmptyListError("List is empty")
        if self._size % 2 == 0:
            return None
        for index, value in enumerate(self):
            if index == self._size // 2:
                return value
        return None

    def format(self) -> str:
        if self._head is None:
            return "List is empty."
        return "Linked List: " + "".join(f"{value} -> " for value in self) + "NULL"

    def _find(self, value: int) -> _Node | None:
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        return node

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class CircularLinkedList:
    """Circular singly linked list; the tail links back to the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _link_after_tail(self, value: int) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def push_front(self, value: int) -> None:
        self._link_after_tail(value)

    def push_back(self, value: int) -> None:
        self._tail = self._link_after_tail(value)

    def pop_front(self) -> int:
        if self._tail is None:
            raise EmptyListError("Underflow")
        head = self._tail.next
        assert head is not None
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> int:
        if self._tail is None:
            raise EmptyListError("Underflow")
        tail = self._tail
        if tail.next is tail:
            self._tail = None
        else:
            prev = tail.next
            while prev.next is not tail:  # type: ignore[union-attr]
                prev = prev.next  # type: ignore[union-attr]
            prev.next = tail.next  # type: ignore[union-attr]
            self._tail = prev
        self._size -= 1
        return tail.value

    def format(self) -> str:
        if self._tail is None:
            return "List is empty"
        return " -  ".join(str(value) for value in self)

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]

    def __len__(self) -> int:
        return self._size