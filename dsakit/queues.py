"""Fixed-capacity linear and circular queues."""

from __future__ import annotations

from collections.abc import Iterator


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class LinearQueue:
    """Array-backed queue whose slots are not reused after a dequeue.

    Once ``capacity`` values have been enqueued the queue reports full,
    even if some of them have since been removed.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[int] = []
        self._head = 0

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def is_empty(self) -> bool:
        return self._head == len(self._slots)

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._slots.append(value)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        value = self._slots[self._head]
        self._head += 1
        return value

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to rear."""
        return iter(self._slots[self._head:])

    def __len__(self) -> int:
        return len(self._slots) - self._head


class CircularQueue:
    """Ring-buffer queue that reuses freed slots."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[int | None] = [None] * capacity
        self._front = 0
        self._count = 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._count -= 1
        self._front = 0 if self._count == 0 else (self._front + 1) % self.capacity
        return value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to rear."""
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._count