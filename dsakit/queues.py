"""FIFO queues: a fixed-capacity ring buffer and a linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 101


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class CircularQueue:
    """A queue stored in a fixed-size ring buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._head]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"