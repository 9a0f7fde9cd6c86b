"""LIFO stacks: a fixed-capacity array stack and a linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 100


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack with a fixed maximum size."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        values = []
        node = self._top
        while node is not None:
            values.append(node.value)
            node = node.next
        return reversed(values)

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"