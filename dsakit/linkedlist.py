"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_END = "NULL"


def _render(values: Iterable) -> str:
    return "".join(f"{value} -> " for value in values) + _END


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A singly linked list with 1-based positional insert and delete."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def _node_before(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 2):
            node = node.next
        return node

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.push_front(value)
            return
        before = self._node_before(position)
        before.next = _Node(value, before.next)
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            removed = self._head
            self._head = removed.next
        else:
            before = self._node_before(position)
            removed = before.next
            before.next = removed.next
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes."""
        previous = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""

        def relink(node: _Node) -> _Node:
            if node.next is None:
                return node
            new_head = relink(node.next)
            node.next.next = node
            node.next = None
            return new_head

        if self._head is not None:
            self._head = relink(self._head)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


@dataclass(slots=True)
class _DoubleNode:
    value: Any
    next: Optional["_DoubleNode"] = None
    prev: Optional["_DoubleNode"] = None


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"