"""A binary search tree of comparable values; duplicates go to the left."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class Node:
    """A tree node holding a value and its two children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _within(node: Optional[Node], low: Any, high: Any) -> bool:
    if node is None:
        return True
    if low is not None and node.value < low:
        return False
    if high is not None and node.value > high:
        return False
    return _within(node.left, low, node.value) and _within(
        node.right, node.value, high
    )


def is_binary_search_tree(node: Optional[Node]) -> bool:
    """Return True when every left descendant is <= and every right one >= its ancestor."""
    return _within(node, None, None)


def _inorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[Node], value: Any) -> Optional[Node]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree."""

    def __init__(self, values: Iterable = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; values equal to a node go into its left subtree."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def min(self) -> Any:
        """Return the smallest value."""
        if self.root is None:
            raise ValueError("tree is empty")
        return _leftmost(self.root).value

    def max(self) -> Any:
        """Return the largest value."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def delete(self, value: Any) -> None:
        """Remove one node holding ``value``; absent values are ignored."""
        self.root = _delete(self.root, value)

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return _height(self.root)

    def inorder(self) -> list:
        return list(_inorder(self.root))

    def preorder(self) -> list:
        return list(_preorder(self.root))

    def postorder(self) -> list:
        return list(_postorder(self.root))

    def level_order(self) -> list:
        """Return values level by level, left to right."""
        result = []
        level = [self.root] if self.root is not None else []
        while level:
            result.extend(node.value for node in level)
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return result

    def zigzag_order(self) -> list:
        """Return values level by level, alternating direction after the root."""
        result = []
        level = [self.root] if self.root is not None else []
        left_to_right = True
        while level:
            values = [node.value for node in level]
            result.extend(values if left_to_right else reversed(values))
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
            left_to_right = not left_to_right
        return result

    def is_valid(self) -> bool:
        return is_binary_search_tree(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"