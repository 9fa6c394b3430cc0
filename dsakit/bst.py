"""Binary search tree with in-order traversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unbalanced BST; equal values go to the left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def inorder(self) -> list[int]:
        """Return the values in in-order (ascending) sequence."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size