"""A binary search tree and an array-backed max-heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> BinarySearchTree:
        """Insert ``value`` and return the tree for chaining."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return self
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return self
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return self
                current = current.right

    def preorder(self) -> list[int]:
        """Values in root, left, right order."""
        order: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def right_view(self) -> list[int]:
        """The value seen first from the right on each level, top to bottom."""
        view: list[int] = []
        stack = [(self._root, 0)] if self._root is not None else []
        while stack:
            node, level = stack.pop()
            if level == len(view):
                view.append(node.value)
            if node.left is not None:
                stack.append((node.left, level + 1))
            if node.right is not None:
                stack.append((node.right, level + 1))
        return view

    def __len__(self) -> int:
        return len(self.preorder())


class MaxHeap:
    """Binary max-heap stored in a list."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, key: int) -> None:
        """Add ``key`` to the heap."""
        items = self._items
        items.append(key)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def extract(self) -> int:
        """Remove and return the largest key; raise IndexError when empty."""
        items = self._items
        if not items:
            raise IndexError("extract from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def __len__(self) -> int:
        return len(self._items)