"""Linear containers: a singly linked list, a FIFO queue and a LIFO stack."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list that grows at the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._length = 0
        for value in values:
            self.prepend(value)

    def prepend(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        self._head = _Node(value, self._head)
        self._length += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if none does."""
        if self._head is None:
            raise ValueError("list is empty")
        if self._head.value == value:
            self._head = self._head.next
            self._length -= 1
            return
        previous = self._head
        while previous.next is not None:
            if previous.next.value == value:
                previous.next = previous.next.next
                self._length -= 1
                return
            previous = previous.next
        raise ValueError(f"value {value!r} does not exist in list")

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length


class Queue:
    """First-in, first-out queue."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """Last-in, first-out stack."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Items from bottom to top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)