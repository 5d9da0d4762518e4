# structures.py
"""Linked-node LIFO and FIFO containers used by the converter.

Both containers treat access to an empty instance as a contract violation:
``pop``/``top`` on an empty Stack and ``dequeue``/``front``/``back`` on an
empty Queue raise ``AssertionError``. Callers are expected to check
``empty()`` first; the converter never relies on catching it.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    data: T
    next: Optional["Node[T]"] = None


class Stack(Generic[T]):
    """LIFO stack rooted at ``_top``; size tracked explicitly."""

    def __init__(self) -> None:
        self._top: Optional[Node[T]] = None
        self._size: int = 0

    def empty(self) -> bool:
        return self._size == 0

    def push(self, element: T) -> None:
        self._top = Node(element, self._top)
        self._size += 1

    def pop(self) -> T:
        if self.empty():
            raise AssertionError("Stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        if self.empty():
            raise AssertionError("Stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = []
        node = self._top
        while node is not None:
            items.append(node.data)
            node = node.next
        return f"Stack(top→{items})"


class Queue(Generic[T]):
    """FIFO queue with separate front/back references for O(1) ends."""

    def __init__(self) -> None:
        self._front: Optional[Node[T]] = None
        self._back: Optional[Node[T]] = None
        self._size: int = 0

    def empty(self) -> bool:
        return self._front is None

    def enqueue(self, element: T) -> None:
        node = Node(element)
        if self.empty():
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._size += 1

    def dequeue(self) -> T:
        if self.empty():
            raise AssertionError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._size -= 1
        return node.data

    def front(self) -> T:
        if self.empty():
            raise AssertionError("Queue is empty")
        return self._front.data

    def back(self) -> T:
        if self.empty():
            raise AssertionError("Queue is empty")
        return self._back.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        # Read-only walk, front to back
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Queue(front→{list(self)})"
