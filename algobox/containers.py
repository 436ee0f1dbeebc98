"""A FIFO queue and a bounded LIFO stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class EmptyContainerError(IndexError):
    """Raised when taking from an empty queue or stack."""


class Queue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise EmptyContainerError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise EmptyContainerError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "Queue: " + " ".join(str(value) for value in self._items)


class Stack:
    """Last-in, first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if self.is_full():
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyContainerError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyContainerError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the stack has reached its capacity."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)