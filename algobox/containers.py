"""A last-in first-out stack and a bounded first-in first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["ContainerFullError", "ContainerEmptyError", "Stack", "ArrayQueue"]


class ContainerFullError(OverflowError):
    """Raised when adding to a container that is at its capacity."""


class ContainerEmptyError(IndexError):
    """Raised when taking from or looking into an empty container."""


def _check_capacity(capacity: int | None) -> int | None:
    if capacity is not None and capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class Stack:
    """Last-in first-out stack, unbounded unless a capacity is given."""

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise ContainerFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise ContainerEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise ContainerEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top down."""
        return reversed(self._items)


class ArrayQueue:
    """First-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def insert(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if len(self._items) >= self.capacity:
            raise ContainerFullError("queue is full")
        self._items.append(value)

    def delete(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Whether the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(self._items)