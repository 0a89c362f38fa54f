"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Iterator


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 2):
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Push ``x``; raise StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top item; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)