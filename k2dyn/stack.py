"""A last-in, first-out stack used by the tree traversals."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack; ``capacity`` is the expected size and is only a hint."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: List[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def reset(self) -> None:
        """Remove every value."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top down, the order in which values would pop."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"