"""A growable sequence with positional insertion that pads gaps."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .definitions import Pair2D

T = TypeVar("T")

_ZERO_PAIR = Pair2D(0, 0)


class Vector(Generic[T]):
    """Ordered collection of elements, by default of :class:`Pair2D`.

    Inserting past the end pads the gap with ``fill``. For pairs the
    default padding is the zero pair (0, 0).
    """

    def __init__(self, items: Optional[Iterable[T]] = None, fill: Any = _ZERO_PAIR) -> None:
        self.fill = fill
        self._items: List[T] = list(items) if items is not None else []

    def append(self, element: T) -> None:
        """Add ``element`` after the last element."""
        self._items.append(element)

    def insert_at(self, element: T, position: int) -> None:
        """Put ``element`` at ``position``.

        Elements at and after ``position`` move one place to the right. When
        ``position`` lies past the end, the gap is padded with ``fill``.
        """
        if position < 0:
            raise IndexError(f"position {position} is negative")
        size = len(self._items)
        if position < size:
            self._items.insert(position, element)
        else:
            self._items.extend([self.fill] * (position - size))
            self._items.append(element)

    def _check_index(self, position: int) -> int:
        size = len(self._items)
        if not -size <= position < size:
            raise IndexError(f"position {position} outside vector of size {size}")
        return position

    def __getitem__(self, position: int) -> T:
        return self._items[self._check_index(position)]

    def __setitem__(self, position: int, element: T) -> None:
        self._items[self._check_index(position)] = element

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"