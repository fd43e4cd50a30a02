"""Morton (Z-order) codes: one quadrant number per tree level."""

from __future__ import annotations

from typing import Iterator, Optional

from .definitions import ErrorCode, K2TreeError, Pair2D

MAX_TREE_DEPTH = 64

# quadrant -> (column bit, row bit)
_QUADRANT_BITS = {0: (0, 0), 1: (0, 1), 2: (1, 0), 3: (1, 1)}


class MortonCode:
    """The path of quadrants from the root to a leaf cell of the matrix."""

    __slots__ = ("treedepth", "_codes")

    def __init__(self, treedepth: int) -> None:
        if treedepth < 0:
            raise ValueError("treedepth must be non-negative")
        self.treedepth = treedepth
        self._codes = [0] * treedepth

    def add_element(self, position: int, code: int) -> None:
        """Store the quadrant ``code`` for the level at ``position``."""
        self._codes[position] = code & 0xFF

    def code_at(self, position: int) -> int:
        """Quadrant stored for the level at ``position``."""
        return self._codes[position]

    def leaf_child(self) -> int:
        """Quadrant at the deepest level."""
        return self.code_at(self.treedepth - 1)

    @classmethod
    def from_coordinates(cls, col: int, row: int, treedepth: int) -> "MortonCode":
        """Build the code for cell (``col``, ``row``) in a tree of ``treedepth``."""
        code = cls(treedepth)
        code.set_coordinates(col, row)
        return code

    def set_coordinates(self, col: int, row: int) -> None:
        """Overwrite this code with the path to cell (``col``, ``row``)."""
        if self.treedepth > MAX_TREE_DEPTH:
            raise K2TreeError(
                ErrorCode.NOT_IMPLEMENTED,
                f"depths higher than {MAX_TREE_DEPTH} are not supported",
            )
        if col < 0 or row < 0:
            raise ValueError("coordinates must be non-negative")
        half_level = 1 << (self.treedepth - 1) if self.treedepth else 0
        position = 0
        while half_level > 0:
            quadrant = (2 if col >= half_level else 0) + (1 if row >= half_level else 0)
            col %= half_level
            row %= half_level
            half_level >>= 1
            self.add_element(position, quadrant)
            position += 1

    def to_coordinates(self, treedepth: Optional[int] = None) -> Pair2D:
        """Decode the first ``treedepth`` levels (all by default) into a cell."""
        depth = self.treedepth if treedepth is None else treedepth
        if depth < 0 or depth > len(self._codes):
            raise IndexError(f"treedepth {depth} outside 0..{len(self._codes)}")
        col = row = 0
        for level, code in enumerate(self._codes[:depth]):
            try:
                col_bit, row_bit = _QUADRANT_BITS[code]
            except KeyError:
                raise K2TreeError(
                    ErrorCode.INVALID_MC_VALUE,
                    f"invalid quadrant {code} at level {level}",
                ) from None
            power = depth - 1 - level
            col += col_bit << power
            row += row_bit << power
        return Pair2D(col, row)

    def __len__(self) -> int:
        return self.treedepth

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MortonCode):
            return NotImplemented
        return self.treedepth == other.treedepth and self._codes == other._codes

    def __repr__(self) -> str:
        return f"MortonCode(treedepth={self.treedepth}, codes={self._codes!r})"