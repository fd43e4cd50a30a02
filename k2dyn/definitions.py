"""Shared constants, error codes and small value types used across the tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_NODES_IN_BLOCK = 256
STARTING_BLOCK_CAPACITY = 64

_U32_MASK = 0xFFFFFFFF


class ErrorCode(IntEnum):
    """Numeric codes that identify the kind of failure in tree operations."""

    SUCCESS = 0
    NOT_IMPLEMENTED = -100
    DOES_NOT_EXIST_CHILD = 1
    FRONTIER_OUT_OF_BOUNDS = 2
    FRONTIER_NODE_WITHIN_FIND_INSERTION_LOC = 3
    EXTRACT_SUB_BITVECTOR_FROM_LESS_THAN_TO = 4
    SHIFT_LEFT_FROM_OUT_OF_RANGE_FROM = 5
    COLLAPSE_BITS_FROM_GREATER_THAN_TO = 6
    COLLAPSE_BITS_BITS_DIFF_GTE_THAN_BVSIZE = 7
    FIX_INDEXES_PREORDER_HIGHER_THAN_DELTA = 8
    RESET_SIZE_HIGHER_THAN_CAPACITY = 9
    NULL_BITVECTOR = 10
    NULL_BITVECTOR_CONTAINER = 11
    INVALID_MC_VALUE = 12
    # Not an error: signals that a lazy traversal has nothing more to yield.
    LAZY_STOP = 100


class K2TreeError(Exception):
    """Raised when a tree operation fails; carries an :class:`ErrorCode`."""

    def __init__(self, code: int, message: str = "") -> None:
        self.code = ErrorCode(code)
        self.message = message or self.code.name
        super().__init__(f"{self.message} (error code {int(self.code)})")


@dataclass(frozen=True, order=True)
class Pair2D:
    """A (column, row) coordinate pair."""

    col: int
    row: int


class CoordType(IntEnum):
    """Which axis a coordinate refers to."""

    COLUMN = 0
    ROW = 1


@dataclass(frozen=True)
class SipPoint:
    """A coordinate on one axis, used as a join point."""

    coord: int
    coord_type: CoordType


@dataclass
class NodeSubtreeInfo:
    """Bookkeeping for a node while counting the size of its subtree."""

    node_index: int
    node_relative_depth: int
    subtree_size: int


def ceil_of_div(dividend: int, divisor: int) -> int:
    """Integer division rounded up for non-negative operands."""
    quotient, remainder = divmod(dividend, divisor)
    return quotient + (1 if remainder else 0)


def popcount(value: int) -> int:
    """Number of set bits in the low 32 bits of ``value``."""
    return bin(value & _U32_MASK).count("1")