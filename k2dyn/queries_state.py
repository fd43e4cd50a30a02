"""Reusable scratch state shared by the queries on one tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .definitions import MAX_NODES_IN_BLOCK, NodeSubtreeInfo
from .morton_code import MortonCode
from .stack import Stack

_MAX_NODE_COUNT = 0xFFFF


@dataclass
class SequentialScanResult:
    """Result buffers of a sequential scan over the nodes of one block."""

    child_preorder: int = 0
    node_relative_depth: int = 0
    subtrees_count_map: List[int] = field(default_factory=list)
    relative_depth_map: List[int] = field(default_factory=list)

    @classmethod
    def for_max_nodes(cls, max_nodes_count: int) -> "SequentialScanResult":
        """Buffers sized to the power of two at or above ``max_nodes_count``."""
        if max_nodes_count < 1:
            raise ValueError("max_nodes_count must be at least 1")
        size = 1 << (max_nodes_count - 1).bit_length()
        return cls(
            subtrees_count_map=[0] * size,
            relative_depth_map=[0] * size,
        )


def _check_max_nodes(max_nodes_count: int) -> None:
    if not 1 <= max_nodes_count <= _MAX_NODE_COUNT:
        raise ValueError(
            f"max_nodes_count must be between 1 and {_MAX_NODE_COUNT}, got {max_nodes_count}"
        )


class QueriesState:
    """Morton code, traversal stacks and scan buffers for queries on a tree."""

    def __init__(
        self,
        tree_depth: int,
        max_nodes_count: int = MAX_NODES_IN_BLOCK,
        root: Optional[Any] = None,
    ) -> None:
        _check_max_nodes(max_nodes_count)
        self.treedepth = tree_depth
        self.max_nodes_count = max_nodes_count
        self.root = root
        self.mc = MortonCode(tree_depth)
        self.not_yet_traversed: Stack[int] = Stack(2 * tree_depth)
        self.subtrees_count: Stack[NodeSubtreeInfo] = Stack(2 * tree_depth)
        self.find_split_data = False
        self.sc_result = SequentialScanResult.for_max_nodes(max_nodes_count)

    def reset(self) -> None:
        """Return the scratch state to how it was right after construction."""
        self.mc = MortonCode(self.treedepth)
        self.not_yet_traversed.reset()
        self.subtrees_count.reset()
        self.find_split_data = False
        self.sc_result = SequentialScanResult.for_max_nodes(self.max_nodes_count)

    def __repr__(self) -> str:
        return (
            f"QueriesState(tree_depth={self.treedepth}, "
            f"max_nodes_count={self.max_nodes_count})"
        )


class DeletionState:
    """Scratch state for deleting a point, tied to a :class:`QueriesState`."""

    def __init__(self, qs: QueriesState) -> None:
        self.qs = qs
        self.mc = MortonCode(qs.treedepth)
        self.nodes_to_delete: Stack[int] = Stack(2 * qs.treedepth)