# k2dyn

Building blocks for a dynamic k2-tree, a compact structure for sparse binary
matrices such as graph adjacency matrices. A cell `(col, row)` of a
`2**treedepth` square matrix is addressed by its Morton (Z-order) code: one
quadrant number, 0 to 3, per level of the tree.

## Modules

- `k2dyn.definitions`
  - `Pair2D(col, row)`: a frozen, ordered coordinate pair.
  - `CoordType` (`COLUMN`, `ROW`) and `SipPoint(coord, coord_type)`.
  - `NodeSubtreeInfo(node_index, node_relative_depth, subtree_size)`.
  - `ErrorCode`: the numeric failure codes; `K2TreeError(code, message)`
    is the exception that carries one (`err.code`, `err.message`).
  - `ceil_of_div(dividend, divisor)` and `popcount(value)` (set bits in
    the low 32 bits).
  - Constants `MAX_NODES_IN_BLOCK` (256) and `STARTING_BLOCK_CAPACITY` (64).
- `k2dyn.morton_code.MortonCode`
  - `MortonCode(treedepth)` starts with every level at quadrant 0.
  - `MortonCode.from_coordinates(col, row, treedepth)` and
    `set_coordinates(col, row)` encode a cell; depths above 64 raise
    `K2TreeError` with `ErrorCode.NOT_IMPLEMENTED`, negative coordinates
    raise `ValueError`.
  - `to_coordinates(treedepth=None)` decodes the first `treedepth` levels
    (all by default) into a `Pair2D`; a quadrant outside 0–3 raises
    `K2TreeError` with `ErrorCode.INVALID_MC_VALUE`.
  - `add_element(position, code)`, `code_at(position)`, `leaf_child()`,
    `len()`, iteration and equality.
- `k2dyn.stack.Stack`: a LIFO stack with `push`, `pop`, `top`, `reset`,
  `is_empty`, `len()`; iteration runs from the top down. `pop` and `top` on
  an empty stack raise `IndexError`.
- `k2dyn.vector.Vector`: a growable sequence. `insert_at(element, position)`
  shifts later elements right, or, past the end, pads the gap with `fill`
  (by default `Pair2D(0, 0)`). Indexing outside the vector raises
  `IndexError`; a vector compares equal to a list or tuple of the same items.
- `k2dyn.queries_state`
  - `QueriesState(tree_depth, max_nodes_count=256, root=None)`: holds a
    `MortonCode` (`mc`), the stacks `not_yet_traversed` and
    `subtrees_count`, the flag `find_split_data` and a
    `SequentialScanResult` (`sc_result`). `max_nodes_count` must lie in
    1..65535. `reset()` restores the state as constructed.
  - `SequentialScanResult.for_max_nodes(n)`: scan maps sized to the power of
    two at or above `n`.
  - `DeletionState(qs)`: its own `MortonCode` and a `nodes_to_delete` stack
    for the tree depth of `qs`.

## Example

```python
from k2dyn.morton_code import MortonCode

mc = MortonCode.from_coordinates(3, 15, treedepth=5)
print(list(mc))             # [0, 1, 1, 3, 3]
print(mc.leaf_child())      # 3
print(mc.to_coordinates())  # Pair2D(col=3, row=15)

from k2dyn.queries_state import QueriesState

qs = QueriesState(tree_depth=5, max_nodes_count=256)
qs.mc.set_coordinates(30, 31)
```

## What this package does not do

It holds no tree itself: there are no blocks or nodes, and no operations to
insert, delete, look up, scan or report points. `QueriesState.root` is only
stored, whatever object is given. There is no command-line tool and no
storage on disk.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```