"""Building blocks for dynamic k2-trees: Morton codes, stacks, vectors and query state."""

__version__ = "0.1.0"
__all__ = ["definitions", "morton_code", "stack", "vector", "queries_state"]