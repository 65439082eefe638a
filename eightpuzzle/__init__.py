"""Solve the 8-puzzle by breadth-first or depth-limited tree search."""

__version__ = "0.1.0"
__all__ = ["bst", "tree", "solver", "cli"]