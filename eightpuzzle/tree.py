"""Nodes of the search tree built while exploring puzzle states."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A puzzle state with links to the state it came from and its successors."""

    value: str
    distance: int = 0
    father: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    left: Optional["TreeNode"] = field(default=None, repr=False)
    up: Optional["TreeNode"] = field(default=None, repr=False)
    down: Optional["TreeNode"] = field(default=None, repr=False)

    def children(self) -> list[tuple[str, "TreeNode"]]:
        """Existing successors as (move name, node), in right, left, up, down order."""
        moves = (
            ("Right", self.right),
            ("Left", self.left),
            ("Up", self.up),
            ("Down", self.down),
        )
        return [(name, child) for name, child in moves if child is not None]

    def path_from_root(self) -> list[str]:
        """States from the root of the tree down to this node."""
        path = []
        node: Optional[TreeNode] = self
        while node is not None:
            path.append(node.value)
            node = node.father
        path.reverse()
        return path

    def depth(self) -> int:
        """Number of moves between the root and this node."""
        steps = 0
        node = self.father
        while node is not None:
            steps += 1
            node = node.father
        return steps