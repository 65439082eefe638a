"""Binary search tree of puzzle states, keyed on their numeric value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows.

    Leading whitespace and a single sign are accepted; text that does not
    start with a number reads as zero.
    """
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not char.isdigit():
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


@dataclass(eq=False)
class BSTNode:
    """A node holding one state string and its two subtrees."""

    value: str
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None

    @property
    def key(self) -> int:
        """The numeric key the tree orders this node by."""
        return _leading_int(self.value)


class BST:
    """Set of state strings that remembers which states were already seen."""

    def __init__(self, root: Optional[BSTNode] = None) -> None:
        self.root = root

    def add(self, value: str) -> bool:
        """Insert ``value``; return False if the exact string is already held."""
        key = _leading_int(value)
        parent: Optional[BSTNode] = None
        node = self.root
        while node is not None:
            parent = node
            if value == node.value:
                return False
            node = node.left if key < node.key else node.right

        new_node = BSTNode(value)
        if parent is None:
            self.root = new_node
        elif parent.key < key:
            parent.right = new_node
        else:
            parent.left = new_node
        return True

    def height(self) -> int:
        """Number of levels in the tree; an empty tree has none."""
        return _height(self.root)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        key = _leading_int(value)
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __iter__(self) -> Iterator[str]:
        """Yield the stored values in in-order sequence."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _height(node: Optional[BSTNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.right), _height(node.left))