"""Breadth-first and depth-first search over 8-puzzle states."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from .bst import BST, BSTNode, _leading_int
from .tree import TreeNode

GOAL = "123804765"
BLANK = "0"

# Where each tile sits in the goal board, as (row, column).
_GOAL_COORDS = {tile: divmod(GOAL.index(tile), 3) for tile in GOAL}


class Direction(Enum):
    """A move of the blank cell, in the order the search tries them."""

    RIGHT = "Right"
    LEFT = "Left"
    UP = "Up"
    DOWN = "Down"

    @property
    def attribute(self) -> str:
        """Name of the TreeNode link that holds the successor for this move."""
        return self.value.lower()

    @property
    def opposite(self) -> "Direction":
        """The move that undoes this one."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# For each move: the blank positions where it is impossible, and the offset
# of the cell the blank swaps with.
_MOVES = {
    Direction.RIGHT: ((2, 5, 8), 1),
    Direction.LEFT: ((0, 3, 6), -1),
    Direction.UP: ((0, 1, 2), -3),
    Direction.DOWN: ((6, 7, 8), 3),
}


class SearchMode(Enum):
    """Strategy used to explore the state tree."""

    LEVEL = "level"
    DEPTH = "depth"


def _check_state(state: str) -> None:
    if len(state) != 9:
        raise ValueError(f"a board has 9 cells, got {len(state)}: {state!r}")
    if BLANK not in state:
        raise ValueError(f"board has no blank cell: {state!r}")


def board_from_cells(cells: Sequence[str]) -> str:
    """Join nine cell texts into a state string, the first empty cell as blank."""
    cells = list(cells)
    if len(cells) != 9:
        raise ValueError(f"expected 9 cells, got {len(cells)}")
    try:
        blank = cells.index("")
    except ValueError:
        raise ValueError("no empty cell to hold the blank") from None
    cells[blank] = BLANK
    return "".join(cells)


def cells_from_board(state: str) -> list[str]:
    """Split a state string into nine cell texts, the blank shown as empty."""
    cells = [state[index : index + 1] for index in range(9)]
    if BLANK in cells:
        cells[cells.index(BLANK)] = ""
    return cells


def _coords(position: int) -> tuple[int, int]:
    if 0 <= position <= 8:
        return divmod(position, 3)
    return (-1, -1)


def manhattan_distance(state: str) -> int:
    """Sum over every cell, blank included, of its distance to its goal cell."""
    total = 0
    for tile, (goal_row, goal_col) in _GOAL_COORDS.items():
        row, col = _coords(state.find(tile))
        total += abs(row - goal_row) + abs(col - goal_col)
    return total


def is_goal(state: str) -> bool:
    """Whether ``state`` is the solved board."""
    return state == GOAL


def move(state: str, direction: Direction) -> Optional[str]:
    """The state after moving the blank, or None if it would leave the board."""
    _check_state(state)
    blocked, offset = _MOVES[Direction(direction)]
    position = state.index(BLANK)
    if position in blocked:
        return None
    cells = list(state)
    other = position + offset
    cells[position], cells[other] = cells[other], cells[position]
    return "".join(cells)


def tree_diagram(root: TreeNode) -> list[str]:
    """Indented outline of a search tree, one line per node."""
    lines = ["Tree Diagram"]
    pending: list[tuple[str, TreeNode, int]] = [("Root", root, 1)]
    while pending:
        label, node, level = pending.pop()
        lines.append(f"{'  ' * level}{label}: {_leading_int(node.value)}")
        children: Iterable[tuple[str, TreeNode]] = reversed(node.children())
        pending.extend((name, child, level + 1) for name, child in children)
    return lines


@dataclass
class SearchResult:
    """Outcome of one search: the tree built and the best node reached."""

    root: TreeNode
    target: Optional[TreeNode]
    nearest: TreeNode
    node_count: int
    bst_height: int

    @property
    def solved(self) -> bool:
        """Whether the goal state was reached."""
        return self.target is not None

    @property
    def final(self) -> TreeNode:
        """The goal node if found, otherwise the node closest to the goal."""
        return self.target if self.target is not None else self.nearest

    @property
    def steps(self) -> int:
        """Number of moves from the start to the final node."""
        return self.final.depth()

    @property
    def path(self) -> list[str]:
        """States from the start to the final node."""
        return self.final.path_from_root()


class Solver:
    """Searches for the goal from one start state, with a fresh tree per search."""

    def __init__(self, start: str) -> None:
        _check_state(start)
        self.start = start
        self._reset()

    def _reset(self) -> None:
        self._root = TreeNode(self.start, distance=manhattan_distance(self.start))
        self._seen = BST(BSTNode(self.start))
        self._nearest = self._root
        self._min_distance = self._root.distance
        self._count = 1

    def _successor(self, node: TreeNode, direction: Direction) -> Optional[str]:
        state = move(node.value, direction)
        if state is None or not self._seen.add(state):
            return None
        return state

    def _attach(self, node: TreeNode, direction: Direction, state: str) -> TreeNode:
        child = TreeNode(state, distance=manhattan_distance(state), father=node)
        if child.distance != 0 and self._min_distance > child.distance:
            self._min_distance = child.distance
            self._nearest = child
        setattr(node, direction.attribute, child)
        self._count += 1
        return child

    def _result(self, target: Optional[TreeNode]) -> SearchResult:
        return SearchResult(
            root=self._root,
            target=target,
            nearest=self._nearest,
            node_count=self._count,
            bst_height=self._seen.height(),
        )

    def level_order(self, max_nodes: int) -> SearchResult:
        """Breadth-first search building at most ``max_nodes`` tree nodes."""
        self._reset()
        queue = deque([self._root])
        node: Optional[TreeNode] = self._root
        while node is not None and not is_goal(node.value) and self._count < max_nodes:
            for direction in Direction:
                state = self._successor(node, direction)
                if state is None or self._count >= max_nodes:
                    continue
                child = self._attach(node, direction, state)
                queue.append(child)
                if is_goal(child.value):
                    return self._result(child)
            node = queue.popleft() if queue else None
        target = node if node is not None and is_goal(node.value) else None
        return self._result(target)

    def depth_order(self, max_depth: int) -> SearchResult:
        """Depth-first search going at most ``max_depth`` moves from the start."""
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        self._reset()
        root = self._root
        if is_goal(root.value):
            return self._result(root)
        target: Optional[TreeNode] = None
        if max_depth == 0:
            return self._result(None)
        stack = [(root, max_depth, iter(Direction))]
        while stack:
            node, remaining, directions = stack[-1]
            direction = next(directions, None)
            if direction is None:
                stack.pop()
                continue
            state = self._successor(node, direction)
            if state is None:
                continue
            child = self._attach(node, direction, state)
            if is_goal(child.value):
                target = child
            elif remaining > 1:
                stack.append((child, remaining - 1, iter(Direction)))
        return self._result(target)

    def solve(self, mode: SearchMode, limit: int) -> SearchResult:
        """Run the search named by ``mode`` with its node or depth limit."""
        if SearchMode(mode) is SearchMode.LEVEL:
            return self.level_order(limit)
        return self.depth_order(limit)