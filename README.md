# eightpuzzle

A solver for the classic 8-puzzle. Starting from a board, it grows a tree of
reachable positions by moving the blank right, left, up or down. The tree is
grown either level by level (breadth-first, bounded by a number of nodes) or
depth first (bounded by a number of moves from the start). Positions already
seen are skipped. The goal board is

```
1 2 3
8 _ 4
7 6 5
```

When the goal is reached, the moves leading to it are reported; otherwise the
position closest to the goal by Manhattan distance is reported instead.

## Installation

```
pip install .
```

## Command line

```
eightpuzzle --help
```

Give the board as nine cells in row order, marking the blank with `_`, `.`
or an empty string:

```
eightpuzzle 5 6 2 _ 3 1 8 7 4
eightpuzzle --preset 4 --mode depth --limit 5 --tree
```

Options:

- `--preset N` uses one of the eight built-in boards instead of entered cells;
  the number wraps around.
- `--mode level` (the default) runs the breadth-first search; `--mode depth`
  runs the depth-first search.
- `--limit N` sets the largest tree size for `level` (default 150000) or the
  greatest depth for `depth` (default 20).
- `--tree` also prints the explored tree as an indented outline.

With no cells, the first preset is used. If nine cells are given but none of
them is a blank, a notice is printed on standard error and the first preset is
solved instead. Any other wrong board (a wrong number of cells, for example)
is reported on standard error and the command exits with status 2.

The command prints each board on the way from the start to the goal (or to
the nearest position found), then the number of steps, the number of tree
nodes created, and the number of levels in the binary search tree that records
the positions seen.

## Library use

```python
from eightpuzzle.solver import Solver, SearchMode, manhattan_distance

result = Solver("562031874").solve(SearchMode.LEVEL, 1000)
print(result.solved, result.steps, result.node_count, result.bst_height)
for state in result.path:
    print(state)
```

States are nine-character strings read row by row, with `0` for the blank.
`Solver` also has `level_order(max_nodes)` and `depth_order(max_depth)`; a
negative depth raises `ValueError`. A `SearchResult` holds the tree's `root`,
the goal node as `target` (or `None`), the `nearest` node, and the `final`
node, `path` and `steps` derived from them.

`eightpuzzle.solver` also offers `board_from_cells`, `cells_from_board`,
`manhattan_distance`, `is_goal`, `move` with the `Direction` enum, and
`tree_diagram`, which renders a search tree as a list of text lines.
`eightpuzzle.tree` holds the `TreeNode` class and `eightpuzzle.bst` the `BST`
of seen positions. `eightpuzzle.cli` provides `preset` and `format_board`.

## What it does not do

There is no graphical window: boards are entered and solutions shown as text
on the terminal, all at once rather than step by step with a delay.

## Running the tests

```
pip install .[test]
pytest
```