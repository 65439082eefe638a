"""Command line front end: pick or enter a board, search, and print the moves."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .solver import SearchMode, Solver, board_from_cells, cells_from_board, tree_diagram

PRESETS: tuple[tuple[str, ...], ...] = (
    ("5", "6", "2", "", "3", "1", "8", "7", "4"),
    ("1", "2", "3", "4", "5", "6", "7", "8", ""),
    ("3", "4", "7", "1", "", "2", "5", "8", "6"),
    ("", "1", "3", "8", "5", "4", "6", "7", "2"),
    ("1", "2", "3", "8", "4", "", "7", "6", "5"),
    ("8", "7", "6", "5", "4", "3", "2", "1", ""),
    ("2", "4", "5", "1", "8", "", "7", "6", "3"),
    ("2", "3", "4", "", "1", "5", "7", "8", "6"),
)

WRONG_INPUT_MESSAGE = (
    "Your inputs are wrong and Puzzle fills and solves itself Automatically:)"
)

DEFAULT_LIMITS = {SearchMode.LEVEL: 150000, SearchMode.DEPTH: 20}

_BLANK_MARKS = ("", "_", ".")


def preset(index: int) -> str:
    """One of the built-in boards as a state string; the index wraps around."""
    return board_from_cells(PRESETS[index % len(PRESETS)])


def format_board(state: str) -> str:
    """Three text rows for a board, the blank cell shown as an underscore."""
    cells = [cell or "_" for cell in cells_from_board(state)]
    rows = (cells[start : start + 3] for start in (0, 3, 6))
    return "\n".join(" ".join(row) for row in rows)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eightpuzzle",
        description="Solve the 8-puzzle by breadth-first or depth-first search.",
    )
    parser.add_argument(
        "cells",
        nargs="*",
        help="nine cell values row by row; use _ or . (or an empty string) for the blank",
    )
    parser.add_argument(
        "--preset",
        type=int,
        default=None,
        help="use one of the built-in boards instead of entering cells",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SearchMode],
        default=SearchMode.LEVEL.value,
        help="level: breadth-first with a node limit; depth: depth-first with a depth limit",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="maximum tree size (level) or tree height (depth)",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="also print the search tree",
    )
    return parser


def _start_state(args: argparse.Namespace) -> str:
    if args.preset is not None:
        return preset(args.preset)
    if not args.cells:
        return preset(0)
    if len(args.cells) != 9:
        raise ValueError(f"expected 9 cells, got {len(args.cells)}")
    cells = ["" if cell in _BLANK_MARKS else cell for cell in args.cells]
    if "" not in cells:
        print(WRONG_INPUT_MESSAGE, file=sys.stderr)
        return preset(0)
    return board_from_cells(cells)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver from the command line and print the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    mode = SearchMode(args.mode)
    limit = args.limit if args.limit is not None else DEFAULT_LIMITS[mode]

    try:
        start = _start_state(args)
        result = Solver(start).solve(mode, limit)
    except ValueError as error:
        print(f"eightpuzzle: error: {error}", file=sys.stderr)
        return 2

    if result.solved:
        print("Solution found:")
    else:
        print("No solution within the limit; nearest state reached:")
    for step, state in enumerate(result.path):
        print()
        print(f"Step {step}:")
        print(format_board(state))
    print()
    print(f"Steps: {result.steps}")
    print(f"Nodes: {result.node_count}")
    print(f"BST levels: {result.bst_height}")

    if args.tree:
        print()
        print("\n".join(tree_diagram(result.root)))
    return 0


if __name__ == "__main__":
    sys.exit(main())