"""Pattern search, N-queens and the travelling salesman problem."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "MAX_CITIES",
    "find_pattern",
    "solve_n_queens",
    "format_board",
    "shortest_tour_length",
    "main",
]

MAX_CITIES = 16


def find_pattern(sequence: Sequence[int], pattern: Sequence[int]) -> int | None:
    """Index of the first occurrence of ``pattern`` in ``sequence``, or None."""
    seq, pat = list(sequence), list(pattern)
    width = len(pat)
    for start in range(len(seq) - width + 1):
        if seq[start : start + width] == pat:
            return start
    return None


def _is_safe(board: list[int], col: int) -> bool:
    row = len(board)
    return all(
        placed != col and abs(placed - col) != row - placed_row
        for placed_row, placed in enumerate(board)
    )


def solve_n_queens(n: int) -> list[int] | None:
    """First placement of ``n`` non-attacking queens, found by backtracking.

    The result gives the queen's column for each row, or None if there is
    no placement.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board: list[int] = []

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if _is_safe(board, col):
                board.append(col)
                if place(row + 1):
                    return True
                board.pop()
        return False

    return board if place(0) else None


def format_board(board: Sequence[int]) -> str:
    """Draw a queen placement with ``Q`` for queens and ``.`` for empty squares."""
    n = len(board)
    return "\n".join(
        "".join("Q " if col == queen else ". " for col in range(n)) for queen in board
    )


def shortest_tour_length(distances: Sequence[Sequence[int]]) -> int:
    """Length of the shortest tour from city 0 through every city and back."""
    matrix = [list(row) for row in distances]
    n = len(matrix)
    if n == 0:
        raise ValueError("at least one city is required")
    if any(len(row) != n for row in matrix):
        raise ValueError("distance matrix must be square")
    if n > MAX_CITIES:
        raise ValueError(f"at most {MAX_CITIES} cities are supported")
    everything = (1 << n) - 1

    @lru_cache(maxsize=None)
    def best(visited: int, position: int) -> int:
        if visited == everything:
            return matrix[position][0]
        return min(
            matrix[position][city] + best(visited | 1 << city, city)
            for city in range(n)
            if not visited & (1 << city)
        )

    return best(1, 0)


def _run_queens(args: argparse.Namespace) -> None:
    board = solve_n_queens(args.n)
    if board is None:
        print("Solution does not exist.")
    else:
        print(format_board(board))


def _run_match(args: argparse.Namespace) -> None:
    index = find_pattern(args.sequence, args.pattern)
    if index is None:
        print("pattern not matched")
    else:
        print("pattern matched")
        print(f"index :{index + 1}")


def _run_tsp(args: argparse.Namespace) -> None:
    values = [int(token) for token in sys.stdin.read().split()]
    if not values:
        raise ValueError("not enough input")
    n, cells = values[0], values[1:]
    if n < 0 or len(cells) < n * n:
        raise ValueError("not enough input")
    matrix = [cells[row * n : (row + 1) * n] for row in range(n)]
    print(f"The shortest path length is: {shortest_tour_length(matrix)}")


def main(argv: list[str] | None = None) -> int:
    """Solve one of the combinatorial problems from the command line."""
    parser = argparse.ArgumentParser(prog="algokit-problem")
    commands = parser.add_subparsers(dest="command", required=True)

    queens = commands.add_parser("queens", help="place N non-attacking queens")
    queens.add_argument("n", type=int)
    queens.set_defaults(run=_run_queens)

    match = commands.add_parser("match", help="find a pattern in a sequence")
    match.add_argument("--sequence", nargs="*", type=int, default=[])
    match.add_argument("--pattern", nargs="*", type=int, default=[])
    match.set_defaults(run=_run_match)

    tsp = commands.add_parser(
        "tsp", help="read N and an N x N distance matrix from standard input"
    )
    tsp.set_defaults(run=_run_tsp)

    args = parser.parse_args(argv)
    try:
        args.run(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0