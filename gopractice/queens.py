"""Solutions of the n-queens puzzle."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence


def solve_queens(size: int = 8) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``size`` non-attacking queens.

    A placement is a tuple whose entry at position ``x`` is the row of the
    queen in column ``x``.
    """
    if size < 1:
        raise ValueError("size must be positive")
    rows: set[int] = set()
    left: set[int] = set()
    right: set[int] = set()
    placement: list[int] = []

    def place(x: int) -> Iterator[tuple[int, ...]]:
        if x == size:
            yield tuple(placement)
            return
        for y in range(size):
            if y in rows or (x - y) in left or (x + y) in right:
                continue
            rows.add(y)
            left.add(x - y)
            right.add(x + y)
            placement.append(y)
            yield from place(x + 1)
            placement.pop()
            rows.discard(y)
            left.discard(x - y)
            right.discard(x + y)

    yield from place(0)


def format_board(board: Sequence[int]) -> str:
    """Render a placement as rows of '.' and 'Q', one line per row."""
    size = len(board)
    return "".join(
        "".join("Q" if board[col] == row else "." for col in range(size)) + "\n"
        for row in range(size)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print n-queens solutions.")
    parser.add_argument("size", nargs="?", type=int, default=8)
    args = parser.parse_args(argv)
    for board in solve_queens(args.size):
        print(f"Solution found\n{format_board(board)}", end="")
    return 0