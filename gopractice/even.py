"""Parity helpers and a small command that reports whether a number is even."""

from __future__ import annotations

import argparse


def even(i: int) -> bool:
    """Return True when ``i`` is even."""
    return i % 2 == 0


def odd(i: int) -> bool:
    """Return True when ``i`` is odd."""
    return i % 2 == 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tell whether a number is even.")
    parser.add_argument("number", nargs="?", type=int, default=5)
    args = parser.parse_args(argv)
    print(f"Is {args.number} even? {str(even(args.number)).lower()}")
    return 0