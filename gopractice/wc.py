"""Count bytes, words and lines of standard input."""

from __future__ import annotations

import sys
from typing import BinaryIO, NamedTuple


class Counts(NamedTuple):
    chars: int
    words: int
    lines: int


def count(stream: BinaryIO) -> Counts:
    """Count bytes, words and newline-terminated lines in ``stream``.

    Counting stops at the end of the last complete line.
    """
    chars = words = lines = 0
    for line in stream:
        if not line.endswith(b"\n"):
            break
        chars += len(line)
        words += len(line.decode("utf-8", errors="replace").split())
        lines += 1
    return Counts(chars, words, lines)


def main(argv: list[str] | None = None) -> int:
    counts = count(sys.stdin.buffer)
    print(f"{counts.chars} {counts.words} {counts.lines}")
    return 0