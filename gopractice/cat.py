"""Concatenate files to standard output, optionally numbering lines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO


def _complete_lines(stream: Iterable[bytes]) -> Iterator[bytes]:
    # A trailing line without a newline is not printed.
    for line in stream:
        if not line.endswith(b"\n"):
            return
        yield line


def cat(stream: BinaryIO, out: BinaryIO, number: bool = False) -> None:
    """Copy the lines of ``stream`` to ``out``, numbered when ``number`` is set."""
    for i, line in enumerate(_complete_lines(stream), start=1):
        if number:
            out.write(f"{i:5d}  ".encode() + line)
        else:
            out.write(line)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Concatenate files.")
    parser.add_argument("-n", dest="number", action="store_true", help="number each line")
    parser.add_argument("files", nargs="*")
    args = parser.parse_args(argv)
    out = sys.stdout.buffer
    if not args.files:
        cat(sys.stdin.buffer, out, args.number)
    for name in args.files:
        try:
            handle = open(name, "rb")
        except OSError as err:
            out.flush()
            print(f"{parser.prog}: error reading from {name}: {err}", file=sys.stderr)
            continue
        with handle:
            cat(handle, out, args.number)
    out.flush()
    return 0