"""Show the children of each process, as reported by ps."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence

PS_COMMAND = ("ps", "-e", "-opid,ppid,comm")


def parse_ps(output: str) -> dict[int, list[int]]:
    """Map each parent pid to its child pids from ``ps -opid,ppid,...`` output."""
    children: dict[int, list[int]] = {}
    for line in output.split("\n")[1:]:
        if not line.strip():
            continue
        fields = line.split()
        pid, ppid = int(fields[0]), int(fields[1])
        children.setdefault(ppid, []).append(pid)
    return children


def format_children(children: Mapping[int, Sequence[int]]) -> list[str]:
    """Describe each parent and its children, ordered by parent pid."""
    lines = []
    for ppid in sorted(children):
        kids = children[ppid]
        listing = "[" + " ".join(str(k) for k in kids) + "]"
        suffix = "" if len(kids) == 1 else "ren"
        lines.append(f"Pid {ppid} has {len(kids)} child{suffix}: {listing}")
    return lines


def main(argv: list[str] | None = None) -> int:
    try:
        output = subprocess.run(
            list(PS_COMMAND), capture_output=True, text=True, check=False
        ).stdout
    except OSError:
        output = ""
    for line in format_children(parse_ps(output)):
        print(line)
    return 0