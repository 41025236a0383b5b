"""A small integer stack with a fixed capacity."""

from __future__ import annotations


class Stack:
    """Integer stack that holds at most nine elements.

    Pushing onto a full stack is silently ignored, and popping an empty
    stack yields 0.
    """

    capacity = 9

    def __init__(self) -> None:
        self._data: list[int] = []

    def push(self, k: int) -> None:
        """Push ``k`` unless the stack is already full."""
        if len(self._data) >= self.capacity:
            return
        self._data.append(k)

    def pop(self) -> int:
        """Remove and return the top element, or 0 when empty."""
        if not self._data:
            return 0
        return self._data.pop()

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return "".join(f"[{i}:{v}]" for i, v in enumerate(self._data))

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"