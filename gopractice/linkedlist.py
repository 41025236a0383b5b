"""A minimal doubly linked list of values."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class EmptyListError(Exception):
    """Raised when popping from an empty list."""

    def __init__(self, message: str = "List is empty") -> None:
        super().__init__(message)


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    value: Any
    prev: Node | None = field(default=None, repr=False)
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list supporting push and pop at the tail."""

    def __init__(self) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None

    def front(self) -> Node | None:
        """Return the first node, or None when empty."""
        return self.head

    def push(self, value: Any) -> LinkedList:
        """Append ``value`` at the tail and return the list."""
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
            node.prev = self.tail
        self.tail = node
        return self

    def pop(self) -> Any:
        """Remove and return the value at the tail."""
        if self.tail is None:
            raise EmptyListError()
        node = self.tail
        self.tail = node.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        node.prev = None
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Demonstrate the linked list.").parse_args(argv)
    items = LinkedList()
    items.push(1).push(2).push(4)
    for value in items:
        print(value)
    print()
    while True:
        try:
            print(items.pop())
        except EmptyListError:
            break
    return 0