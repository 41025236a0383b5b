"""A line-oriented postfix calculator."""

from __future__ import annotations

import sys

from gopractice.stack import Stack


class Calculator:
    """Postfix calculator fed one line of input at a time.

    Digits build a number, a space pushes it, and ``+``, ``*`` and ``-``
    pop two values and produce a result. ``q`` stops the calculator.
    """

    def __init__(self) -> None:
        self.stack = Stack()
        self.stopped = False

    def feed(self, line: str) -> list[int]:
        """Process ``line`` and return the results it produced."""
        results: list[int] = []
        if self.stopped:
            return results
        token = ""
        for c in line:
            if "0" <= c <= "9":
                token += c
            elif c == " ":
                self.stack.push(int(token) if token else 0)
                token = ""
            elif c == "+":
                results.append(self.stack.pop() + self.stack.pop())
            elif c == "*":
                results.append(self.stack.pop() * self.stack.pop())
            elif c == "-":
                p = self.stack.pop()
                q = self.stack.pop()
                results.append(q - p)
            elif c == "q":
                self.stopped = True
                break
        return results


def main(argv: list[str] | None = None) -> int:
    calculator = Calculator()
    for line in sys.stdin:
        if not line.endswith("\n"):
            break
        for result in calculator.feed(line):
            print(result)
        if calculator.stopped:
            break
    return 0