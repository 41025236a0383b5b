"""Reverse Polish notation evaluation and a search for formulas that hit a target."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum
from typing import Union


class Op(IntEnum):
    """Arithmetic operators that may appear in a formula."""

    ADD = 1000
    SUB = 2000
    MUL = 3000
    DIV = 4000

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Op.ADD: "+", Op.SUB: "-", Op.MUL: "*", Op.DIV: "/"}

Token = Union[int, Op]

MAX_LENGTH = 11
DEFAULT_NUMBERS = (1, 6, 7, 8, 8, 75)


class InvalidExpression(ValueError):
    """Raised when a formula cannot be evaluated."""


def _apply(stack: list[int], token: Token) -> list[int]:
    """Return the stack that results from feeding ``token`` to ``stack``."""
    if not isinstance(token, Op):
        return [*stack, token]
    if len(stack) < 2:
        raise InvalidExpression("not enough operands")
    *rest, b, a = stack
    if token is Op.ADD:
        result = b + a
    elif token is Op.SUB:
        if b - a < 0:
            raise InvalidExpression("negative intermediate result")
        result = b - a
    elif token is Op.MUL:
        result = b * a
    else:
        if a == 0:
            raise InvalidExpression("division by zero")
        if b % a != 0:
            raise InvalidExpression("division leaves a remainder")
        result = b // a
    return [*rest, result]


def rpn_calc(tokens: Iterable[Token]) -> int:
    """Evaluate a formula in postfix order.

    Negative intermediate results and inexact divisions are rejected.
    """
    stack: list[int] = []
    for token in tokens:
        stack = _apply(stack, token)
    if len(stack) != 1:
        raise InvalidExpression("formula does not reduce to a single value")
    return stack[0]


def rpn_str(tokens: Sequence[Token]) -> str:
    """Render a postfix formula in infix notation."""
    tokens = list(tokens)
    last = len(tokens) - 1
    parts: list[str] = []
    for k, token in enumerate(tokens):
        if isinstance(token, Op):
            if len(parts) < 2:
                raise InvalidExpression("not enough operands")
            a = parts.pop()
            b = parts.pop()
            expr = f"{b}{token.symbol}{a}"
            parts.append(expr if k == last else f"({expr})")
        else:
            parts.append(str(token))
    return "".join(parts)


def solve(numbers: Iterable[int], magic: int) -> Iterator[tuple[Token, ...]]:
    """Yield every postfix formula that evaluates to ``magic``.

    Each number is used at most once, operators any number of times, and a
    formula holds at most ``MAX_LENGTH`` tokens.
    """
    numbers = list(numbers)
    used = [False] * len(numbers)
    form: list[Token] = []

    def candidates() -> Iterator[tuple[int | None, Token]]:
        for index, number in enumerate(numbers):
            if not used[index]:
                yield index, number
        for op in Op:
            yield None, op

    def search(stack: list[int]) -> Iterator[tuple[Token, ...]]:
        if len(form) >= MAX_LENGTH:
            return
        for index, token in candidates():
            try:
                new_stack = _apply(stack, token)
            except InvalidExpression:
                # Every longer formula with this prefix fails at the same token.
                continue
            form.append(token)
            if index is not None:
                used[index] = True
            if len(new_stack) == 1 and new_stack[0] == magic:
                yield tuple(form)
            if len(new_stack) - 1 <= MAX_LENGTH - len(form):
                yield from search(new_stack)
            form.pop()
            if index is not None:
                used[index] = False

    yield from search([])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find formulas built from a set of numbers that equal a target."
    )
    parser.add_argument("magic", nargs="?", default="")
    parser.add_argument(
        "-n", "--numbers", nargs="+", type=int, default=list(DEFAULT_NUMBERS)
    )
    args = parser.parse_args(argv)
    try:
        magic = int(args.magic)
    except ValueError:
        return 1
    for found, form in enumerate(solve(args.numbers, magic), start=1):
        print(f"{rpn_str(form)} = {magic}  #{found}")
    return 0