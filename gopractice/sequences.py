"""Small sequence and string exercises."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any

FIZZ = 3
BUZZ = 5


def average(xs: Iterable[float]) -> float:
    """Return the mean of ``xs``, or 0 for an empty sequence."""
    values = list(xs)
    if not values:
        return 0.0
    return sum(values) / len(values)


def bubblesort(n: list) -> None:
    """Sort ``n`` in place by exchanging out-of-order pairs."""
    for i in range(len(n) - 1):
        for j in range(i + 1, len(n)):
            if n[j] < n[i]:
                n[i], n[j] = n[j], n[i]


def fibonacci(value: int) -> list[int]:
    """Return the first ``value`` Fibonacci numbers, starting 1, 1."""
    if value < 2:
        raise ValueError("value must be at least 2")
    terms = [1, 1]
    while len(terms) < value:
        terms.append(terms[-1] + terms[-2])
    return terms


def fibonacci_stream() -> Iterator[int]:
    """Yield the Fibonacci numbers 0, 1, 1, 2, ... without end."""
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def fizzbuzz(limit: int = 100) -> Iterator[str]:
    """Yield the FizzBuzz line for each number from 1 up to ``limit`` exclusive."""
    for i in range(1, limit):
        line = ""
        if i % FIZZ == 0:
            line += "Fizz"
        if i % BUZZ == 0:
            line += "Buzz"
        yield line or str(i)


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def rune_count(s: str | bytes) -> int:
    """Count the characters of ``s``; bytes are decoded as UTF-8 first."""
    if isinstance(s, (bytes, bytearray)):
        s = bytes(s).decode("utf-8", errors="replace")
    return len(s)


def replace_runes(s: str, start: int, replacement: str) -> str:
    """Overwrite characters of ``s`` from ``start`` with ``replacement``.

    Only as many characters as fit before the end of ``s`` are copied.
    """
    if not 0 <= start <= len(s):
        raise IndexError(f"start {start} out of range for length {len(s)}")
    n = min(len(replacement), len(s) - start)
    return s[:start] + replacement[:n] + s[start + n:]


def uniq(items: Iterable[Any]) -> list[Any]:
    """Collapse runs of equal adjacent items into one."""
    return [key for key, _ in itertools.groupby(items)]


def mult2(value: Any) -> Any:
    """Double integers, repeat strings four times, pass anything else through."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value * 2
    if isinstance(value, str):
        return value * 4
    return value


def map_values(items: Iterable[Any], func: Callable[[Any], Any]) -> list[Any]:
    """Apply ``func`` to every item and return the results as a list."""
    return [func(item) for item in items]