# gopractice

A collection of small, classic programming exercises packaged as a library
and a set of command-line tools. Each module is short and self-contained,
which makes it useful for study, experimentation and as ready-made test
material.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library

```python
from gopractice.stack import Stack
from gopractice.even import even, odd
from gopractice.linkedlist import LinkedList, Node, EmptyListError
from gopractice.sequences import (
    average, bubblesort, fibonacci, fibonacci_stream, fizzbuzz,
    reverse_string, rune_count, replace_runes, uniq, mult2, map_values,
)
from gopractice.queens import solve_queens, format_board
from gopractice.rpn import Op, rpn_calc, rpn_str, solve
from gopractice.calc import Calculator
from gopractice.cat import cat
from gopractice.wc import count
from gopractice.proc import parse_ps, format_children
from gopractice.draw import draw_square, draw_squares
```

What is inside:

- `stack.Stack` – an integer stack holding at most nine elements. Pushing
  onto a full stack is ignored and popping an empty one returns `0`.
  `len()` gives its size and `str()` renders it as `[0:25][1:14]`.
- `even` – `even(i)` and `odd(i)`.
- `linkedlist.LinkedList` – a doubly linked list of `Node`s with `push`
  (returns the list, so calls chain), `pop` from the tail (raising
  `EmptyListError` when empty), `front`, iteration over values and `len()`.
- `sequences`
  - `average(xs)` – the mean, or `0.0` for an empty sequence;
  - `bubblesort(n)` – sorts a list in place;
  - `fibonacci(value)` – the first `value` terms starting `1, 1`
    (`value` must be at least 2, otherwise `ValueError`);
  - `fibonacci_stream()` – an endless generator `0, 1, 1, 2, ...`;
  - `fizzbuzz(limit=100)` – FizzBuzz lines for `1` up to `limit - 1`;
  - `reverse_string(s)`, `rune_count(s)` (bytes are decoded as UTF-8),
    `replace_runes(s, start, replacement)`;
  - `uniq(items)` – collapses runs of equal adjacent items;
  - `mult2(value)` – doubles integers, repeats strings four times, passes
    anything else through; `map_values(items, func)` applies a function to
    every item.
- `queens` – `solve_queens(size=8)` yields every placement of non-attacking
  queens as a tuple of row numbers per column; `format_board` renders one
  with `.` and `Q`.
- `rpn` – `rpn_calc` evaluates a postfix formula of integers and `Op`
  members (`ADD`, `SUB`, `MUL`, `DIV`), rejecting negative intermediate
  results, division by zero and inexact division with `InvalidExpression`;
  `rpn_str` renders a formula in infix form; `solve(numbers, magic)` yields
  every formula of at most eleven tokens, using each number at most once,
  that evaluates to `magic`.
- `calc.Calculator` – a line-oriented postfix calculator: digits build a
  number, a space pushes it, `+`, `*` and `-` produce results, `q` stops it.
  `feed(line)` returns the results produced by one line.
- `cat.cat(stream, out, number=False)` – copies the complete lines of a
  binary stream, optionally numbered; a final line without a newline is
  not copied.
- `wc.count(stream)` – counts bytes, words and lines of the complete lines
  of a binary stream.
- `proc` – `parse_ps` maps parent pids to child pids from `ps` output;
  `format_children` describes each parent, ordered by pid.
- `draw` – `draw_square` calls a callback for every point on a square's
  outline; `draw_squares` returns a Pillow image with a thick red frame and
  a thin blue one.

## Commands

| Command              | What it does                                                       |
|----------------------|--------------------------------------------------------------------|
| `gopractice-even`    | Reports whether a number (default 5) is even                       |
| `gopractice-list`    | Builds a linked list of 1, 2, 4, prints it, then pops it empty     |
| `gopractice-queens`  | Prints every solution of the n-queens puzzle (default size 8)      |
| `gopractice-rpn`     | Prints formulas over a set of numbers that equal a target          |
| `gopractice-calc`    | Postfix calculator reading from standard input                     |
| `gopractice-cat`     | Prints files or standard input; `-n` numbers the lines             |
| `gopractice-wc`      | Prints byte, word and line counts of standard input                |
| `gopractice-proc`    | Lists each parent process with its children (runs `ps`)            |
| `gopractice-draw`    | Writes two framed squares to a PNG file (default `squares.png`)    |

`gopractice-rpn` uses the numbers 1, 6, 7, 8, 8 and 75 unless others are
given with `-n`/`--numbers`; it prints nothing and exits with status 1 when
the target is not an integer.

Examples:

```
gopractice-cat -n notes.txt
printf 'one two\nthree\n' | gopractice-wc
gopractice-rpn 977
gopractice-rpn 24 -n 3 4 5 6
echo '3 4 +' | gopractice-calc
gopractice-draw frames.png
```

## What it does not do

The package has no network services: there is no echo server and no
finger server, and nothing in it listens on a socket.