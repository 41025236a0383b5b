import io
import sys

from gopractice.wc import Counts, count, main


def test_count_simple_text():
    data = b"one two\nthree\n"
    assert count(io.BytesIO(data)) == Counts(len(data), 3, 2)


def test_count_empty():
    assert count(io.BytesIO(b"")) == Counts(0, 0, 0)


def test_unterminated_line_not_counted():
    assert count(io.BytesIO(b"a b\nc d")) == count(io.BytesIO(b"a b\n"))


def test_chars_are_bytes():
    data = "é ü\n".encode()
    result = count(io.BytesIO(data))
    assert result.chars == len(data)
    assert result.lines == 1


def test_main_prints_counts(monkeypatch, capsys):
    data = b"hi there\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == [str(len(data)), "2", "1"]