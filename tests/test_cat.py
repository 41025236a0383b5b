import io
import sys

from gopractice.cat import cat, main


def test_cat_copies_lines():
    data = b"alpha\nbeta\n"
    out = io.BytesIO()
    cat(io.BytesIO(data), out, False)
    assert out.getvalue() == data


def test_cat_numbers_lines():
    out = io.BytesIO()
    cat(io.BytesIO(b"a\nb\n"), out, True)
    assert out.getvalue() == b"    1  a\n    2  b\n"


def test_cat_drops_unterminated_last_line():
    out = io.BytesIO()
    cat(io.BytesIO(b"a\nb"), out, False)
    assert out.getvalue() == b"a\n"


def test_cat_empty_input():
    out = io.BytesIO()
    cat(io.BytesIO(b""), out, True)
    assert out.getvalue() == b""


def test_main_numbering_restarts_per_file(tmp_path, capsysbinary):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"x\n")
    second.write_bytes(b"y\n")
    assert main(["-n", str(first), str(second)]) == 0
    out = capsysbinary.readouterr().out
    assert out == b"    1  x\n    1  y\n"


def test_main_reports_missing_file(tmp_path, capsysbinary):
    present = tmp_path / "present.txt"
    present.write_bytes(b"content\n")
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(present)]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"content\n"
    assert b"error reading from" in captured.err
    assert str(missing).encode() in captured.err


def test_main_reads_stdin(monkeypatch, capsysbinary):
    data = b"from stdin\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    assert main([]) == 0
    assert capsysbinary.readouterr().out == data