import io

import pytest

from cpufeat.line_reader import LineReader, LineResult


def _reader(content, size=16):
    return LineReader(io.StringIO(content), 16 if size is None else size)


def test_empty():
    reader = _reader("")
    result = reader.next_line()
    assert result.eof
    assert result.full_line
    assert result.line == ""


def test_many_small_lines():
    reader = _reader("a\nb\nc")
    assert reader.next_line() == LineResult("a", eof=False, full_line=True)
    assert reader.next_line() == LineResult("b", eof=False, full_line=True)
    assert reader.next_line() == LineResult("c", eof=True, full_line=True)


def test_truncated_line():
    reader = _reader(
        "First\nSecond\nMore than 16 characters, this will be truncated.\nlast"
    )
    assert reader.next_line() == LineResult("First", eof=False, full_line=True)
    assert reader.next_line() == LineResult("Second", eof=False, full_line=True)
    assert reader.next_line() == LineResult(
        "More than 16 cha", eof=False, full_line=False
    )
    assert reader.next_line() == LineResult("last", eof=True, full_line=True)


def test_truncated_lines():
    reader = _reader("More than 16 characters\nAnother line that is too long")
    assert reader.next_line() == LineResult(
        "More than 16 cha", eof=False, full_line=False
    )
    assert reader.next_line() == LineResult(
        "Another line tha", eof=False, full_line=False
    )
    assert reader.next_line() == LineResult("", eof=True, full_line=True)


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"a\nb\nc"), 16)
    lines = [result.line for result in reader]
    assert lines == ["a", "b", "c"]


def test_iteration_stops_after_eof():
    reader = _reader("First\nSecond\nMore than 16 characters, this will be truncated.\nlast")
    results = list(reader)
    assert [r.line for r in results] == ["First", "Second", "More than 16 cha", "last"]
    assert [r.eof for r in results] == [False, False, False, True]
    assert [r.full_line for r in results] == [True, True, False, True]


def test_trailing_newline_gives_empty_eof_line():
    results = list(_reader("a\nb\n"))
    assert [r.line for r in results] == ["a", "b", ""]
    assert results[-1].eof


def test_default_buffer_holds_long_lines():
    line = "flags : " + " ".join(f"f{n}" for n in range(100))
    results = list(LineReader(io.StringIO(line + "\nnext")))
    assert results[0] == LineResult(line, eof=False, full_line=True)
    assert results[1] == LineResult("next", eof=True, full_line=True)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), 0)