import pytest

from rum.reader.source import Source, SourceRef


def test_line_index_starts_at_zero_and_increases():
    src = Source("(a\n b)\n\n(c)")
    assert src.lines[0] == 0
    assert list(src.lines) == sorted(set(src.lines))
    assert src.lines == (0, 3, 7, 8)


def test_line_extraction():
    src = Source("first\nsecond\nthird")
    assert src.line(0) == "first\n"
    assert src.line(1) == "second\n"
    assert src.line(2) == "third"
    with pytest.raises(IndexError):
        src.line(3)
    with pytest.raises(IndexError):
        src.line(-1)


def test_invalid_bytes_are_dropped():
    src = Source(b"(a \xff\xfeb)")
    assert src.text == "(a b)"


def test_surrogates_and_replacement_chars_are_dropped():
    src = Source("a\ud800b\ufffdc")
    assert src.text == "abc"


def test_context_points_at_column():
    src = Source("(foo\n  (bar baz)")
    ref = SourceRef(src, 1, 7)
    assert ref.context("> ") == ">   (bar baz)\n> -------^\n"


def test_context_out_of_range_line():
    src = Source("x")
    assert "unable to get source info" in SourceRef(src, 4, 0).context()


def test_context_without_source():
    assert SourceRef(None, 0, 0).context() == "no source info\n"
