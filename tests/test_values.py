import pytest

from rum.reader.parser import parse
from rum.reader.source import Source, SourceRef
from rum.types.nil import Nil
from rum.types.values import (
    INT64_MAX,
    INT64_MIN,
    Boolean,
    Float,
    Identifier,
    Integer,
    List,
    Opaque,
    String,
    from_python,
    type_name,
    wrap_int64,
)


def test_wrap_int64():
    assert wrap_int64(INT64_MAX + 1) == INT64_MIN
    assert wrap_int64(INT64_MIN - 1) == INT64_MAX
    assert wrap_int64(42) == 42
    assert Integer(2**64 + 5).value == 5


def test_equality_ignores_refs():
    ref = SourceRef(Source("x"), 0, 0)
    assert Integer(1, ref) == Integer(1)
    assert Identifier("a", ref) == Identifier("a")
    assert List([Integer(1)], ref) == List([Integer(1)])
    assert hash(Identifier("a", ref)) == hash(Identifier("a"))


def test_equality_compares_tags():
    assert Integer(1) != Float(1.0)
    assert String("a") != Identifier("a")
    assert Boolean(True) != Integer(1)
    assert List() != Nil


def test_identifiers_are_interned():
    a = Identifier("".join(["lo", "ng-name"]))
    assert a.name is Identifier("long-name").name


@pytest.mark.parametrize(
    "value,text",
    [
        (Integer(-3), "-3"),
        (Float(0.5), "0.5"),
        (Float(3.0), "3.0"),
        (Float(1e20), "1e+20"),
        (String('say "hi" \\o/'), '"say \\"hi\\" \\\\o/"'),
        (Boolean(False), "false"),
        (Nil, "nil"),
        (List(), "()"),
        (List([Identifier("f"), List([Integer(1), String("x")])]), '(f (1 "x"))'),
    ],
)
def test_printing(value, text):
    assert str(value) == text


@pytest.mark.parametrize("text", ['(f (1 "x") 2.5)', '"a \\"quoted\\" string"', "(a (b (c ())))"])
def test_printed_text_parses_back(text):
    value = parse(text)
    assert str(value) == text
    assert parse(str(value)) == value


def test_from_python():
    assert from_python(None) is Nil
    assert from_python(True) == Boolean(True)
    assert from_python(3) == Integer(3)
    assert from_python(3.5) == Float(3.5)
    assert from_python("s") == String("s")
    assert from_python([1, [None]]) == List([Integer(1), List([Nil])])
    assert from_python(Integer(1)) == Integer(1)
    assert isinstance(from_python({"a": 1}), Opaque)


def test_type_names():
    assert type_name(1) == "int64"
    assert type_name(1.0) == "float64"
    assert type_name(False) == "bool"
    assert type_name(None) == "nil"
    assert type_name([]) == "list"
    assert type_name(Identifier("a")) == "identifier"
    assert type_name(object()) == "opaque:object"


def test_nil():
    assert not Nil
    assert Nil.to_python() is None
    assert Nil == Nil
