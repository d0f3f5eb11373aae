from rum.errors import (
    ErrorKind,
    HostPanic,
    PanicError,
    ParseError,
    RumRuntimeError,
    SyntaxIssue,
    TypeMismatchError,
    UnknownVariableError,
)
from rum.reader.source import Source, SourceRef
from rum.types.values import Identifier, List


def test_kind_names():
    assert str(ErrorKind.MISSING_CLOSING_PARENTHESIS) == "MissingClosingParenthesis"
    assert str(ErrorKind.UNKNOWN_VARIABLE) == "UnknownVariable"
    assert UnknownVariableError.kind is ErrorKind.UNKNOWN_VARIABLE
    assert TypeMismatchError.kind is ErrorKind.TYPE_MISMATCH
    assert PanicError.kind is ErrorKind.PANIC


def test_syntax_issue_formatting():
    src = Source("(a\n  b")
    issue = SyntaxIssue(ErrorKind.INVALID_NUD_TOKEN, "unexpected", SourceRef(src, 1, 2))
    assert str(issue) == "InvalidNudToken at line 2, col 3: unexpected"
    assert issue.context() == "  b\n--^\n"
    bare = SyntaxIssue(ErrorKind.INVALID_ROOT, "no node found")
    assert str(bare) == "InvalidRoot: no node found"
    assert bare.context() == ""


def test_parse_error_lists_every_issue():
    err = ParseError([
        SyntaxIssue(ErrorKind.INVALID_LED_TOKEN, "first"),
        SyntaxIssue(ErrorKind.INVALID_ROOT, "second"),
    ])
    assert err.kinds == [ErrorKind.INVALID_LED_TOKEN, ErrorKind.INVALID_ROOT]
    text = str(err)
    assert text.startswith("2 parsing errors:")
    assert "InvalidLedToken: first" in text
    assert "InvalidRoot: second" in text


def test_runtime_error_report():
    src = Source("(f x)")
    err = UnknownVariableError("'x' does not exist", SourceRef(src, 0, 3))
    err.stack.append(Identifier("x", SourceRef(src, 0, 3)))
    err.stack.append(List([Identifier("f"), Identifier("x")]))
    report = err.describe()
    assert report.splitlines() == [
        "runtime error: UnknownVariable at line 1, col 4: 'x' does not exist",
        "  # triggered at:",
        "    (f x)",
        "    ---^",
        "  # called from:",
        "    (f x)",
    ]


def test_runtime_error_without_ref():
    assert str(RumRuntimeError("boom")) == "Panic: boom"


def test_panic_from_host_panic():
    try:
        raise HostPanic({"code": 3})
    except HostPanic as exc:
        err = PanicError.from_exception(exc)
    assert err.payload == {"code": 3}
    assert err.message == "panic: {'code': 3}"
    assert err.ref is None
    assert "HostPanic" in err.trace


def test_panic_from_arbitrary_exception():
    try:
        {}["missing"]
    except KeyError as exc:
        err = PanicError.from_exception(exc)
    assert isinstance(err.payload, KeyError)
    assert err.message == "KeyError: 'missing'"
