"""Error taxonomy for rum.

Syntax problems are collected by the parser and reported together through a
ParseError. Runtime errors unwind a single evaluation and pick up the call
stack on their way out, innermost expression first. Faults raised by host
code are not RumErrors: they are translated into a PanicError at the outer
evaluation boundary.
"""

from __future__ import annotations

import enum
import traceback
from io import StringIO
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from rum.reader.source import SourceRef
    from rum.types.values import Value


class ErrorKind(enum.Enum):
    MISSING_CLOSING_PARENTHESIS = "MissingClosingParenthesis"
    INVALID_NUD_TOKEN = "InvalidNudToken"
    INVALID_LED_TOKEN = "InvalidLedToken"
    INVALID_NUMBER = "InvalidNumber"
    UNTERMINATED_STRING = "UnterminatedString"
    INVALID_ROOT = "InvalidRoot"
    UNKNOWN_VARIABLE = "UnknownVariable"
    ARITY_MISMATCH = "ArityMismatch"
    TYPE_MISMATCH = "TypeMismatch"
    PANIC = "Panic"

    def __str__(self) -> str:
        return self.value


def _locate(kind: ErrorKind, message: str, ref: Optional[SourceRef]) -> str:
    if ref is None:
        return f"{kind}: {message}"
    return f"{kind} at line {ref.line + 1}, col {ref.column + 1}: {message}"


class RumError(Exception):
    """ Base class for all rum errors"""


class SyntaxIssue(RumError):
    """ A single problem found while lexing or parsing"""

    def __init__(self, kind: ErrorKind, message: str, ref: Optional[SourceRef] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.ref = ref

    def __str__(self) -> str:
        return _locate(self.kind, self.message, self.ref)

    def context(self, prefix: str = "") -> str:
        if self.ref is None:
            return ""
        return self.ref.context(prefix)


class ParseError(RumError):
    """ Raised when parsing fails; carries every issue found in the pass"""

    def __init__(self, errors: list[SyntaxIssue]):
        super().__init__(f"{len(errors)} parsing errors")
        self.errors = list(errors)

    @property
    def kinds(self) -> list[ErrorKind]:
        return [e.kind for e in self.errors]

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"{len(self.errors)} parsing errors:\n")
            for err in self.errors:
                buffer.write(f" {err}\n")
                buffer.write(err.context("  "))
            return buffer.getvalue()


class RumRuntimeError(RumError):
    """ Base class for errors raised while evaluating"""

    kind = ErrorKind.PANIC

    def __init__(self, message: str, ref: Optional[SourceRef] = None):
        super().__init__(message)
        self.message = message
        self.ref = ref
        # Expressions being evaluated when the error went through, innermost first.
        self.stack: list[Value] = []

    def __str__(self) -> str:
        return _locate(self.kind, self.message, self.ref)

    def describe(self) -> str:
        """Multi-line report with the rum call stack."""
        with StringIO() as buffer:
            buffer.write(f"runtime error: {self}\n")
            for i, frame in enumerate(self.stack):
                buffer.write("  # triggered at:\n" if i == 0 else "  # called from:\n")
                if frame.ref is not None:
                    buffer.write(frame.ref.context("    "))
                else:
                    buffer.write(f"    {frame}\n")
            return buffer.getvalue()


class UnknownVariableError(RumRuntimeError):
    """ Raised when an identifier cannot be resolved"""

    kind = ErrorKind.UNKNOWN_VARIABLE


class ArityMismatchError(RumRuntimeError):
    """ Raised when a callable receives the wrong number of arguments"""

    kind = ErrorKind.ARITY_MISMATCH


class TypeMismatchError(RumRuntimeError):
    """ Raised when a value has the wrong type for an operation"""

    kind = ErrorKind.TYPE_MISMATCH


class PanicError(RumRuntimeError):
    """ A host-originated fault, wrapped at the evaluation boundary.

    Carries the raw recovered payload and the Python trace. It never has a
    source reference.
    """

    kind = ErrorKind.PANIC

    def __init__(self, message: str, payload: Any = None, trace: str = ""):
        super().__init__(message, ref=None)
        self.payload = payload
        self.trace = trace

    @classmethod
    def from_exception(cls, exc: BaseException) -> PanicError:
        if isinstance(exc, HostPanic):
            payload, message = exc.payload, f"panic: {exc.payload!r}"
        else:
            payload, message = exc, f"{type(exc).__name__}: {exc}"
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        err = cls(message, payload, trace)
        err.stack.extend(host_frames(exc))
        return err

    def describe(self) -> str:
        out = super().describe()
        out += "  # interpreter trace:\n"
        for line in self.trace.rstrip("\n").split("\n"):
            out += f"    {line}\n"
        return out


class HostPanic(Exception):
    """ Raised by host code to abort evaluation with an arbitrary payload"""

    def __init__(self, payload: Any):
        super().__init__(payload)
        self.payload = payload


class UnsupportedHostFunction(TypeError):
    """ Raised for host functions that would return more than one value"""


def host_frames(exc: BaseException) -> list[Value]:
    """Expressions a host fault went through, innermost first."""
    frames = getattr(exc, "rum_stack", None)
    if frames is None:
        frames = []
        exc.rum_stack = frames  # type: ignore[attr-defined]
    return frames
