"""Callable values: closures, host functions and special forms.

Dispatch in the evaluator is a match on these classes, never on Python
callability.
"""

from __future__ import annotations

import inspect
import logging
import typing
from io import StringIO
from typing import TYPE_CHECKING, Any, Callable as PyCallable, Optional, Sequence

from rum.errors import UnsupportedHostFunction
from rum.types.values import Identifier, Value

if TYPE_CHECKING:
    from rum.reader.source import SourceRef
    from rum.types.adapters import Adapter
    from rum.types.context import Context

logger = logging.getLogger(__name__)


class Callable(Value):
    __slots__ = ("name",)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class Closure(Callable):
    """A lambda: formal parameters, body, and the Context it was defined in."""

    __slots__ = ("params", "body", "env")
    type_name = "closure"

    def __init__(
        self,
        params: Sequence[Identifier],
        body: Sequence[Value],
        env: Context,
        name: str = "lambda",
        ref: Optional[SourceRef] = None,
    ):
        self.params: tuple[Identifier, ...] = tuple(params)
        self.body: tuple[Value, ...] = tuple(body)
        self.env = env
        self.name = name
        self.ref = ref

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(str(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<closure {self.name}/{len(self.params)}>"


def _returns_tuple(annotation: Any) -> bool:
    if annotation is inspect.Signature.empty:
        return False
    if isinstance(annotation, str):
        return annotation.replace("typing.", "").startswith(("tuple", "Tuple"))
    return annotation is tuple or typing.get_origin(annotation) is tuple


class HostFunction(Callable):
    """A Python callable exposed to rum code.

    Arguments are unwrapped to host objects (unless `unwrap` is False), run
    through the adapters in order, then bound to the callable's positional
    parameters. Host functions return a single value; a tuple return
    annotation is rejected here. So is a callable with no signature, unless
    a check_arity adapter guards it.
    """

    __slots__ = ("fn", "adapters", "unwrap", "signature")
    type_name = "host-function"

    def __init__(
        self,
        name: str,
        fn: PyCallable[..., Any],
        adapters: Sequence[Adapter] = (),
        unwrap: bool = True,
    ):
        if not callable(fn):
            raise TypeError(f"host function {name!r} is not callable: {fn!r}")
        try:
            signature: Optional[inspect.Signature] = inspect.signature(fn)
        except (TypeError, ValueError):
            # Some builtins do not expose a signature.
            signature = None
        if signature is not None and _returns_tuple(signature.return_annotation):
            raise UnsupportedHostFunction(f"host function {name!r} returns multiple values")
        if signature is None and not any(hasattr(a, "arity") for a in adapters):
            # Without a signature only an arity adapter can report a wrong argument count.
            raise UnsupportedHostFunction(
                f"host function {name!r} has no inspectable signature and needs a check_arity adapter"
            )
        self.name = name
        self.fn = fn
        self.adapters: tuple[Adapter, ...] = tuple(adapters)
        self.unwrap = unwrap
        self.signature = signature
        self.ref = None

    def __str__(self) -> str:
        return f"<host-function {self.name}>"

    __repr__ = __str__


class SpecialForm(Callable):
    """A callable receiving its operands unevaluated.

    `fn(tail, env, evaluate_fn)` controls which operands get evaluated, and
    in which order. `tail` is a List of the operands whose ref is the ref of
    the whole form.
    """

    __slots__ = ("fn",)
    type_name = "special-form"

    def __init__(self, name: str, fn: PyCallable[..., Value]):
        self.name = name
        self.fn = fn
        self.ref = None

    def __str__(self) -> str:
        return f"<special-form {self.name}>"

    __repr__ = __str__
