"""Application engine for rum.

Centralizes calling semantics so that the evaluator and the special forms
that call functions (for) share them:
- Closures get a fresh child of their captured Context, with parameters
  bound positionally.
- Host functions get unwrapped arguments, run through their adapters and
  bound to the Python signature.
"""

from __future__ import annotations

from rum import EvaluatorFn
from rum.errors import ArityMismatchError, TypeMismatchError, UnsupportedHostFunction
from rum.types.callables import Closure, HostFunction, SpecialForm
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import Value, from_python


def apply_closure(fn: Closure, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    if len(args) != len(fn.params):
        raise ArityMismatchError(
            f"{fn.name} expects {len(fn.params)} argument(s), got {len(args)}", fn.ref
        )
    call_env = Context(parent=fn.env)
    for param, arg in zip(fn.params, args):
        call_env.define(param, arg)
    result: Value = Nil
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply_host(fn: HostFunction, args: list[Value]) -> Value:
    values = [arg.to_python() for arg in args] if fn.unwrap else list(args)
    for adapter in fn.adapters:
        values = adapter(values)
    if fn.signature is not None:
        try:
            fn.signature.bind(*values)
        except TypeError as err:
            raise ArityMismatchError(f"{fn.name}: {err}") from None
    result = fn.fn(*values)
    if isinstance(result, tuple):
        raise UnsupportedHostFunction(f"host function {fn.name!r} returned {len(result)} values")
    return from_python(result)


def apply(head: Value, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Call `head` with already evaluated arguments."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, HostFunction):
        return apply_host(head, args)
    if isinstance(head, SpecialForm):
        raise TypeMismatchError(f"special form {head.name} cannot be applied to evaluated arguments")
    raise TypeMismatchError(f"cannot call {head.type_name} value {head}", head.ref)
