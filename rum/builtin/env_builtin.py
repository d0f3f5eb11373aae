"""Built-in host functions for the rum root Context.

Operators, comparisons and a few helpers. They receive unwrapped host
values (int, float, str, bool, list...) unless registered with
unwrap=False, in which case they receive Values.

Numeric operators look at all their operands: integers stay integers, and a
single float operand promotes the whole call to float.
"""

from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Any, Callable

from rum.errors import ArityMismatchError, HostPanic, TypeMismatchError
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import Boolean, String, Value, type_name, wrap_int64


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _numbers(name: str, values: tuple[Any, ...], minimum: int = 1) -> list[Any]:
    """Validate numeric operands and apply the int -> float promotion rule."""
    if len(values) < minimum:
        raise ArityMismatchError(f"function {name!r} should take at least {minimum} argument(s)")
    for v in values:
        if not _is_number(v):
            raise TypeMismatchError(f"unable to apply {name!r} to values of type {type_name(v)}")
    if any(isinstance(v, float) for v in values):
        return [float(v) for v in values]
    return list(values)


def _fold(name: str, op: Callable[[Any, Any], Any], values: tuple[Any, ...]) -> Any:
    nums = _numbers(name, values)
    result = reduce(op, nums)
    return wrap_int64(result) if isinstance(result, int) else result


# -------------------------------
# Arithmetic
# -------------------------------
def add(*values: Any) -> Any:
    """Sum of all arguments."""
    return _fold("+", operator.add, values)


def sub(*values: Any) -> Any:
    """Subtract every following argument from the first; negate a single one."""
    nums = _numbers("-", values)
    if len(nums) == 1:
        return wrap_int64(-nums[0]) if isinstance(nums[0], int) else -nums[0]
    return _fold("-", operator.sub, values)


def mul(*values: Any) -> Any:
    """Product of all arguments."""
    return _fold("*", operator.mul, values)


def _int_div(a: int, b: int) -> int:
    # Truncates toward zero; ZeroDivisionError is left to the panic boundary.
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def div(*values: Any) -> Any:
    """Divide left to right. Integer division truncates toward zero."""
    nums = _numbers("/", values, minimum=2)
    if isinstance(nums[0], int):
        return wrap_int64(reduce(_int_div, nums))
    return reduce(operator.truediv, nums)


_INT64_MODULUS = 1 << 64


def _float_pow(a: float, b: float) -> float:
    result = a ** b
    # A negative base with a fractional exponent has no real result.
    return math.nan if isinstance(result, complex) else result


def power(*values: Any) -> Any:
    """(** a b c) is (a ** b) ** c."""
    nums = _numbers("**", values, minimum=2)
    if isinstance(nums[0], int) and any(n < 0 for n in nums[1:]):
        nums = [float(n) for n in nums]
    if isinstance(nums[0], int):
        # Exponentiation modulo 2**64 gives the wrapped int64 result directly.
        return wrap_int64(reduce(lambda a, b: pow(a, b, _INT64_MODULUS), nums))
    return reduce(_float_pow, nums)


# -------------------------------
# Comparison
# -------------------------------
def _comparable(name: str, values: tuple[Any, ...]) -> list[Any]:
    if len(values) < 2:
        raise ArityMismatchError(f"function {name!r} should take at least 2 arguments")
    if all(isinstance(v, str) for v in values):
        return list(values)
    return _numbers(name, values)


def equal(*values: Any) -> bool:
    """True if every argument equals the first one."""
    first, *rest = _comparable("==", values)
    return all(v == first for v in rest)


def not_equal(*values: Any) -> bool:
    return not equal(*values)


def _chain(name: str, op: Callable[[Any, Any], bool]) -> Callable[..., bool]:
    def compare(*values: Any) -> bool:
        nums = _comparable(name, values)
        return all(op(a, b) for a, b in zip(nums, nums[1:]))

    compare.__name__ = name
    return compare


less = _chain("<", operator.lt)
less_equal = _chain("<=", operator.le)
greater = _chain(">", operator.gt)
greater_equal = _chain(">=", operator.ge)


def logical_not(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatchError(f"not expects a bool, got {type_name(value)}")
    return not value


# -------------------------------
# Helpers
# -------------------------------
def length(value: Any) -> int:
    """Number of elements of a list, or of characters of a string."""
    if not isinstance(value, (list, str)):
        raise TypeMismatchError(f"len expects a list or a string, got {type_name(value)}")
    return len(value)


def _display(value: Value) -> str:
    return value.value if isinstance(value, String) else str(value)


def print_builtin(*values: Value) -> None:
    print(" ".join(_display(v) for v in values))


def type_of(value: Value) -> str:
    return value.type_name


def sprintf(fmt: str, *args: Any) -> str:
    """printf-style formatting, using Python's % operator."""
    if not isinstance(fmt, str):
        raise TypeMismatchError(f"sprintf format must be a string, got {type_name(fmt)}")
    return fmt % tuple(args)


def panic(payload: Any) -> None:
    """Abort the current evaluation with `payload`."""
    raise HostPanic(payload)


def register(env: Context) -> None:
    """Register all builtin functions and constants into the given Context."""
    for name, fn in {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "**": power,
        "==": equal,
        "eq?": equal,
        "!=": not_equal,
        "<": less,
        "<=": less_equal,
        ">": greater,
        ">=": greater_equal,
        "not": logical_not,
        "len": length,
        "sprintf": sprintf,
        "panic": panic,
    }.items():
        env.register_function(name, fn)
    env.register_function("print", print_builtin, unwrap=False)
    env.register_function("type", type_of, unwrap=False)

    env.define("true", Boolean(True))
    env.define("false", Boolean(False))
    env.define("nil", Nil)
