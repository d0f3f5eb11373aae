"""Adapters: pre-call transforms over the positional arguments of a host function.

An adapter takes the full list of (unwrapped) arguments and returns the list
to use instead, or raises an ArityMismatchError/TypeMismatchError.
"""

from __future__ import annotations

from typing import Any, Callable

from rum.errors import ArityMismatchError, TypeMismatchError
from rum.types.values import type_name

Adapter = Callable[[list[Any]], list[Any]]


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _check_index(values: list[Any], p: int) -> None:
    if p >= len(values):
        raise ArityMismatchError(f"wrong number of parameters: expected at least {p + 1}, got {len(values)}")


def check_arity(n: int) -> Adapter:
    """Adapter checking that exactly `n` arguments are given."""

    def adapter(values: list[Any]) -> list[Any]:
        if len(values) != n:
            raise ArityMismatchError(f"wrong number of parameters: expected {n}, got {len(values)}")
        return values

    adapter.arity = n  # type: ignore[attr-defined]
    return adapter


def param_to_float(p: int) -> Adapter:
    """Adapter converting the p-th argument to a float."""

    def adapter(values: list[Any]) -> list[Any]:
        _check_index(values, p)
        if not _is_number(values[p]):
            raise TypeMismatchError(f"parameter {p} must be a number, got {type_name(values[p])}")
        values = list(values)
        values[p] = float(values[p])
        return values

    return adapter


def param_to_int(p: int) -> Adapter:
    """Adapter converting the p-th argument to an int, truncating floats."""

    def adapter(values: list[Any]) -> list[Any]:
        _check_index(values, p)
        if not _is_number(values[p]):
            raise TypeMismatchError(f"parameter {p} must be a number, got {type_name(values[p])}")
        values = list(values)
        values[p] = int(values[p])
        return values

    return adapter
