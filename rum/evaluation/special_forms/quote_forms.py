from rum import EvaluatorFn
from rum.errors import ArityMismatchError
from rum.types.context import Context
from rum.types.values import List, Value


def quote_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    """(quote expr) returns expr without evaluating it."""
    if len(tail) != 1:
        raise ArityMismatchError(f"quote expects exactly one argument, got {len(tail)}")
    return tail[0]


def array_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    """(array (a b c)) returns the list literal (a b c) as data."""
    if len(tail) != 1:
        raise ArityMismatchError(f"array expects exactly one argument, got {len(tail)}")
    return tail[0]
