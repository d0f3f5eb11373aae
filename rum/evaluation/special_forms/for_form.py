from rum import EvaluatorFn
from rum.errors import ArityMismatchError, TypeMismatchError
from rum.evaluation.apply import apply
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import List, Value


def for_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    """(for fn list) calls fn once per element of list and returns nil."""
    if len(tail) != 2:
        raise ArityMismatchError(f"for requires exactly 2 arguments, got {len(tail)}")

    fn = evaluate_fn(tail[0], env)
    seq = evaluate_fn(tail[1], env)
    if not isinstance(seq, List):
        raise TypeMismatchError(f"for expects a list, got {seq.type_name}", tail[1].ref)
    for item in seq:
        apply(fn, [item], evaluate_fn)
    return Nil
