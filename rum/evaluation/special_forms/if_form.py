from rum import EvaluatorFn
from rum.errors import ArityMismatchError, TypeMismatchError
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import Boolean, List, Value


def if_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    if len(tail) not in (2, 3):
        raise ArityMismatchError(f"if expects 2 or 3 arguments, got {len(tail)}")

    cond = evaluate_fn(tail[0], env)
    # No truthiness: the condition has to be an actual boolean.
    if not isinstance(cond, Boolean):
        raise TypeMismatchError(f"if condition must be a bool, got {cond.type_name}", tail[0].ref)

    if cond.value:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
