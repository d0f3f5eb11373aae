from rum import EvaluatorFn
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import List, Value


def eval_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    """(eval expr...) evaluates each argument, then evaluates each result as code."""
    # Arguments first, all of them, as for a regular call.
    codes = [evaluate_fn(e, env) for e in tail]

    result: Value = Nil
    for code in codes:
        result = evaluate_fn(code, env)
    return result
