from rum import EvaluatorFn
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import List, String, Value


def progn_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    result: Value = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result


def package_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    # (package "main" ...): the leading string only names the package.
    if tail and isinstance(tail[0], String):
        tail = List(tail[1:], tail.ref)
    return progn_form(tail, env, evaluate_fn)
