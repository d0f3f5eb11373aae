from rum import EvaluatorFn
from rum.errors import ArityMismatchError, TypeMismatchError
from rum.types.callables import Closure
from rum.types.context import Context
from rum.types.values import Identifier, List, Value


def parameter_list(form: Value) -> list[Identifier]:
    """Check that `form` is a list of identifiers, e.g. (a b c)."""
    if not isinstance(form, List):
        raise TypeMismatchError(f"parameter list must be a list, got {form.type_name}", form.ref)
    for param in form:
        if not isinstance(param, Identifier):
            raise TypeMismatchError(f"parameter must be an identifier, got {param.type_name}", param.ref)
    return list(form)  # type: ignore[arg-type]


def lambda_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    # (lambda (params) body...) captures `env`, the defining Context, not
    # the Context of whoever calls it later. With several body forms they
    # run in order; with none, calling the closure gives nil.
    if not tail:
        raise ArityMismatchError("lambda requires at least a parameter list")

    params = parameter_list(tail[0])
    return Closure(params, tail[1:], env, ref=tail.ref)
