from rum import EvaluatorFn
from rum.errors import ArityMismatchError, TypeMismatchError
from rum.evaluation.special_forms.lambda_form import parameter_list
from rum.types.callables import Closure
from rum.types.context import Context
from rum.types.values import Identifier, List, Value


def _identifier(form: Value, what: str) -> Identifier:
    if not isinstance(form, Identifier):
        raise TypeMismatchError(f"{what} expects an identifier, got {form.type_name}", form.ref)
    return form


def define_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    """
    (define name value)
    Also bound as let, var and set!. Binds in the current Context, overwriting
    any binding of the same name there; the bound value is returned.
    """
    if len(tail) != 2:
        raise ArityMismatchError(f"define requires exactly 2 arguments, got {len(tail)}")

    name = _identifier(tail[0], "define")
    value = evaluate_fn(tail[1], env)
    return env.define(name, value)


def def_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
    """(def name (params) body...) is (define name (lambda (params) body...))."""
    if len(tail) < 2:
        raise ArityMismatchError("def requires a name and a parameter list")

    name = _identifier(tail[0], "def")
    params = parameter_list(tail[1])
    return env.define(name, Closure(params, tail[2:], env, name=name.name, ref=tail.ref))
