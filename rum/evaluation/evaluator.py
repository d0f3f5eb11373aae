"""Core tree-walking evaluator.

evaluate() walks a Value in a Context. Errors propagate as exceptions, and
every evaluate() call they pass through records the expression it was
working on, innermost first: in `err.stack` for a RumRuntimeError, in a
`rum_stack` attribute for anything else raised by host code. safe_evaluate()
is the single place where such a host fault is turned into a PanicError,
which picks up the recorded frames.
"""

from __future__ import annotations

import logging

from rum.errors import PanicError, RumError, RumRuntimeError, host_frames
from rum.evaluation.apply import apply
from rum.types.callables import SpecialForm
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import Identifier, List, Value

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Context) -> Value:
    try:
        return _dispatch(expr, env)
    except RumRuntimeError as err:
        err.stack.append(expr)
        raise
    except RumError:
        raise
    except Exception as exc:
        host_frames(exc).append(expr)
        raise


def _dispatch(expr: Value, env: Context) -> Value:
    match expr:
        case List(items=()):
            return Nil
        case List(items=(head_expr, *operands)):
            head = evaluate(head_expr, env)
            if isinstance(head, SpecialForm):
                return head.fn(List(operands, expr.ref), env, evaluate)
            args = [evaluate(op, env) for op in operands]
            return apply(head, args, evaluate)
        case Identifier():
            return env.get(expr)

    # --- Everything else evaluates to itself ---
    return expr


def safe_evaluate(expr: Value, env: Context) -> Value:
    """Evaluate, turning any host-originated fault into a PanicError."""
    try:
        return evaluate(expr, env)
    except RumError:
        raise
    except Exception as exc:
        logger.warning("host fault while evaluating %s: %r", expr, exc)
        raise PanicError.from_exception(exc) from exc
