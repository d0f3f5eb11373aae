# Core type aliases for rum.
#
# Parsed code and runtime data share one representation: the Value classes in
# rum.types.values. Special forms receive the evaluator as a parameter
# (EvaluatorFn) so that they never import it directly.

from typing import Any, Callable

# Evaluator function type: (Value, Context) -> Value
EvaluatorFn = Callable[..., Any]
