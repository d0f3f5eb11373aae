"""The `math` library, loaded with (import "math").

A bridge module in the shape every library follows: an installer taking the
root Context and the name prefix to register under.
"""

from __future__ import annotations

import math

from rum.types.adapters import check_arity, param_to_float, param_to_int
from rum.types.context import Context
from rum.types.values import Float


def register(env: Context, prefix: str = "math") -> None:
    def name(n: str) -> str:
        return f"{prefix}.{n}"

    for fn in (math.sin, math.cos, math.tan, math.sqrt, math.exp, math.log):
        env.register_function(name(fn.__name__), fn, check_arity(1), param_to_float(0))
    env.register_function(name("floor"), math.floor, check_arity(1), param_to_float(0))
    env.register_function(name("ceil"), math.ceil, check_arity(1), param_to_float(0))
    env.register_function(name("pow"), math.pow, check_arity(2), param_to_float(0), param_to_float(1))
    env.register_function(name("abs"), abs, check_arity(1))
    env.register_function(name("trunc"), int, check_arity(1), param_to_int(0))

    env.define(name("pi"), Float(math.pi))
    env.define(name("e"), Float(math.e))
