from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional

from rum.builtin import env_builtin, math_builtin
from rum.config import get_recursion_limit
from rum.evaluation import special_forms
from rum.evaluation.evaluator import safe_evaluate
from rum.evaluation.special_forms.import_form import make_import_form
from rum.modules.loader import Importer, Installer
from rum.reader.parser import parse, parse_all
from rum.reader.source import Source
from rum.types.adapters import Adapter
from rum.types.callables import HostFunction
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import Value

logger = logging.getLogger(__name__)

# An environment builder populates the root Context before user code runs.
EnvironmentBuilder = Callable[[Context], None]

DEFAULT_BUILDERS: tuple[EnvironmentBuilder, ...] = (special_forms.register, env_builtin.register)
DEFAULT_LIBRARIES: Mapping[str, Installer] = {"math": math_builtin.register}


class Interpreter:
    """
    Parses and evaluates rum code against one root Context, kept across calls.

    The root Context is populated by `builders`, in order. `libraries` lists
    the host libraries reachable through (import "name").
    """

    def __init__(
        self,
        builders: Optional[Iterable[EnvironmentBuilder]] = None,
        libraries: Optional[Mapping[str, Installer]] = None,
        search_path: Optional[Iterable[Path]] = None,
    ):
        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        self.importer = Importer(DEFAULT_LIBRARIES if libraries is None else libraries, search_path)
        self.env = Context()
        self.env.define("import", make_import_form(self.importer))
        for build in DEFAULT_BUILDERS if builders is None else builders:
            build(self.env)
        logger.debug("root context ready with %d bindings", len(self.env.vars))

    def register_function(self, name: str, fn: Callable[..., Any], *adapters: Adapter, unwrap: bool = True) -> HostFunction:
        return self.env.register_function(name, fn, *adapters, unwrap=unwrap)

    def parse(self, code: str | bytes, name: str = "<input>") -> Value:
        return parse(Source(code, name))

    def evaluate(self, expr: Value) -> Value:
        return safe_evaluate(expr, self.env)

    def eval(self, code: str | bytes, name: str = "<input>") -> Value:
        """Evaluate every top-level expression of `code`; return the last value."""
        result: Value = Nil
        for expr in parse_all(Source(code, name)):
            result = safe_evaluate(expr, self.env)
        return result
