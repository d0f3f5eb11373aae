from __future__ import annotations

from typing import TYPE_CHECKING

from rum import EvaluatorFn
from rum.errors import ArityMismatchError, TypeMismatchError
from rum.types.callables import SpecialForm
from rum.types.context import Context
from rum.types.values import List, String, Value

if TYPE_CHECKING:
    from rum.modules.loader import Importer


def make_import_form(importer: Importer) -> SpecialForm:
    """Build the import special form bound to one Importer."""

    def import_form(tail: List, env: Context, evaluate_fn: EvaluatorFn) -> Value:
        """
        Usage:
            (import "name")
            (import "name" "prefix")
        """
        if len(tail) not in (1, 2):
            raise ArityMismatchError(f"import expects 1 or 2 arguments, got {len(tail)}")
        names = []
        for form in tail:
            value = evaluate_fn(form, env)
            if not isinstance(value, String):
                raise TypeMismatchError(f"import expects strings, got {value.type_name}", form.ref)
            names.append(value.value)
        return importer.load(env, *names, evaluate_fn=evaluate_fn)

    return SpecialForm("import", import_form)
