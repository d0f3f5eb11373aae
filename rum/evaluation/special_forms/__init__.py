"""Registry of special forms.

Special forms are ordinary bindings in the root Context whose values are
SpecialForm callables; the evaluator hands them their operands unevaluated.
`import` is not listed here: it is bound per interpreter, see
rum.evaluation.special_forms.import_form.
"""

from rum.evaluation.special_forms.define_form import def_form, define_form
from rum.evaluation.special_forms.eval_form import eval_form
from rum.evaluation.special_forms.for_form import for_form
from rum.evaluation.special_forms.if_form import if_form
from rum.evaluation.special_forms.lambda_form import lambda_form
from rum.evaluation.special_forms.progn_form import package_form, progn_form
from rum.evaluation.special_forms.quote_forms import array_form, quote_form
from rum.types.callables import SpecialForm
from rum.types.context import Context

SPECIAL_FORMS = {
    "quote": quote_form,
    "array": array_form,
    "if": if_form,
    "define": define_form,
    "let": define_form,
    "var": define_form,
    "set!": define_form,
    "def": def_form,
    "lambda": lambda_form,
    "begin": progn_form,
    "package": package_form,
    "eval": eval_form,
    "for": for_form,
}


def register(env: Context) -> None:
    """Bind every special form into `env`."""
    for name, fn in SPECIAL_FORMS.items():
        env.define(name, SpecialForm(name, fn))
