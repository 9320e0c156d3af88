"""Special forms of the Schemelet evaluator.

Each handler receives the whole form (for error reporting), the pieces the
evaluator's structural match already extracted, the current environment and
the evaluator function to recurse with. Dispatch order lives in
schemelet.evaluation.evaluator.
"""

from schemelet.evaluation.special_forms.lambda_form import make_func
from schemelet.evaluation.special_forms.define_form import define_var_form, define_func_form
from schemelet.evaluation.special_forms.if_form import if_form, is_truthy
from schemelet.evaluation.special_forms.cond_form import cond_form
from schemelet.evaluation.special_forms.case_form import case_form

__all__ = [
    "make_func",
    "define_var_form",
    "define_func_form",
    "if_form",
    "is_truthy",
    "cond_form",
    "case_form",
]
