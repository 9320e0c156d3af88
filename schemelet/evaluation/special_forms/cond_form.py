"""Special form: cond.

Clauses are tried strictly in order. A `(test expr)` clause is rewritten to
`(if test expr (cond <remaining clauses>))` and evaluated, so a cond whose
tests are all false ends in the empty-cond error.
"""

from schemelet import EvaluatorFn, SExpression, LispValue
from schemelet.errors import BadSpecialFormError
from schemelet.types.environment import Environment
from schemelet.types.symbol import Atom
from schemelet.types.values import List


def cond_form(
    form: SExpression,
    clauses: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not clauses:
        raise BadSpecialFormError("No true clause in cond expression", form)
    first, rest = clauses[0], clauses[1:]
    match first:
        case List([Atom("else"), expr]):
            return evaluate_fn(expr, env)
        case List([test, expr]):
            remaining = List((Atom("cond"), *rest))
            return evaluate_fn(List((Atom("if"), test, expr, remaining)), env)
        case _:
            raise BadSpecialFormError("Ill-formed clause in cond expression", form)
