"""Special form: case.

    (case (* 2 3)
      ((2 3 5 7) 'prime)
      ((1 4 6 8 9) 'composite))      ===>  composite

The key is evaluated once and compared with each datum using eqv?. The first
clause holding a matching datum, or an `else` clause reached in order, has
its expressions evaluated in sequence; the last one is the result.
"""

from schemelet import EvaluatorFn, SExpression, LispValue
from schemelet.builtin.equality import eqv
from schemelet.errors import BadSpecialFormError
from schemelet.evaluation.apply import eval_body
from schemelet.types.environment import Environment
from schemelet.types.symbol import Atom
from schemelet.types.values import List


def case_form(
    form: SExpression,
    key: SExpression,
    clauses: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not clauses:
        raise BadSpecialFormError("No true clause in case expression", form)
    key_value = evaluate_fn(key, env)
    for clause in clauses:
        match clause:
            case List([Atom("else"), *exprs]) if exprs:
                return eval_body(exprs, env, evaluate_fn)
            case List([List(datums), *exprs]) if exprs:
                if any(eqv(key_value, datum) for datum in datums):
                    return eval_body(exprs, env, evaluate_fn)
            case _:
                raise BadSpecialFormError("Ill-formed clause in case expression", form)
    raise BadSpecialFormError("No true clause in case expression", form)
