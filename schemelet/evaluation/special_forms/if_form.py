from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.types.environment import Environment
from schemelet.types.values import Bool


def is_truthy(value: LispValue) -> bool:
    # Only #f is false; every other value, including '() and 0, is true
    return not (isinstance(value, Bool) and value.value is False)


def if_form(
    pred: SExpression,
    conseq: SExpression,
    alt: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if is_truthy(evaluate_fn(pred, env)):
        return evaluate_fn(conseq, env)
    return evaluate_fn(alt, env)
