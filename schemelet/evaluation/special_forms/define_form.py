from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.evaluation.special_forms.lambda_form import make_func
from schemelet.types.environment import Environment


def define_var_form(
    name: str,
    val_expr: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; an outer binding of the same name is
    shadowed, never mutated.
    """
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)


def define_func_form(
    form: SExpression,
    name: str,
    params: list[SExpression],
    vararg: SExpression | None,
    body: list[SExpression],
    env: Environment,
) -> LispValue:
    """
    (define (name params...) body...) and (define (name params... . rest) body...)
    The procedure closes over `env`, so it can refer to itself recursively.
    """
    return env.define(name, make_func(form, env, params, vararg, body))
