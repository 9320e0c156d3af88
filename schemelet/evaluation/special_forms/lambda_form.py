from __future__ import annotations

from typing import Optional, Sequence

from schemelet import SExpression
from schemelet.errors import BadSpecialFormError
from schemelet.types.environment import Environment
from schemelet.types.lambda_fn import Func
from schemelet.types.symbol import Atom


def _param_name(form: SExpression, param: SExpression) -> str:
    if not isinstance(param, Atom):
        raise BadSpecialFormError("Parameter is not a symbol", form)
    return param.name


def make_func(
    form: SExpression,
    env: Environment,
    params: Sequence[SExpression],
    vararg: Optional[SExpression],
    body: Sequence[SExpression],
) -> Func:
    """Build a closure over `env`.

    (lambda (params) body...) takes one or more body forms; they run in order
    and the last one gives the result of a call.
    """
    if not body:
        raise BadSpecialFormError("Procedure body is empty", form)
    names = tuple(_param_name(form, p) for p in params)
    rest = None if vararg is None else _param_name(form, vararg)
    return Func(names, rest, tuple(body), env)
