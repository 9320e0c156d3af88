from __future__ import annotations

from typing import Optional, Sequence

from schemelet.errors import NumArgsError
from schemelet.types.environment import Environment
from schemelet.types.values import Value, make_list


def bind_arguments(
    params: Sequence[str],
    vararg: Optional[str],
    supplied_args: list[Value],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding in Schemelet.

    Supports:
    - Positional required parameters, one per supplied argument
    - An optional rest parameter capturing the remaining arguments as a List
      (the empty list when nothing remains)

    A procedure without a rest parameter must receive exactly len(params)
    arguments. With a rest parameter any count is accepted: missing trailing
    parameters stay unbound and the rest parameter gets the empty list.
    Returns a new Environment whose outer is `closure_env`.
    """
    arity = len(params)
    provided = len(supplied_args)
    if provided != arity and vararg is None:
        raise NumArgsError(arity, supplied_args)

    local_env = closure_env.extend(zip(params, supplied_args))
    if vararg is not None:
        local_env.define(vararg, make_list(supplied_args[arity:]))
    return local_env
