"""Application engine for Schemelet.

Centralises procedure application so the evaluator and the `apply` builtin
share one protocol:
- PrimitiveFunc values are invoked directly on the argument list and apply
  their own arity and type checks.
- Func values bind their parameters in a fresh child of the captured closure
  and evaluate the body forms in order, returning the last value.
- Anything else is not applicable.

Calls are not tail-call optimised: every nested application consumes host
stack, so recursion depth is bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from schemelet import EvaluatorFn, LispValue
from schemelet.errors import NotFunctionError
from schemelet.types.environment import Environment
from schemelet.types.lambda_fn import Func
from schemelet.types.values import PrimitiveFunc


def eval_body(body: tuple[LispValue, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate each form in order and return the value of the last one."""
    result: LispValue = None  # type: ignore[assignment]
    for form in body:
        result = evaluate_fn(form, env)
    return result


def apply_func(fn: Func, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user-defined procedure to already-evaluated arguments."""
    new_env = fn.extend_env(args)
    return eval_body(fn.body, new_env, evaluate_fn)


def apply(fn: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a PrimitiveFunc or a Func; raise NotFunctionError otherwise."""
    if isinstance(fn, PrimitiveFunc):
        return fn(args)
    if isinstance(fn, Func):
        return apply_func(fn, args, evaluate_fn)
    raise NotFunctionError("Unrecognized function", fn)
