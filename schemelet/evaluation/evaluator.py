"""Core evaluator for the Schemelet interpreter.

`evaluate` is total over every Value shape. Forms are matched structurally in
a fixed precedence order and the first matching rule wins:

 1. self-evaluating leaves (strings, numbers, characters, booleans, vectors)
 2. (quote x)
 3. a bare symbol: variable reference
 4. (set! name form)
 5. (define name form)
 6. (define (name . params) body...)
 7-9. (lambda (params...) body...), (lambda (p . rest) body...), (lambda rest body...)
10. (if pred conseq alt)
11. (cond clause...)
12. (case key clause...)
13. (f arg...): generic application
14. anything else is an unrecognized special form

A malformed special form that fails its own pattern (say `(if x y)`) falls
through to generic application like any other list.
"""

from __future__ import annotations

from schemelet import SExpression, LispValue
from schemelet.errors import BadSpecialFormError
from schemelet.evaluation.apply import apply
from schemelet.evaluation.special_forms import (
    case_form,
    cond_form,
    define_func_form,
    define_var_form,
    if_form,
    make_func,
)
from schemelet.types.environment import Environment
from schemelet.types.symbol import Atom
from schemelet.types.values import (
    Bool,
    Character,
    Complex,
    DottedList,
    Float,
    List,
    Number,
    Ratio,
    String,
    Vector,
)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`, raising a SchemeletError on failure."""
    match expr:
        case String() | Number() | Float() | Character() | Bool() | Complex() | Ratio() | Vector():
            return expr

        case List([Atom("quote"), datum]):
            return datum

        case Atom(name):
            return env.lookup(name)

        case List([Atom("set!"), Atom(name), form]):
            return env.set(name, evaluate(form, env))

        case List([Atom("define"), Atom(name), form]):
            return define_var_form(name, form, env, evaluate)

        case List([Atom("define"), List([Atom(name), *params]), *body]):
            return define_func_form(expr, name, params, None, body, env)

        case List([Atom("define"), DottedList([Atom(name), *params], vararg), *body]):
            return define_func_form(expr, name, params, vararg, body, env)

        case List([Atom("lambda"), List(params), *body]):
            return make_func(expr, env, params, None, body)

        case List([Atom("lambda"), DottedList(params, vararg), *body]):
            return make_func(expr, env, params, vararg, body)

        case List([Atom("lambda"), Atom() as vararg, *body]):
            return make_func(expr, env, (), vararg, body)

        case List([Atom("if"), pred, conseq, alt]):
            return if_form(pred, conseq, alt, env, evaluate)

        case List([Atom("cond"), *clauses]):
            return cond_form(expr, clauses, env, evaluate)

        case List([Atom("case"), key, *clauses]):
            return case_form(expr, key, clauses, env, evaluate)

        case List([function, *args]):
            func = evaluate(function, env)
            arg_values = [evaluate(arg, env) for arg in args]
            return apply(func, arg_values, evaluate)

    raise BadSpecialFormError("Unrecognized special form", expr)
