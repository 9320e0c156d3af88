"""Built-in functions for the Schemelet runtime environment.

This module assembles the primitive table (type predicates, symbol
conversions, comparisons, list operations, equivalence, numeric tower and
I/O) and installs it into a fresh root environment. The table is built once
at import time and is reachable only through environment lookup.
"""
from __future__ import annotations

import operator
from types import MappingProxyType
from typing import Any, Callable, Mapping

from schemelet import LispValue
from schemelet.builtin.equality import equal_builtin, eqv_builtin
from schemelet.builtin.io_builtin import IO_PRIMITIVES
from schemelet.builtin.list_ops import LIST_PRIMITIVES
from schemelet.builtin.numeric import NUMERIC_PRIMITIVES
from schemelet.builtin.unpack import unpack_bool, unpack_str
from schemelet.errors import NumArgsError
from schemelet.evaluation.apply import apply
from schemelet.evaluation.evaluator import evaluate
from schemelet.types.environment import Environment
from schemelet.types.lambda_fn import Func
from schemelet.types.symbol import Atom
from schemelet.types.values import (
    Bool,
    Character,
    Complex,
    DottedList,
    Float,
    List,
    Number,
    PrimitiveFunc,
    Ratio,
    String,
    Vector,
)

PrimitiveFn = Callable[[list[LispValue]], LispValue]


# -------------------------------
# Unary operators and predicates
# -------------------------------
def unary_op(f: Callable[[LispValue], LispValue]) -> PrimitiveFn:
    def fn(args: list[LispValue]) -> LispValue:
        if len(args) != 1:
            raise NumArgsError(1, args)
        return f(args[0])

    return fn


def type_predicate(*kinds: type) -> PrimitiveFn:
    """Predicate: #t if the single argument is one of `kinds`, else #f."""
    return unary_op(lambda v: Bool(isinstance(v, kinds)))


def symbol_to_string(value: LispValue) -> String:
    # Non-symbols give the empty string rather than an error
    return String(value.name) if isinstance(value, Atom) else String("")


def string_to_symbol(value: LispValue) -> Atom:
    # Non-strings give the empty symbol rather than an error
    return Atom(value.value) if isinstance(value, String) else Atom("")


# -------------------------------
# Binary boolean operators
# -------------------------------
def bool_binop(unpacker: Callable[[LispValue], Any], op: Callable[[Any, Any], bool]) -> PrimitiveFn:
    """Unpack exactly two arguments with `unpacker` and compare them with `op`."""

    def fn(args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise NumArgsError(2, args)
        left, right = unpacker(args[0]), unpacker(args[1])
        return Bool(bool(op(left, right)))

    return fn


def str_bool_binop(op: Callable[[str, str], bool]) -> PrimitiveFn:
    return bool_binop(unpack_str, op)


def bool_bool_binop(op: Callable[[bool, bool], bool]) -> PrimitiveFn:
    return bool_binop(unpack_bool, op)


# -------------------------------
# Function application
# -------------------------------
def apply_builtin(args: list[LispValue]) -> LispValue:
    """(apply f '(a b)) or (apply f a b)"""
    match args:
        case [func, List(items)]:
            return apply(func, list(items), evaluate)
        case [func, *rest] if rest:
            return apply(func, rest, evaluate)
        case _:
            raise NumArgsError(2, args)


def is_procedure(value: LispValue) -> Bool:
    return Bool(isinstance(value, (PrimitiveFunc, Func)))


# -------------------------------
# Registration
# -------------------------------
_CORE_PRIMITIVES: tuple[tuple[str, PrimitiveFn], ...] = (
    # Type testing functions
    ("symbol?", type_predicate(Atom)),
    ("number?", type_predicate(Number)),
    ("float?", type_predicate(Float)),
    ("string?", type_predicate(String)),
    ("char?", type_predicate(Character)),
    ("bool?", type_predicate(Bool)),
    ("ratio?", type_predicate(Ratio)),
    ("complex?", type_predicate(Complex)),
    ("list?", type_predicate(List, DottedList)),
    ("vector?", type_predicate(Vector)),
    ("procedure?", unary_op(is_procedure)),
    # Symbol handling functions
    ("symbol->string", unary_op(symbol_to_string)),
    ("string->symbol", unary_op(string_to_symbol)),
    # Boolean operators
    ("&&", bool_bool_binop(lambda a, b: a and b)),
    ("||", bool_bool_binop(lambda a, b: a or b)),
    # String boolean operators
    ("string=?", str_bool_binop(operator.eq)),
    ("string<?", str_bool_binop(operator.lt)),
    ("string>?", str_bool_binop(operator.gt)),
    ("string<=?", str_bool_binop(operator.le)),
    ("string>=?", str_bool_binop(operator.ge)),
    # Equivalence primitives
    ("eq?", eqv_builtin),
    ("eqv?", eqv_builtin),
    ("equal?", equal_builtin),
    ("apply", apply_builtin),
)


def _build_table() -> Mapping[str, PrimitiveFunc]:
    table: dict[str, PrimitiveFunc] = {}
    for group in (NUMERIC_PRIMITIVES, _CORE_PRIMITIVES, LIST_PRIMITIVES, IO_PRIMITIVES):
        for name, fn in group:
            table[name] = PrimitiveFunc(name, fn)
    return MappingProxyType(table)


_PRIMITIVES: Mapping[str, PrimitiveFunc] = _build_table()


def primitive_names() -> list[str]:
    return sorted(_PRIMITIVES)


def register(env: Environment) -> None:
    """Install every primitive into `env` (normally the root frame)."""
    env.update(_PRIMITIVES.items())


def primitive_bindings() -> Environment:
    """Create a root environment pre-populated with the primitive table."""
    env = Environment()
    register(env)
    return env
