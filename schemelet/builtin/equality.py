"""Equivalence engine: `eqv?` (strict) and `equal?` (weak, coercive).

`eqv?` compares leaves of the same variant by value and lists pairwise.
`equal?` additionally tries a fixed list of unpackers on both operands and
is true when any of them yields equal host values, or when `eqv?` holds, so
it is true on every pair `eqv?` is true on.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from schemelet import LispValue
from schemelet.builtin.unpack import unpack_bool, unpack_num, unpack_str
from schemelet.errors import NumArgsError, SchemeletError
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

_SCALARS = (Bool, Number, Ratio, Character, String)


def _same_float(x: float, y: float) -> bool:
    # NaN is eqv? to itself so that eqv? stays reflexive
    return x == y or (math.isnan(x) and math.isnan(y))


def _flatten(value: DottedList) -> List:
    return List(value.items + (value.tail,))


def _pairwise(xs: tuple, ys: tuple, same: Callable[[LispValue, LispValue], bool]) -> bool:
    return len(xs) == len(ys) and all(same(x, y) for x, y in zip(xs, ys))


def eqv(a: LispValue, b: LispValue) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, _SCALARS):
        return a.value == b.value
    if isinstance(a, Atom):
        return a.name == b.name
    if isinstance(a, Float):
        return _same_float(a.value, b.value)
    if isinstance(a, Complex):
        return _same_float(a.value.real, b.value.real) and _same_float(
            a.value.imag, b.value.imag
        )
    if isinstance(a, DottedList):
        return eqv(_flatten(a), _flatten(b))
    if isinstance(a, (List, Vector)):
        return _pairwise(a.items, b.items, eqv)
    # Procedures and ports: only the very same object
    return a is b


@dataclass(frozen=True)
class Unpacker:
    """Extracts one host representation from a Value; raises on mismatch."""

    name: str
    unpack: Callable[[LispValue], Any]

    def equals(self, a: LispValue, b: LispValue) -> bool:
        try:
            return self.unpack(a) == self.unpack(b)
        except SchemeletError:
            return False


UNPACKERS: tuple[Unpacker, ...] = (
    Unpacker("number", unpack_num),
    Unpacker("string", unpack_str),
    Unpacker("boolean", unpack_bool),
)


def equal(a: LispValue, b: LispValue) -> bool:
    if isinstance(a, List) and isinstance(b, List):
        return _pairwise(a.items, b.items, equal)
    if isinstance(a, DottedList) and isinstance(b, DottedList):
        return equal(_flatten(a), _flatten(b))
    return any(u.equals(a, b) for u in UNPACKERS) or eqv(a, b)


# -------------------------------
# Primitive wrappers
# -------------------------------
def eqv_builtin(args: list[LispValue]) -> Bool:
    """(eqv? a b) and (eq? a b)"""
    if len(args) != 2:
        raise NumArgsError(2, args)
    return Bool(eqv(*args))


def equal_builtin(args: list[LispValue]) -> Bool:
    """(equal? a b)"""
    if len(args) != 2:
        raise NumArgsError(2, args)
    return Bool(equal(*args))
