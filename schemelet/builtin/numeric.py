"""Numeric tower for Schemelet.

Number (int) < Ratio (Fraction) < Float (float) < Complex (complex). Host
arithmetic already promotes along this order; results are converted back to
the narrowest Value, so an integral Ratio comes back as a Number.
"""
from __future__ import annotations

import operator
from fractions import Fraction
from functools import reduce
from typing import Callable

from schemelet import LispValue
from schemelet.builtin.unpack import HostNumber, unpack_num
from schemelet.errors import DefaultError, NumArgsError, TypeMismatchError
from schemelet.types.values import Bool, Complex, Float, Number, Ratio


def to_host(value: LispValue) -> HostNumber:
    """Unpack a numeric Value, rejecting everything else."""
    if isinstance(value, (Number, Ratio, Float, Complex)):
        return value.value
    raise TypeMismatchError("number", value)


def from_host(x: HostNumber) -> LispValue:
    if isinstance(x, int):
        return Number(x)
    if isinstance(x, Fraction):
        return Number(x.numerator) if x.denominator == 1 else Ratio(x)
    if isinstance(x, float):
        return Float(x)
    if isinstance(x, complex):
        return Complex(x)
    raise TypeError(f"not a host number: {x!r}")


def _is_exact(x: HostNumber) -> bool:
    return isinstance(x, (int, Fraction))


def _divide(a: HostNumber, b: HostNumber) -> HostNumber:
    if b == 0:
        raise DefaultError("Division by zero")
    if _is_exact(a) and _is_exact(b):
        return Fraction(a) / Fraction(b)
    return a / b


def numeric_binop(op: Callable[[HostNumber, HostNumber], HostNumber]):
    """Fold `op` left over two or more numeric arguments."""

    def fn(args: list[LispValue]) -> LispValue:
        if len(args) < 2:
            raise NumArgsError(2, args)
        operands = [to_host(a) for a in args]
        try:
            return from_host(reduce(op, operands))
        except OverflowError as ex:
            # mixing a huge exact integer with a float or complex
            raise DefaultError(f"Numeric overflow: {ex}") from ex

    return fn


def _exact_integer(value: LispValue) -> int:
    if isinstance(value, Number):
        return value.value
    raise TypeMismatchError("integer", value)


def integer_binop(op: Callable[[int, int], int]):
    """Strict binary operator over Numbers; a zero divisor is an error."""

    def fn(args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise NumArgsError(2, args)
        a, b = (_exact_integer(v) for v in args)
        if b == 0:
            raise DefaultError("Division by zero")
        return Number(op(a, b))

    return fn


def _quotient(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _remainder(a: int, b: int) -> int:
    return a - b * _quotient(a, b)


def num_bool_binop(op: Callable[[HostNumber, HostNumber], bool]):
    """Strict binary comparison over leniently unpacked numbers."""

    def fn(args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise NumArgsError(2, args)
        left, right = (unpack_num(v) for v in args)
        try:
            return Bool(bool(op(left, right)))
        except TypeError:
            offending = args[0] if isinstance(left, complex) else args[1]
            raise TypeMismatchError("real number", offending) from None

    return fn


NUMERIC_PRIMITIVES: tuple[tuple[str, Callable[[list[LispValue]], LispValue]], ...] = (
    ("+", numeric_binop(operator.add)),
    ("-", numeric_binop(operator.sub)),
    ("*", numeric_binop(operator.mul)),
    ("/", numeric_binop(_divide)),
    ("mod", integer_binop(operator.mod)),
    ("quotient", integer_binop(_quotient)),
    ("remainder", integer_binop(_remainder)),
    ("=", num_bool_binop(operator.eq)),
    ("<", num_bool_binop(operator.lt)),
    (">", num_bool_binop(operator.gt)),
    ("/=", num_bool_binop(operator.ne)),
    (">=", num_bool_binop(operator.ge)),
    ("<=", num_bool_binop(operator.le)),
)
