"""Unpackers: extract a host representation from a Value or fail with
TypeMismatchError. Shared by the comparison primitives and `equal?`."""
from __future__ import annotations

from fractions import Fraction
from typing import Union

from schemelet import LispValue
from schemelet.errors import TypeMismatchError
from schemelet.reader.parser import parse_number
from schemelet.types.values import Bool, Complex, Float, List, Number, Ratio, String

HostNumber = Union[int, Fraction, float, complex]


def unpack_num(value: LispValue) -> HostNumber:
    """Lenient unpacking used by comparisons and `equal?`.

    Numbers unpack directly, a String unpacks when its text reads as a
    number, and a one-element List unpacks its element.
    """
    if isinstance(value, (Number, Ratio, Float, Complex)):
        return value.value
    if isinstance(value, String):
        try:
            parsed = parse_number(value.value.strip())
        except ValueError:
            # digit string beyond the host int conversion limit
            parsed = None
        if parsed is not None:
            return parsed.value
    if isinstance(value, List) and len(value.items) == 1:
        return unpack_num(value.items[0])
    raise TypeMismatchError("number", value)


def unpack_str(value: LispValue) -> str:
    if isinstance(value, String):
        return value.value
    if isinstance(value, (Number, Bool)):
        return str(value)
    raise TypeMismatchError("string", value)


def unpack_bool(value: LispValue) -> bool:
    if isinstance(value, Bool):
        return value.value
    raise TypeMismatchError("boolean", value)
