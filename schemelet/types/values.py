"""Value variants of the Schemelet data model.

Code and data share this representation. Every variant derives from Value so
that the evaluator can dispatch over shapes with a single `match` statement.
Sequence variants hold tuples and are never mutated after construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import IO, Callable, Iterable, Sequence


class Value:
    """Base class for every datum the reader produces and the evaluator returns."""

    __slots__ = ()


NAMED_CHARS: dict[str, str] = {
    " ": "space",
    "\n": "newline",
    "\t": "tab",
    "\r": "return",
}

_STRING_ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _format_real(x: float) -> str:
    if math.isfinite(x) and x == int(x):
        return f"{int(x)}.0"
    return repr(x)


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Float(Value):
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class Ratio(Value):
    value: Fraction

    def __str__(self) -> str:
        return f"{self.value.numerator}/{self.value.denominator}"


@dataclass(frozen=True, slots=True)
class Complex(Value):
    value: complex

    def __str__(self) -> str:
        real, imag = self.value.real, self.value.imag
        sign = "-" if imag < 0 or (imag == 0 and math.copysign(1.0, imag) < 0) else "+"
        return f"{_format_real(real)}{sign}{_format_real(abs(imag))}i"


@dataclass(frozen=True, slots=True)
class String(Value):
    value: str

    def __str__(self) -> str:
        body = "".join(_STRING_ESCAPES.get(c, c) for c in self.value)
        return f'"{body}"'


@dataclass(frozen=True, slots=True)
class Character(Value):
    value: str

    def __str__(self) -> str:
        return "#\\" + NAMED_CHARS.get(self.value, self.value)


@dataclass(frozen=True, slots=True)
class Bool(Value):
    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True, slots=True)
class Vector(Value):
    items: tuple[Value, ...] = ()

    def __str__(self) -> str:
        return "#(" + " ".join(str(v) for v in self.items) + ")"


@dataclass(frozen=True, slots=True)
class List(Value):
    """A proper list. The empty tuple is the empty list."""

    items: tuple[Value, ...] = ()

    def __str__(self) -> str:
        return "(" + " ".join(str(v) for v in self.items) + ")"


@dataclass(frozen=True, slots=True)
class DottedList(Value):
    """An improper list. `tail` is never a List; build through make_dotted."""

    items: tuple[Value, ...]
    tail: Value

    def __str__(self) -> str:
        head = " ".join(str(v) for v in self.items)
        return f"({head} . {self.tail})"


def make_list(items: Iterable[Value] = ()) -> List:
    return List(tuple(items))


def make_dotted(items: Sequence[Value], tail: Value) -> Value:
    """Build `(items... . tail)` keeping the proper/improper invariant.

    A List tail is spliced into a proper list, a DottedList tail is flattened
    into one longer DottedList.
    """
    if isinstance(tail, List):
        return List(tuple(items) + tail.items)
    if isinstance(tail, DottedList):
        return DottedList(tuple(items) + tail.items, tail.tail)
    if not items:
        return tail
    return DottedList(tuple(items), tail)


@dataclass(frozen=True, slots=True, eq=False)
class PrimitiveFunc(Value):
    """A builtin procedure: a host function over a list of argument Values."""

    name: str
    fn: Callable[[list[Value]], Value]

    def __call__(self, args: list[Value]) -> Value:
        return self.fn(args)

    def __str__(self) -> str:
        return f"<primitive:{self.name}>"


@dataclass(frozen=True, slots=True, eq=False)
class Port(Value):
    """An open host file handle."""

    handle: IO

    def __str__(self) -> str:
        return "<IO port>"


TRUE = Bool(True)
FALSE = Bool(False)
NIL = List()
