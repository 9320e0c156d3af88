"""List primitives: car, cdr, cons, null?, append, list."""
from __future__ import annotations

from schemelet import LispValue
from schemelet.errors import NumArgsError, TypeMismatchError
from schemelet.types.values import Bool, DottedList, List, make_dotted


def car(args: list[LispValue]) -> LispValue:
    """Return the head of a non-empty list or dotted list."""
    match args:
        case [List((x, *_))] | [DottedList((x, *_), _)]:
            return x
        case [bad_arg]:
            raise TypeMismatchError("list", bad_arg)
        case _:
            raise NumArgsError(1, args)


def cdr(args: list[LispValue]) -> LispValue:
    """Return everything after the head; `(cdr '(a . b))` is `b`."""
    match args:
        case [List((_, *xs))]:
            return List(tuple(xs))
        case [DottedList((_,), tail)]:
            return tail
        case [DottedList((_, *xs), tail)]:
            return DottedList(tuple(xs), tail)
        case [bad_arg]:
            raise TypeMismatchError("list", bad_arg)
        case _:
            raise NumArgsError(1, args)


def cons(args: list[LispValue]) -> LispValue:
    """Prepend to a list; a non-list second argument makes a dotted pair."""
    if len(args) != 2:
        raise NumArgsError(2, args)
    head, tail = args
    return make_dotted((head,), tail)


def is_null(args: list[LispValue]) -> Bool:
    match args:
        case [List(items)]:
            return Bool(not items)
        case [DottedList()]:
            return Bool(False)
        case [bad_arg]:
            raise TypeMismatchError("list", bad_arg)
        case _:
            raise NumArgsError(1, args)


def append(args: list[LispValue]) -> List:
    """Concatenate two lists.

    A single-element dotted list operand `(a . b)` contributes both `a` and
    `b`; longer dotted lists are not accepted.
    """
    if len(args) != 2:
        if len(args) == 1:
            raise TypeMismatchError("list", args[0])
        raise NumArgsError(2, args)
    parts = []
    for arg in args:
        match arg:
            case List(items):
                parts.extend(items)
            case DottedList((x,), tail):
                parts.extend((x, tail))
            case _:
                raise TypeMismatchError("list", arg)
    return List(tuple(parts))


def list_builtin(args: list[LispValue]) -> List:
    return List(tuple(args))


LIST_PRIMITIVES = (
    ("car", car),
    ("cdr", cdr),
    ("cons", cons),
    ("null?", is_null),
    ("append", append),
    ("list", list_builtin),
)
