import pytest

from schemelet.builtin.list_ops import append, car, cdr, cons, is_null, list_builtin
from schemelet.errors import NumArgsError, TypeMismatchError
from schemelet.types import Atom, Bool, DottedList, List, Number, String


def L(*items):
    return List(tuple(items))


a, b, c = Atom("a"), Atom("b"), Atom("c")


@pytest.mark.parametrize(
    "arg, expected",
    [
        (L(a, b, c), a),
        (L(a), a),
        (DottedList((a, b), c), a),
    ],
)
def test_car(arg, expected):
    assert car([arg]) == expected


@pytest.mark.parametrize(
    "arg, expected",
    [
        (L(a, b, c), L(b, c)),
        (L(a), List()),
        (DottedList((a,), b), b),
        (DottedList((a, b), c), DottedList((b,), c)),
    ],
)
def test_cdr(arg, expected):
    assert cdr([arg]) == expected


@pytest.mark.parametrize("fn", [car, cdr])
@pytest.mark.parametrize("arg", [List(), Number(1), String("ab")])
def test_car_cdr_reject_non_pairs(fn, arg):
    with pytest.raises(TypeMismatchError) as excinfo:
        fn([arg])
    assert excinfo.value.expected == "list"


@pytest.mark.parametrize("fn", [car, cdr, is_null])
def test_unary_list_ops_arity(fn):
    with pytest.raises(NumArgsError):
        fn([L(a), L(b)])
    with pytest.raises(NumArgsError):
        fn([])


@pytest.mark.parametrize(
    "head, tail, expected",
    [
        (a, List(), L(a)),
        (a, L(b, c), L(a, b, c)),
        (a, DottedList((b,), c), DottedList((a, b), c)),
        (a, b, DottedList((a,), b)),
        (L(a), L(b), L(L(a), b)),
    ],
)
def test_cons(head, tail, expected):
    assert cons([head, tail]) == expected


def test_cons_arity():
    with pytest.raises(NumArgsError):
        cons([a])


def test_car_cdr_cons_agree():
    pair = cons([a, L(b, c)])
    assert car([pair]) == a
    assert cdr([pair]) == L(b, c)
    dotted = cons([a, b])
    assert car([dotted]) == a
    assert cdr([dotted]) == b


def test_null():
    assert is_null([List()]) == Bool(True)
    assert is_null([L(a)]) == Bool(False)
    assert is_null([DottedList((a,), b)]) == Bool(False)
    with pytest.raises(TypeMismatchError):
        is_null([Number(0)])


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (L(a, b), L(c), L(a, b, c)),
        (List(), L(a), L(a)),
        (L(a), List(), L(a)),
        (DottedList((a,), b), L(c), L(a, b, c)),
        (L(c), DottedList((a,), b), L(c, a, b)),
    ],
)
def test_append(left, right, expected):
    assert append([left, right]) == expected


def test_append_errors():
    with pytest.raises(TypeMismatchError):
        append([L(a)])
    with pytest.raises(NumArgsError):
        append([L(a), L(b), L(c)])
    with pytest.raises(NumArgsError):
        append([])
    with pytest.raises(TypeMismatchError):
        append([L(a), Number(1)])
    with pytest.raises(TypeMismatchError):
        append([DottedList((a, b), c), L(a)])


def test_list_builtin():
    assert list_builtin([]) == List()
    assert list_builtin([a, Number(1)]) == L(a, Number(1))
