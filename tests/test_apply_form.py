import pytest

from schemelet.errors import NotFunctionError, NumArgsError, TypeMismatchError
from schemelet.evaluation.apply import apply
from schemelet.evaluation.evaluator import evaluate
from schemelet.reader import read_expr_list
from schemelet.types import Func, List, Number, String


def run(env, source):
    result = None
    for expr in read_expr_list(source):
        result = evaluate(expr, env)
    return result


def test_apply_primitive_directly(env):
    plus = env.lookup("+")
    assert apply(plus, [Number(1), Number(2)], evaluate) == Number(3)


def test_apply_func_binds_in_closure(env):
    f = run(env, "(define k 10) (lambda (x) (+ x k))")
    assert isinstance(f, Func)
    assert apply(f, [Number(1)], evaluate) == Number(11)


def test_apply_non_function():
    with pytest.raises(NotFunctionError) as excinfo:
        apply(String("f"), [], evaluate)
    assert str(excinfo.value) == 'Unrecognized function: "f"'


def test_apply_builtin_with_list(env):
    assert run(env, "(apply + '(1 2))") == Number(3)


def test_apply_builtin_with_spread_arguments(env):
    assert run(env, "(apply * 2 3)") == Number(6)


def test_apply_builtin_with_user_function(env):
    run(env, "(define (pair a b) (cons a b))")
    assert str(run(env, "(apply pair '(1 2))")) == "(1 . 2)"


def test_apply_builtin_with_empty_list(env):
    assert run(env, "(apply list '())") == List()


@pytest.mark.parametrize("source", ["(apply)", "(apply +)"])
def test_apply_builtin_arity(env, source):
    with pytest.raises(NumArgsError) as excinfo:
        run(env, source)
    assert excinfo.value.expected == 2


def test_apply_builtin_errors_come_from_the_callee(env):
    with pytest.raises(TypeMismatchError):
        run(env, "(apply + '(1 \"a\"))")
    with pytest.raises(NotFunctionError):
        run(env, "(apply 3 '(1))")


def test_procedure_predicate(env):
    assert str(run(env, "(procedure? car)")) == "#t"
    assert str(run(env, "(procedure? (lambda (x) x))")) == "#t"
    assert str(run(env, "(procedure? 'car)")) == "#f"
