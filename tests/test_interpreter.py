import logging
import sys

import pytest

from schemelet.errors import DefaultError, NumArgsError, ParserError, UnboundVarError
from schemelet.config import get_recursion_limit
from schemelet.interpreter import Interpreter
from schemelet.types import Atom, List, Number


@pytest.mark.parametrize(
    "source, rendered",
    [
        ("(+ 2 3)", "5"),
        ("(if #f 1 2)", "2"),
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(cdr '(a . b))", "b"),
        ("'(a b . (c d))", "(a b c d)"),
        ("(/ 6 4)", "3/2"),
        ("(string->symbol \"abc\")", "abc"),
        ("(eqv? 2 \"2\")", "#f"),
        ("(equal? 2 \"2\")", "#t"),
        ("(case (* 2 3) ((2 3 5 7) 'prime) ((1 4 6 8 9) 'composite))", "composite"),
        ("(append '(1) '(2 3))", "(1 2 3)"),
        ("#(1 \"a\" #\\b)", "#(1 \"a\" #\\b)"),
    ],
)
def test_eval_string(interp, source, rendered):
    assert interp.eval_string(source) == rendered


def test_definitions_persist_between_calls(interp):
    interp.eval("(define (f x) (+ x 1))")
    assert interp.eval("(f 5)") == Number(6)


def test_eval_returns_last_expression(interp):
    assert interp.eval("(define x 1) (set! x 2) (+ x 40)") == Number(42)


def test_eval_of_empty_source_is_the_empty_list(interp):
    assert interp.eval("") == List()
    assert interp.eval("; only a comment") == List()


def test_counter_example(interp):
    interp.eval("""
        (define (make-counter)
          ((lambda (n) (lambda () (set! n (+ n 1)) n)) 0))
        (define c (make-counter))
    """)
    assert interp.eval("(c)") == Number(1)
    assert interp.eval("(c)") == Number(2)


def test_counter_with_internal_define(interp):
    interp.eval("(define (make-counter) (define n 0) (lambda () (set! n (+ n 1)) n))")
    interp.eval("(define c (make-counter))")
    assert interp.eval("(c)") == Number(1)
    assert interp.eval("(c)") == Number(2)
    assert not interp.env.is_bound("n")


def test_errors_stop_evaluation(interp):
    with pytest.raises(UnboundVarError):
        interp.eval("(define a 1) (undefined) (define b 2)")
    assert interp.env.is_bound("a")
    assert not interp.env.is_bound("b")


@pytest.mark.parametrize(
    "source, message",
    [
        ("(car '())", "Invalid type: expected list, found ()"),
        ("(+ 1)", "Expected 2 args; found values 1"),
        ("x", "Getting an unbound variable: x"),
        ("(set! x 1)", "Setting an unbound variable: x"),
        ("(1 2)", "Unrecognized function: 1"),
        ("(/ 1 0)", "Division by zero"),
        ("(+ 1 2", "Parse error at line 1, column 7: Unexpected end of input, expected ')'"),
    ],
)
def test_eval_string_renders_errors(interp, source, message):
    assert interp.eval_string(source) == message


def test_parse_errors_are_raised_before_evaluation(interp):
    with pytest.raises(ParserError):
        interp.eval("(define a 1) )")
    assert not interp.env.is_bound("a")


def test_deep_recursion_within_host_limit(interp):
    interp.eval("(define (count-down n) (if (= n 0) 0 (+ 1 (count-down (- n 1)))))")
    assert interp.eval("(count-down 3000)") == Number(3000)


@pytest.mark.parametrize(
    "source, rendered",
    [
        ("1" + "0" * 5000, "1" + "0" * 5000),
        ("(* 1" + "0" * 3000 + " 1" + "0" * 3000 + ")", "1" + "0" * 6000),
    ],
)
def test_huge_integers_read_and_print(interp, source, rendered):
    assert interp.eval_string(source) == rendered


def test_numeric_overflow_is_rendered_as_error(interp):
    rendered = interp.eval_string("(+ 1.5 1" + "0" * 400 + ")")
    assert rendered.startswith("Numeric overflow")


def test_recursion_limit_from_environment(monkeypatch):
    previous = sys.getrecursionlimit()
    monkeypatch.setenv("SCHEMELET_RECURSION_LIMIT", str(previous + 1000))
    try:
        Interpreter(prelude=None)
        assert sys.getrecursionlimit() == previous + 1000
    finally:
        sys.setrecursionlimit(previous)


@pytest.mark.parametrize("raw", ["", "abc", "0", "-5"])
def test_recursion_limit_default(monkeypatch, raw):
    monkeypatch.setenv("SCHEMELET_RECURSION_LIMIT", raw)
    assert get_recursion_limit() == 50_000


def test_runaway_recursion_is_reported(interp):
    interp.eval("(define (down n) (+ 1 (down n)))")
    with pytest.raises(DefaultError) as excinfo:
        interp.eval("(down 1)")
    assert str(excinfo.value) == "Maximum recursion depth exceeded"
    assert interp.eval("(+ 1 1)") == Number(2)


def test_inline_prelude():
    interp = Interpreter(prelude="(define answer 42)")
    assert interp.eval("answer") == Number(42)


def test_no_prelude_has_primitives_only(interp):
    assert interp.env.is_bound("car")
    assert not interp.env.is_bound("map")


def test_load_file(interp, tmp_path):
    script = tmp_path / "script.scm"
    script.write_text("(define (sq x) (* x x))\n(sq 7)\n", encoding="utf-8")
    assert interp.load(script) == Number(49)
    assert interp.eval("(sq 3)") == Number(9)


def test_load_missing_file(interp, tmp_path):
    with pytest.raises(DefaultError):
        interp.load(tmp_path / "missing.scm")


def test_auto_prelude_from_environment_variable(monkeypatch, tmp_path):
    prelude = tmp_path / "boot.scm"
    prelude.write_text("(define greeting 'hello)", encoding="utf-8")
    monkeypatch.setenv("SCHEMELET_PRELUDE_PATH", str(prelude))
    assert Interpreter().eval("greeting") == Atom("hello")


def test_auto_prelude_missing_logs_warning(monkeypatch, tmp_path, caplog):
    monkeypatch.setenv("SCHEMELET_PRELUDE_PATH", str(tmp_path / "missing.scm"))
    with caplog.at_level(logging.WARNING, logger="schemelet.interpreter"):
        interp = Interpreter()
    assert "not found" in caplog.text
    assert interp.env.is_bound("car")


def test_prelude_errors_propagate(monkeypatch, tmp_path):
    prelude = tmp_path / "broken.scm"
    prelude.write_text("(car 1 2)", encoding="utf-8")
    monkeypatch.setenv("SCHEMELET_PRELUDE_PATH", str(prelude))
    with pytest.raises(NumArgsError):
        Interpreter()
