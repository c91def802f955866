import pytest
from hypothesis import given, strategies as st

from bl.errors import InvariantViolation
from bl.evaluation.evaluator import evaluate
from bl.printer import render
from bl.types.error_value import ErrorValue
from bl.types.function import Closure, Native
from bl.types.pair import Pair

# -----------------------------------------------------
# Scenarios
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(if t 1 2)", "1"),
        ("(if nil 1 2)", "2"),
        ("((lambda (x y) (+ x y)) 3 4)", "7"),
        ("((lambda (x) x) 1 2)", "ERROR: too many lambda args"),
        ("foo", "ERROR: undefined symbol"),
        ("(car 5)", "ERROR: expected cons"),
    ]
)
def test_scenarios(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", "42"),
        ("-7", "-7"),
        ("0x10", "16"),
        ("t", "t"),
        ("nil", "NIL"),
        ("()", "NIL"),
        ("+", "[function]"),
        ("car", "[function]"),
        ("(lambda (x) x)", "[function]"),
    ]
)
def test_atoms(run, source, expected):
    assert run(source) == expected


def test_literal_integers_are_values(interp):
    assert interp.eval("12345678901234567890123") == [12345678901234567890123]


def test_symbol_lookup(interp, sym):
    interp.env.define(sym("x"), 42)
    interp.env.define(sym("empty"), None)
    assert interp.eval("x") == [42]
    assert interp.eval("empty") == [None]


# -----------------------------------------------------
# quote
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote x)", "(x . NIL)"),
        ("'x", "(x . NIL)"),
        ("'(1 2)", "((1 . (2 . NIL)) . NIL)"),
        ("(quote)", "NIL"),
        ("(car 'x)", "x"),
        ("(cdr 'x)", "NIL"),
        ("(car '(1 2))", "(1 . (2 . NIL))"),
        ("(car (car '(1 2)))", "1"),
        ("(cdr (car '(1 2)))", "(2 . NIL)"),
        ("'foo", "(foo . NIL)"),  # quoted symbols are not looked up
    ]
)
def test_quote(run, source, expected):
    assert run(source) == expected


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 0 1 2)", "1"),
        ("(if '() 1 2)", "1"),  # (quote ()) is (NIL . NIL), not the empty list
        ("(if () 1 2)", "2"),
        ("(if (car '(1)) 'yes 'no)", "(yes . NIL)"),
        ("(if (cdr 'x) 'yes 'no)", "(no . NIL)"),
        ("(if t 1 (undefined))", "1"),
        ("(if nil (undefined) 2)", "2"),
        ("(if (undefined) 1 2)", "ERROR: undefined symbol"),
        ("(if t (car 5) 2)", "ERROR: expected cons"),
        ("(if t 1 2 3)", "1"),
        ("(if t 1)", "ERROR: CAR: expected cons"),
        ("(if t)", "ERROR: CAR: expected cons"),
        ("(if)", "ERROR: CAR: expected cons"),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_evaluates_only_the_chosen_branch(interp, sym):
    calls = []

    def tick(args):
        calls.append(Pair.length(args))
        return 1

    interp.env.define(sym("tick"), Native("tick", tick))
    assert interp.eval("(if t (tick) (tick 1))") == [1]
    assert interp.eval("(if nil (tick 1 2) (tick))") == [1]
    assert calls == [0, 0]


def test_if_with_missing_else_does_not_evaluate_condition(interp, sym):
    calls = []
    interp.env.define(sym("tick"), Native("tick", lambda args: calls.append(1) or 1))
    assert render(interp.eval("(if (tick) 1)")[0]) == "ERROR: CAR: expected cons"
    assert calls == []


def test_malformed_forms_are_told_apart_from_car_errors(run):
    assert run("(if t 1)") == "ERROR: CAR: expected cons"
    assert run("(lambda x x)") == "ERROR: CAR: expected cons"
    assert run("(car 5)") == "ERROR: expected cons"


# -----------------------------------------------------
# lambda
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("((lambda () 5))", "5"),
        ("((lambda (x) x))", "ERROR: too few lambda args"),
        ("((lambda (x y) x) 1)", "ERROR: too few lambda args"),
        ("((lambda () 1) 2)", "ERROR: too many lambda args"),
        ("(lambda (1) x)", "ERROR: expected symbol"),
        ("(lambda (x (y)) x)", "ERROR: expected symbol"),
        ("(lambda (x) x x)", "ERROR: too many args"),
        ("(lambda (x))", "ERROR: CAR: expected cons"),
        ("(lambda x x)", "ERROR: CAR: expected cons"),
        ("(lambda)", "ERROR: CAR: expected cons"),
        ("((lambda (x) ((lambda (x) x) 2)) 1)", "2"),
        ("((lambda (x y) (+ x y y)) 1 2)", "5"),
        ("((lambda (f) (f 1 2)) +)", "3"),
        ("((lambda (x) (+ x y)) 1)", "ERROR: undefined symbol"),
        ("((lambda (x) x) nil)", "NIL"),
        ("(((lambda () (lambda (x) x))) 9)", "9"),
    ]
)
def test_lambda(run, source, expected):
    assert run(source) == expected


def test_lambda_builds_closure(interp, sym):
    [fn] = interp.eval("(lambda (a b) (+ a b))")
    assert isinstance(fn, Closure)
    assert fn.params == (sym("a"), sym("b"))
    assert fn.arity == 2
    assert render(fn.body) == "(+ . (a . (b . NIL)))"


def test_scope_is_dynamic(run):
    # f refers to x, which is only bound in the frame active where f is called.
    source = "((lambda (f) ((lambda (x) (f)) 2)) (lambda () x))"
    assert run(source) == "2"


def test_closures_capture_nothing(run):
    # The inner lambda escapes the frame binding x, so x is unbound at the call.
    assert run("(((lambda (x) (lambda () x)) 1))") == "ERROR: undefined symbol"


def test_call_frames_do_not_leak(interp):
    assert render(interp.eval("((lambda (x) x) 1)")[0]) == "1"
    assert render(interp.eval("x")[0]) == "ERROR: undefined symbol"
    assert interp.env.depth() == 1


@given(st.integers(min_value=0, max_value=6), st.integers(min_value=0, max_value=6))
def test_closure_arity_must_match(n_params, n_args):
    from bl.interpreter import Interpreter

    params = " ".join(f"p{i}" for i in range(n_params))
    args = " ".join(str(i) for i in range(n_args))
    [result] = Interpreter().eval(f"((lambda ({params}) (+ {params})) {args})")
    if n_args > n_params:
        assert result == ErrorValue("too many lambda args")
    elif n_args < n_params:
        assert result == ErrorValue("too few lambda args")
    else:
        assert result == sum(range(n_args))


# -----------------------------------------------------
# Application and error propagation
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(5 1)", "ERROR: expected function"),
        ("(nil 1)", "ERROR: expected function"),
        ("(t)", "ERROR: expected function"),
        ("('x)", "ERROR: expected function"),
        ("(foo 1)", "ERROR: undefined symbol"),
        ("(+ 1 (foo) (car 5))", "ERROR: undefined symbol"),
        ("(+ 1 (car 5) (foo))", "ERROR: expected cons"),
        ("(+ (+ (+ (bar))))", "ERROR: undefined symbol"),
        ("((car 5) (foo))", "ERROR: expected cons"),
    ]
)
def test_application_errors(run, source, expected):
    assert run(source) == expected


def test_first_error_short_circuits(interp, sym):
    calls = []
    boom = ErrorValue("boom")

    interp.env.define(sym("tick"), Native("tick", lambda args: calls.append(1) or 1))
    interp.env.define(sym("boom"), Native("boom", lambda args: boom))

    [result] = interp.eval("(+ (tick) (boom) (tick))")
    assert result is boom
    assert calls == [1]

    [result] = interp.eval("((lambda (x) (tick)) (boom))")
    assert result is boom
    assert calls == [1]


def test_improper_argument_list(interp, sym):
    form = Pair(sym("+"), Pair(1, 2))
    assert evaluate(form, interp.env, interp.ctx) == ErrorValue("expected list")


def test_native_receives_argument_list(interp, sym):
    seen = []
    interp.env.define(sym("spy"), Native("spy", lambda args: seen.append(args) or None))
    interp.eval("(spy 1 'a)")
    assert render(seen[0]) == "(1 . ((a . NIL) . NIL))"
    interp.eval("(spy)")
    assert seen[1] is None


def test_runaway_recursion_is_an_error(run):
    assert run("((lambda (f) (f f)) (lambda (f) (f f)))") == "ERROR: recursion too deep"


def test_unknown_value_is_fatal(interp):
    with pytest.raises(InvariantViolation):
        evaluate("a string", interp.env, interp.ctx)
