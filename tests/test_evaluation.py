import math

import pytest
from hypothesis import given, strategies as st

from humble.eval import evaluate, evaluate_all, evaluate_expr
from humble.errors import (
    EmptyApplication,
    HumbleError,
    NotCallable,
    UnboundName,
    UnbalancedExpression,
    UnexpectedCloseParen,
    UnexpectedEndOfInput,
)
from humble.types.builtin import Builtin
from humble.types.environment import Environment
from humble.types.symbol import Symbol

# -----------------------------------------------------
# Expression trees
# -----------------------------------------------------


def test_self_evaluating_numbers(env):
    assert evaluate_expr(1.0, env) == 1.0
    assert evaluate_expr(3.14, env) == 3.14


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate_expr(Symbol("x"), env) == 42.0
    with pytest.raises(UnboundName):
        evaluate_expr(Symbol("z"), env)


def test_simple_expression(env):
    assert evaluate_expr([Symbol("+"), 1.0, 2.0], env) == 3.0


def test_empty_application(env):
    with pytest.raises(EmptyApplication):
        evaluate_expr([], env)


def test_head_may_be_any_expression(env):
    assert evaluate("((begin +) 1 2)", env) == 3


def test_arguments_evaluated_left_to_right(env):
    calls = []

    def record(args):
        calls.append(args[0])
        return args[0]

    env.define(Symbol("note"), Builtin("note", record))
    evaluate("(+ (note 1) (note 2) (note 3))", env)
    assert calls == [1.0, 2.0, 3.0]


def test_argument_failure_short_circuits(env):
    calls = []
    env.define(Symbol("note"), Builtin("note", lambda args: calls.append(args[0]) or args[0]))
    with pytest.raises(UnboundName):
        evaluate("(+ (note 1) undefined (note 3))", env)
    assert calls == [1.0]


def test_not_callable_checked_before_arguments(env):
    calls = []
    env.define(Symbol("note"), Builtin("note", lambda args: calls.append(args[0]) or args[0]))
    with pytest.raises(NotCallable):
        evaluate("(1 (note 2))", env)
    assert calls == []


@pytest.mark.parametrize("source,head", [("(1 2 3)", 1.0), ("((+ 1 2) 4)", 3.0)])
def test_not_callable(env, source, head):
    with pytest.raises(NotCallable) as exc:
        evaluate(source, env)
    assert exc.value.value == head
    assert "Cannot apply non-function" in str(exc.value)


def test_unbound_head(env):
    with pytest.raises(UnboundName) as exc:
        evaluate("(frobnicate 1)", env)
    assert exc.value.name == Symbol("frobnicate")


# -----------------------------------------------------
# Text entry point
# -----------------------------------------------------


def test_evaluate_reads_one_form(env):
    assert evaluate("(+ 1 2) (undefined)", env) == 3


def test_evaluate_all(env):
    assert evaluate_all("(define x 2) (* x x) ; square\n x", env) == [2, 4, 2]


@pytest.mark.parametrize(
    "source,error",
    [
        ("", UnexpectedEndOfInput),
        ("(+ 1 2", UnbalancedExpression),
        (")", UnexpectedCloseParen),
        ("()", EmptyApplication),
    ],
)
def test_errors(env, source, error):
    with pytest.raises(error):
        evaluate(source, env)


def test_errors_share_base_class(env):
    for source in ["(", "nope", "(1)", "(/ 1 0)", "(define)"]:
        with pytest.raises(HumbleError):
            evaluate(source, env)


def test_environment_survives_failed_evaluation(env):
    evaluate("(define x 5)", env)
    with pytest.raises(UnboundName):
        evaluate("(+ x y)", env)
    assert evaluate("x", env) == 5


def test_partial_effects_survive(env):
    evaluate("(define x 1)", env)
    with pytest.raises(NotCallable):
        evaluate("(begin (set! x 2) (x))", env)
    assert evaluate("x", env) == 2


def test_works_with_any_injected_environment():
    env = Environment()
    env.define(Symbol("twice"), Builtin("twice", lambda args: args[0] * 2))
    assert evaluate("(twice 21)", env) == 42
    with pytest.raises(UnboundName):
        evaluate("(+ 1 2)", env)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_numeric_literals_evaluate_to_themselves(n):
    from humble.builtin.env_builtin import global_environment

    assert evaluate(repr(n), global_environment()) == n


@given(st.integers(min_value=-10**6, max_value=10**6), st.integers(min_value=-10**6, max_value=10**6))
def test_addition_matches_python(a, b):
    from humble.builtin.env_builtin import global_environment

    assert evaluate(f"(+ {a} {b})", global_environment()) == a + b


def test_infinity_literal(env):
    assert math.isinf(evaluate("inf", env))
