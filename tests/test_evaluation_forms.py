import pytest

from humble.eval import evaluate
from humble.errors import MalformedForm, UnboundName
from humble.types.closure import Closure
from humble.types.symbol import Symbol


# ------------------ define ------------------

def test_define_returns_value_and_binds(env):
    assert evaluate("(define x 5)", env) == 5
    assert evaluate("x", env) == 5


def test_define_overwrites(env):
    evaluate("(define x 5)", env)
    evaluate("(define x (+ x 1))", env)
    assert evaluate("x", env) == 6


@pytest.mark.parametrize("source", ["(define)", "(define x)", "(define x 1 2)", "(define 1 2)", "(define (f) 2)"])
def test_define_malformed(env, source):
    with pytest.raises(MalformedForm) as exc:
        evaluate(source, env)
    assert exc.value.form == "define"


# ------------------ set! ------------------

def test_set_updates_existing(env):
    evaluate("(define x 1)", env)
    assert evaluate("(set! x 10)", env) == 10
    assert evaluate("x", env) == 10


def test_set_unbound(env):
    with pytest.raises(UnboundName):
        evaluate("(set! nowhere 1)", env)
    with pytest.raises(UnboundName):
        evaluate("nowhere", env)


@pytest.mark.parametrize("source", ["(set! x)", "(set! x 1 2)", "(set! 1 2)"])
def test_set_malformed(env, source):
    evaluate("(define x 0)", env)
    with pytest.raises(MalformedForm):
        evaluate(source, env)


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (< 1 2) 10 20)", 10),
        ("(if (< 2 1) 10 20)", 20),
        ("(if 1 10)", 10),
        ("(if 0 10)", 0),
        ("(if 0 10 20)", 20),
        ("(if -0.0 10 20)", 20),
        ("(if 0.5 10 20)", 10),
        ("(if -1 10 20)", 10),
        ("(if + 10 20)", 10),
    ]
)
def test_if(env, source, expected):
    assert evaluate(source, env) == expected


def test_if_evaluates_only_chosen_branch(env):
    assert evaluate("(if 1 2 undefined)", env) == 2
    assert evaluate("(if 0 undefined 3)", env) == 3


@pytest.mark.parametrize("source", ["(if)", "(if 1)", "(if 1 2 3 4)"])
def test_if_malformed(env, source):
    with pytest.raises(MalformedForm):
        evaluate(source, env)


# ------------------ and / or ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(or)", 0),
        ("(or 0)", 0),
        ("(or 1 2)", 1),
        ("(or 0 2 1)", 2),
        ("(or 0 0 0)", 0),
        ("(and)", 1),
        ("(and 1 2)", 1),
        ("(and 1 0 3)", 0),
        ("(and 5)", 1),
        ("(and 0)", 0),
    ]
)
def test_logic(env, source, expected):
    assert evaluate(source, env) == expected


def test_or_short_circuits(env):
    assert evaluate("(or 7 undefined)", env) == 7


def test_and_short_circuits(env):
    assert evaluate("(and 0 undefined)", env) == 0


def test_or_returns_callable_value(env):
    assert isinstance(evaluate("(or 0 (lambda (x) x))", env), Closure)


# ------------------ lambda ------------------

def test_lambda_builds_closure(env):
    fn = evaluate("(lambda (a b) (+ a b))", env)
    assert isinstance(fn, Closure)
    assert fn.params == (Symbol("a"), Symbol("b"))
    assert fn.body == [Symbol("+"), Symbol("a"), Symbol("b")]
    assert fn.env is env


def test_lambda_body_not_evaluated_at_creation(env):
    evaluate("(lambda () undefined)", env)


@pytest.mark.parametrize(
    "source",
    [
        "(lambda (x))",
        "(lambda (x) x x)",
        "(lambda x x)",
        "(lambda (1) 1)",
        "(lambda (x (y)) x)",
        "(lambda (x x) x)",
    ],
)
def test_lambda_malformed(env, source):
    with pytest.raises(MalformedForm) as exc:
        evaluate(source, env)
    assert exc.value.form == "lambda"


def test_special_form_keywords_are_syntax(env):
    # keywords are recognized before any lookup
    with pytest.raises(UnboundName):
        evaluate("if", env)
    evaluate("(define if 5)", env)
    assert evaluate("(if 0 1 2)", env) == 2
    assert evaluate("if", env) == 5


def test_set_evaluates_value_before_locating_binding(env):
    evaluate("(define x 0)", env)
    with pytest.raises(UnboundName) as exc:
        evaluate("(set! nowhere (set! x 9))", env)
    assert exc.value.name == Symbol("nowhere")
    assert evaluate("x", env) == 9
