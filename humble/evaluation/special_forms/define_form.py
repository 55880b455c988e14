from humble import EvaluatorFn
from humble import SExpression, LispValue
from humble.errors import MalformedForm
from humble.printer import to_string
from humble.types.environment import Environment
from humble.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame, shadowing outer bindings; returns the value.
    """
    if len(tail) != 2:
        raise MalformedForm("define", "define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalformedForm("define", f"define first argument must be a Symbol, got {to_string(name)}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
