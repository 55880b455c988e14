from humble import EvaluatorFn
from humble import SExpression, LispValue
from humble.errors import MalformedForm
from humble.printer import to_string
from humble.types.symbol import Symbol
from humble.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise MalformedForm("set!", "set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MalformedForm("set!", f"set! first argument must be a Symbol, got {to_string(var_sym)}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
