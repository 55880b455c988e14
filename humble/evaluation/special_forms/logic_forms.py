from humble import SExpression, EvaluatorFn, LispValue
from humble.types.environment import Environment
from humble.types.truth import TRUE, FALSE, is_truthy


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsy value
    (the number 0) is found, which is returned immediately. If every operand is
    truthy, or there are no operands, returns 1.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if not is_truthy(val):
            return val
    return TRUE


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, or there are no operands, returns 0.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return FALSE
