from humble import EvaluatorFn
from humble import SExpression, LispValue
from humble.errors import MalformedForm
from humble.types.environment import Environment
from humble.types.truth import FALSE, is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MalformedForm("if", "if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)

    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return FALSE  # no else branch
