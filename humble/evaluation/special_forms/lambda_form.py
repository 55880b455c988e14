import logging

from humble import EvaluatorFn
from humble import SExpression, LispValue
from humble.errors import MalformedForm
from humble.types.closure import Closure
from humble.types.environment import Environment
from humble.printer import to_string
from humble.types.symbol import Symbol

logger = logging.getLogger(__name__)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, left unevaluated.
    if len(tail) != 2:
        raise MalformedForm("lambda", "lambda requires a parameter list and a body: (lambda (p ...) body)")

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalformedForm("lambda", f"lambda parameters must be a list of symbols, got {to_string(params)}")
    if len(set(params)) != len(params):
        raise MalformedForm("lambda", f"lambda parameters must be unique, got {to_string(params)}")

    closure = Closure(params, body, env)
    logger.debug("Closure created: %s", closure)
    return closure
