"""Text-level entry points: source string in, value out."""

from __future__ import annotations

from humble import LispValue
from humble.builtin.env_builtin import global_environment
from humble.evaluation.evaluator import evaluate as evaluate_expr
from humble.reader.parser import tokenize, read, read_all
from humble.types.environment import Environment


def evaluate(text: str, env: Environment) -> LispValue:
    """Tokenize `text`, read exactly one top-level form and evaluate it in `env`.

    Tokens after the first form are ignored. Any HumbleError propagates; the
    bindings already made in `env` survive it.
    """
    expr, _ = read(tokenize(text))
    return evaluate_expr(expr, env)


def evaluate_all(text: str, env: Environment) -> list[LispValue]:
    """Evaluate every top-level form of `text` in order, sharing `env`."""
    return [evaluate_expr(expr, env) for expr in read_all(tokenize(text))]


__all__ = ["evaluate", "evaluate_all", "evaluate_expr", "global_environment"]
