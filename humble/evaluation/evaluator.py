"""Core evaluator for the humble interpreter.

A plain recursive tree walker: special forms are dispatched on the head symbol
before anything is evaluated, every other list is a procedure call whose
arguments are evaluated left to right.
"""

from __future__ import annotations

from humble import SExpression, LispValue
from humble.errors import EmptyApplication, HumbleEvalError, NotCallable
from humble.evaluation.apply import apply, is_callable
from humble.evaluation.special_forms import SPECIAL_FORMS
from humble.printer import to_string
from humble.types.environment import Environment
from humble.types.symbol import Symbol
from humble.types.truth import is_number


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`."""
    match expr:
        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = evaluate(head, env)
            if not is_callable(fn):
                raise NotCallable(fn, f"Cannot apply non-function {to_string(fn)}")
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

        case []:
            raise EmptyApplication("Cannot evaluate the empty application ()")

        case Symbol():
            return env.lookup(expr)

    # --- Numbers are self-evaluating ---
    if is_number(expr):
        return float(expr)
    raise HumbleEvalError(f"Cannot evaluate {expr!r}")
