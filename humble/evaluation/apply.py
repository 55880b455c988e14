"""Application engine for humble.

Centralizes procedure application so the evaluator and any helper that needs
to call a procedure share one set of rules:
- Closures bind their parameters in a fresh scope on top of the captured
  environment and evaluate the body there.
- Builtins receive the evaluated argument list.
"""

from __future__ import annotations

from humble import LispValue, EvaluatorFn
from humble.errors import NotCallable
from humble.printer import to_string
from humble.types.builtin import Builtin
from humble.types.closure import Closure


def is_callable(value: LispValue) -> bool:
    return isinstance(value, (Builtin, Closure))


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises ArityMismatch when the argument count differs from the parameter count.
    """
    new_env = fn.extend_env(list(args))
    return evaluate_fn(fn.body, new_env)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is not callable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(args)
    else:
        raise NotCallable(head, f"Cannot apply non-function {to_string(head)}")
