"""Built-in procedures for the humble runtime environment.

This module defines the arithmetic, comparison and sequencing procedures and
the `register` helper that installs them into an Environment. Nothing here is
process-global: every environment gets its own Builtin objects.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from humble import LispValue
from humble.errors import ArityMismatch, DivisionByZero, TypeMismatch
from humble.printer import to_string
from humble.types.builtin import Builtin
from humble.types.environment import Environment
from humble.types.symbol import Symbol
from humble.types.truth import FALSE, as_truth, is_number


def _check_numbers(name: str, args: list[LispValue]) -> list[float]:
    for i, arg in enumerate(args):
        if not is_number(arg):
            raise TypeMismatch(f"{name}: argument {i} must be a number, got {to_string(arg)}")
    return [float(a) for a in args]


def _check_binary(name: str, args: list[LispValue]) -> tuple[float, float]:
    if len(args) != 2:
        raise ArityMismatch(f"{name} requires exactly 2 arguments, got {len(args)}")
    a, b = _check_numbers(name, args)
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> float:
    """Return the sum of all arguments; (+) is 0."""
    return sum(_check_numbers("+", args), 0.0)


def mul(args: list[LispValue]) -> float:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in _check_numbers("*", args):
        result *= x
    return result


def sub(args: list[LispValue]) -> float:
    a, b = _check_binary("-", args)
    return a - b


def div(args: list[LispValue]) -> float:
    a, b = _check_binary("/", args)
    if b == 0:
        raise DivisionByZero("/: division by zero")
    return a / b


def make_mod(name: str) -> Callable[[list[LispValue]], float]:
    """Remainder after truncating both operands toward zero.

    The result takes the sign of the dividend: (mod -7 2) is -1.
    """

    def mod(args: list[LispValue]) -> float:
        a, b = _check_binary(name, args)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise TypeMismatch(f"{name}: operands must be finite, got {to_string(a)} and {to_string(b)}")
        n, d = math.trunc(a), math.trunc(b)
        if d == 0:
            raise DivisionByZero(f"{name}: division by zero")
        r = abs(n) % abs(d)
        return float(-r if n < 0 else r)

    return mod


# -------------------------------
# Comparison
# -------------------------------
def make_comparison(name: str, op: Callable[[float, float], bool]) -> Callable[[list[LispValue]], float]:
    """Binary numeric comparison answering 1 or 0."""

    def compare(args: list[LispValue]) -> float:
        a, b = _check_binary(name, args)
        return as_truth(op(a, b))

    return compare


# -------------------------------
# Sequencing
# -------------------------------
def begin(args: list[LispValue]) -> LispValue:
    """Arguments were already evaluated left to right; return the last, or 0."""
    return args[-1] if args else FALSE


COMPARISONS: dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "=": operator.eq,
    "eq?": operator.eq,
    "!=": operator.ne,
}


def builtins() -> dict[Symbol, Builtin]:
    """Build a fresh table of every builtin procedure keyed by its name."""
    table: dict[str, Callable[[list[LispValue]], LispValue]] = {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "%": make_mod("%"),
        "mod": make_mod("mod"),
        "begin": begin,
    }
    for name, op in COMPARISONS.items():
        table[name] = make_comparison(name, op)
    return {Symbol(name): Builtin(name, fn) for name, fn in table.items()}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update(builtins())


def global_environment() -> Environment:
    """A new top-level Environment holding only the builtins."""
    env = Environment()
    register(env)
    return env
