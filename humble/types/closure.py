"""Closure representation and argument binding for humble."""

from __future__ import annotations

from io import StringIO

from humble import SExpression, LispValue
from humble.errors import ArityMismatch
from humble.types.environment import Environment
from humble.types.symbol import Symbol


class Closure:
    """A first-class procedure with parameters, body, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        # Captured by reference: later define/set! in this scope stay visible
        self.env: Environment = env

    def __str__(self) -> str:
        from humble.printer import to_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the argument values positionally to the parameters and return a
        fresh Environment, parented on the captured one, for evaluating the body.
        """
        if len(args) != len(self.params):
            raise ArityMismatch(
                f"{self} expects {len(self.params)} arguments, got {len(args)}"
            )
        return self.env.extend(dict(zip(self.params, args)))
