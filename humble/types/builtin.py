from __future__ import annotations

from typing import Callable

from humble import LispValue


class Builtin:
    """A host-provided procedure: receives the already-evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"
