from __future__ import annotations
import sys


class Symbol:
    """A name in source code: variable references, parameters and keywords.

    Names are interned, so two Symbols read from different places compare and
    hash by their text alone.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"
