"""Numeric truthiness.

The language has no boolean type: the number 0 is false and every other value
is true. Predicates answer with TRUE or FALSE.
"""

from __future__ import annotations

from humble import LispValue

TRUE: float = 1.0
FALSE: float = 0.0


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: LispValue) -> bool:
    return not (is_number(value) and value == 0)


def as_truth(flag: bool) -> float:
    return TRUE if flag else FALSE
