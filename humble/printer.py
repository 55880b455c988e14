"""Render expressions and values as source-like text."""

from __future__ import annotations

import math

from humble import LispValue
from humble.types.symbol import Symbol
from humble.types.truth import is_number

# Floats at or beyond this magnitude keep exponent notation
_INTEGRAL_LIMIT = 1e16


def format_number(value: float) -> str:
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)


def to_string(obj: LispValue) -> str:
    if isinstance(obj, list):
        return "(" + " ".join(to_string(x) for x in obj) + ")"
    if isinstance(obj, Symbol):
        return obj.id
    if is_number(obj):
        return format_number(obj)
    # Closures and builtins carry their own printed forms
    return str(obj)
