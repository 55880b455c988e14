from humble.types.symbol import Symbol
from humble.types.environment import Environment
from humble.types.builtin import Builtin
from humble.types.closure import Closure
from humble.types.truth import TRUE, FALSE, is_truthy, is_number

__all__ = [
    "Symbol",
    "Environment",
    "Builtin",
    "Closure",
    "TRUE",
    "FALSE",
    "is_truthy",
    "is_number",
]
