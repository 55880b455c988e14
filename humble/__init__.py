# Core type aliases for humble's data model.
# Code and runtime values are plain Python objects: floats for numbers, lists for
# list expressions, and the small classes in humble.types for symbols, builtins
# and closures. No explicit Cons type is defined.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntactic forms alias
SExpression = LispValue

# Evaluator function type: passed into special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
