class HumbleError(Exception):
    """ Base class for all humble errors"""
    pass


class HumbleSyntaxError(HumbleError):
    """ Raised by the reader when source text is not a well-formed expression"""


class UnexpectedEndOfInput(HumbleSyntaxError):
    """ Raised when an expression is expected but no tokens remain"""


class UnbalancedExpression(HumbleSyntaxError):
    """ Raised when input ends before a '(' is closed"""


class UnexpectedCloseParen(HumbleSyntaxError):
    """ Raised when a ')' appears where an expression is expected"""


class HumbleEvalError(HumbleError):
    """ Base class for errors raised while evaluating an expression"""


class UnboundName(HumbleEvalError):
    """ Raised when a symbol is used or assigned before it is bound"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Cannot lookup unbound symbol {name}")
        self.name = name


class EmptyApplication(HumbleEvalError):
    """ Raised when the empty list () is evaluated"""


class NotCallable(HumbleEvalError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value, message: str | None = None):
        super().__init__(message or f"Cannot apply non-function {value}")
        self.value = value


class MalformedForm(HumbleEvalError):
    """ Raised when a special form has the wrong shape or arity"""

    def __init__(self, form: str, message: str):
        super().__init__(message)
        self.form = form


class ArityMismatch(HumbleEvalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class TypeMismatch(HumbleEvalError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""


class DivisionByZero(HumbleEvalError):
    """ Raised by / and mod when the divisor is zero"""
