import pytest

from humble.builtin.env_builtin import global_environment
from humble.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return global_environment()


@pytest.fixture
def interp():
    """Interpreter without a prelude, so only the builtins are bound."""
    return Interpreter(prelude=None)
