import pytest

from lispi.builtin.env_builtin import register
from lispi.interpreter import Interpreter
from lispi.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
