import pytest

from schemelet.builtin.env_builtin import primitive_bindings
from schemelet.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with the primitive table installed."""
    return primitive_bindings()


@pytest.fixture
def interp():
    """Interpreter without the bootstrap library."""
    return Interpreter(prelude=None)
