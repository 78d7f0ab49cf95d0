import pytest

from lumen.builtin import default_environment
from lumen.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh top-level environment with builtins loaded."""
    return default_environment(allow_redefine=False)


@pytest.fixture
def interp():
    """Interpreter without the prelude."""
    return Interpreter(env=default_environment(allow_redefine=False), prelude=None)


@pytest.fixture
def interp_prelude():
    """Interpreter with the standard prelude loaded."""
    return Interpreter(env=default_environment(allow_redefine=False))
