import pytest

from schemer.builtin.env_builtin import root_environment
from schemer.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with the predefined procedures loaded."""
    return root_environment()


@pytest.fixture
def interp(monkeypatch):
    """Session interpreter that ignores any prelude configured in the shell."""
    monkeypatch.delenv("SCHEMER_PRELUDE_PATH", raising=False)
    return Interpreter()
