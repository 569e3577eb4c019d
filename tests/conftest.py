import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter
from lispy.runtime_context import reset_depth
from lispy.types.environment import Environment


@pytest.fixture(autouse=True)
def _isolate_runtime(monkeypatch):
    # Tests must not depend on the caller's shell settings or on depth left
    # behind by another test.
    monkeypatch.delenv("LISPY_MAX_DEPTH", raising=False)
    monkeypatch.delenv("LISPY_MAX_NESTING", raising=False)
    reset_depth()
    yield
    reset_depth()


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()
