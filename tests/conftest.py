import pytest

from rum.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter with the default builders and libraries."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text in a fresh interpreter, returning the last value."""
    return interp.eval
