import pytest

from qlisp.types import Environment
from qlisp.builtin.env_builtin import register
from qlisp.reader.parser import parse
from qlisp.reader.reader import read
from qlisp.evaluation.evaluator import evaluate
from qlisp.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def lisp(env):
    """Evaluate source as one prompt line against the shared `env` fixture."""
    def _eval(source: str):
        return evaluate(env, read(parse(source)))
    return _eval


@pytest.fixture
def interp():
    """Interpreter without the prelude."""
    return Interpreter(prelude=None)
