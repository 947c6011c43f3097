import pytest

from iota.interpreter import Interpreter, standard_env
from iota.reader.parser import parse_all
from iota.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh root environment with pi, #t and #f bound."""
    return standard_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def eval_source(env):
    """Evaluate every form of a source string in the shared `env`; return the last value."""
    def _eval(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result
    return _eval
