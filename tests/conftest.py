import pytest

from golp.builtin.env_builtin import make_root_environment
from golp.evaluation.evaluator import evaluate
from golp.interpreter import Interpreter
from golp.reader.parser import parse

# Most tests evaluate source text against a fresh root environment. The
# default root is lenient (unbound symbols evaluate to nil); tests that need
# the strict policy ask for `strict_env` explicitly.


@pytest.fixture
def env():
    """Fresh lenient root environment with builtins loaded."""
    return make_root_environment(strict=False)


@pytest.fixture
def strict_env():
    """Fresh root environment where unbound symbols raise."""
    return make_root_environment(strict=True)


@pytest.fixture
def interp():
    return Interpreter(strict=False)


@pytest.fixture
def run():
    """Evaluate each source line in order against `env`; return the last value."""
    def _run(env, *sources):
        result = None
        for source in sources:
            result = evaluate(parse(source), env)
        return result
    return _run
