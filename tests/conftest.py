import pytest

from minilisp.config import Settings
from minilisp.evaluation.evaluator import evaluate_all
from minilisp.interpreter import Interpreter
from minilisp.reader.parser import parse_program
from minilisp.runtime_context import set_current_output, set_current_settings
from minilisp.types.environment import Environment

# Every test starts from default settings, whatever the shell exports, and
# with `print` writing to the (captured) sys.stdout.


@pytest.fixture(autouse=True)
def _reset_runtime_context(monkeypatch):
    for var in ("MINILISP_MAX_DEPTH", "MINILISP_LENIENT_PARSE", "MINILISP_LOAD_PATH"):
        monkeypatch.delenv(var, raising=False)
    set_current_settings(Settings())
    set_current_output(None)
    yield
    set_current_settings(None)
    set_current_output(None)


@pytest.fixture
def env():
    """Fresh session environment."""
    return Environment()


@pytest.fixture
def run(env):
    """Evaluate a whole source text in the `env` fixture, returning the last value."""
    def _run(source):
        return evaluate_all(parse_program(source), env)
    return _run


@pytest.fixture
def interp():
    return Interpreter(settings=Settings())
