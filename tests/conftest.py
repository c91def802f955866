import pytest

from bl.interpreter import Interpreter
from bl.printer import render


@pytest.fixture
def interp():
    """Fresh interpreter with builtins loaded."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text and return the rendering of the last result."""
    def _run(source):
        results = interp.eval(source)
        assert results, f"no forms read from {source!r}"
        return render(results[-1])
    return _run


@pytest.fixture
def sym(interp):
    """Intern a name in the interpreter's symbol table."""
    return interp.symbols.intern


@pytest.fixture
def restore_logging():
    """Drop sinks added by the CLI entry point once the test is done."""
    from loguru import logger

    yield
    logger.remove()
