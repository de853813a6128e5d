import io

import pytest

from lson.interpreter import Interpreter


@pytest.fixture
def out():
    """Captures output of the `p` builtin."""
    return io.StringIO()


@pytest.fixture
def interp(out):
    """Fresh interpreter with the bootstrap loaded and no user prelude."""
    return Interpreter(prelude=None, out=out)
