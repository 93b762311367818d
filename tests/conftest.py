import pytest
from fpkit.cursor import Cursor


def _as_list(vals):
    return list(vals)


def _as_tuple(vals):
    return tuple(vals)


def _as_generator(vals):
    return (v for v in list(vals))


def _as_dict(vals):
    return dict(enumerate(vals))


def _as_cursor(vals):
    return Cursor(enumerate(list(vals)))


SHAPES = {
    "list": _as_list,
    "tuple": _as_tuple,
    "generator": _as_generator,
    "dict": _as_dict,
    "cursor": _as_cursor,
}


def pytest_addoption(parser):
    parser.addoption("--all", action="store_true", help="run every input shape")


def pytest_generate_tests(metafunc):
    if metafunc.config.getoption("all"):
        shapes = sorted(SHAPES)
    else:
        shapes = ["list", "generator", "dict", "cursor"]
    if "shape" in metafunc.fixturenames:
        metafunc.parametrize("shape", shapes)


@pytest.fixture
def build(shape):
    """
    Returns a builder which turns a list of values into the parametrized
    input shape. Every shape keys its values 0..n-1.
    """
    return SHAPES[shape]


class Counter(object):
    """Callable wrapper recording how many times (and with what) fn ran."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.fn(*args)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def counted():
    return Counter
