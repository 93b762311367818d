from func_prototypes import typed
from fpkit.cursor import Cursor, pairs
from fpkit.transduce import filtering, mapping, stream, takingWhile, taking


def _name(fn):
    return getattr(fn, "__name__", type(fn).__name__)


def _lazily(xform):
    def lazy(collection):
        return Cursor(stream(xform, pairs(collection)))
    return lazy


def itmap(fn):
    """Lazy map. Keys are preserved; fn receives only the value."""
    mapped = _lazily(mapping(lambda value, key: fn(value)))
    mapped.__name__ = "itmapped_" + _name(fn)
    return mapped


def itmapWithKeys(fn):
    """Lazy map where fn receives (value, key). Keys are preserved."""
    mapped = _lazily(mapping(fn))
    mapped.__name__ = "itmapped_" + _name(fn)
    return mapped


def itfilter(pred=None):
    """Lazy filter on values. Defaults to a truthiness test. Keys are preserved."""
    if pred is None:
        pred = bool
    return _lazily(filtering(lambda value, key: pred(value)))


def itfilterWithKeys(pred=None):
    if pred is None:
        return itfilter()
    return _lazily(filtering(pred))


@typed(int)
def ittake(count):
    """
    Lazily yields the first count pairs, keys preserved. Never pulls more
    than count elements from its input, so it is safe on infinite cursors.
    """
    if count <= 0:
        return lambda collection: Cursor(iter(()))
    return _lazily(taking(count))


def ittakeWhile(pred):
    return _lazily(takingWhile(pred))
