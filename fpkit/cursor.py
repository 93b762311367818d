from collections.abc import Mapping


class Cursor(object):
    """
    A forward-only, one-shot producer of (key, value) pairs.

    Iterating a cursor yields its values, the way iterating a list does.
    items() hands back the underlying pair iterator, so pulling from either
    advances the same position. A cursor cannot be rewound.
    """

    def __init__(self, pairs):
        self._pairs = iter(pairs)

    def __iter__(self):
        return self

    def __next__(self):
        key, value = next(self._pairs)
        return value

    def items(self):
        return self._pairs

    def __repr__(self):
        return "<Cursor %r>" % (self._pairs,)


def pairs(collection):
    """
    Convert any supported sequence into an iterator of (key, value) pairs.

    Cursors keep their own keys, mappings yield their items, and everything
    else (lists, tuples, sets, generators...) is numbered from 0.
    """
    if isinstance(collection, Cursor):
        return collection.items()
    if isinstance(collection, Mapping):
        return iter(collection.items())
    return enumerate(collection)


def values(collection):
    for _, value in pairs(collection):
        yield value


def collect(collection):
    """Drain a sequence into an ordered mapping."""
    return dict(pairs(collection))


def _unfold(seed, transform):
    value = seed
    while True:
        yield value
        value = transform(value)


def iterate(seed, transform):
    """
    Infinite lazy sequence: seed, transform(seed), transform(transform(seed)), ...

    Keys count up from 0. Nothing past the seed is computed until it is pulled.
    """
    return Cursor(enumerate(_unfold(seed, transform)))


def nth(n, seed, transform):
    """
    Value at 1-indexed position n of iterate(seed, transform).
    n of 1 (or less) is the seed itself.
    """
    value = seed
    for _ in range(n - 1):
        value = transform(value)
    return value
