# Per-element transforms shared by the lazy (fpkit.lazy) and eager
# (fpkit.eager) combinators. Every transform works on (key, value) pairs, so a
# single definition serves both the "wrap in another cursor" and the "drain
# into a dict" strategies.

class Reduced(object):
    """Wraps an accumulation to signal that no more input is wanted."""

    def __init__(self, value):
        self.value = value


def reduceWith(reducer, seed, iterable):
    """
    reduceWith takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell. Stops early when the reducer returns Reduced.
    reducer is (b -> a -> b)
    seed is b
    iterable is [a]
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
        if isinstance(accumulation, Reduced):
            return accumulation.value
    return accumulation


def dictOf(acc, pair):
    acc[pair[0]] = pair[1]
    return acc


dictOf.__doc__ = """Reducer which stores each (key, value) pair into a dict accumulator."""

pairsOf = lambda acc, pair: acc.append(pair) or acc
pairsOf.__doc__ = """Reducer which appends each pair to a list accumulator."""


def mapping(fn):
    """
    fn is (value -> key -> value')
    Keeps the key, replaces the value.
    """
    def xform(reducer):
        def step(acc, pair):
            key, value = pair
            return reducer(acc, (key, fn(value, key)))
        return step
    return xform


def filtering(pred):
    """
    pred is (value -> key -> Bool)
    """
    def xform(reducer):
        def step(acc, pair):
            key, value = pair
            if pred(value, key):
                return reducer(acc, pair)
            return acc
        return step
    return xform


def taking(count):
    def xform(reducer):
        remaining = [count]

        def step(acc, pair):
            if remaining[0] <= 0:
                return Reduced(acc)
            remaining[0] -= 1
            acc = reducer(acc, pair)
            if remaining[0] <= 0:
                return Reduced(acc)
            return acc
        return step
    return xform


def takingWhile(pred):
    """Passes pairs through until pred first fails, then stops for good."""
    def xform(reducer):
        def step(acc, pair):
            if not pred(pair[1]):
                return Reduced(acc)
            return reducer(acc, pair)
        return step
    return xform


def droppingWhile(pred):
    """Skips the leading pairs for which pred holds, then passes everything."""
    def xform(reducer):
        dropping = [True]

        def step(acc, pair):
            if dropping[0] and pred(pair[1]):
                return acc
            dropping[0] = False
            return reducer(acc, pair)
        return step
    return xform


def transduce(transformer, reducer, seed, iterable):
    """
    transformer is (reducer -> reducer)
    reducer is (b -> a -> b)
    seed is b
    iterable is [a]
    """
    return reduceWith(transformer(reducer), seed, iterable)


def stream(transformer, iterable):
    """
    Lazily push each item of iterable through transformer, yielding whatever
    comes out the other end. Input is pulled one item at a time, only as the
    consumer asks for output.
    """
    step = transformer(pairsOf)
    buffered = []
    for item in iterable:
        result = step(buffered, item)
        for out in buffered:
            yield out
        del buffered[:]
        if isinstance(result, Reduced):
            return
