# Small compositions are unrolled into fixed closures; anything longer falls
# back to a loop over the function list.

def _identity(x):
    return x


def _comp_0():
    return _identity


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _combined2(*args, **kwargs):
        return a(b(*args, **kwargs))

    return _combined2


def _comp_3(a, b, c):
    def _combined3(*args, **kwargs):
        return a(b(c(*args, **kwargs)))

    return _combined3


def _comp_4(a, b, c, d):
    def _combined4(*args, **kwargs):
        return a(b(c(d(*args, **kwargs))))

    return _combined4


_comp_fns = [
    _comp_0,
    _comp_1,
    _comp_2,
    _comp_3,
    _comp_4,
]


def _comp_n(fns):
    innermost = fns[-1]
    rest = fns[-2::-1]

    def _combinedN(*args, **kwargs):
        value = innermost(*args, **kwargs)
        for fn in rest:
            value = fn(value)
        return value

    return _combinedN


def compose(*fns):
    """
    compose(f, g, h)(x) == f(g(h(x))): the last function runs first and
    receives every argument; the others are unary. No functions gives identity.
    """
    n = len(fns)
    if n < len(_comp_fns):
        return _comp_fns[n](*fns)
    return _comp_n(fns)


def pipeline(*funcs):
    """Left-to-right compose: pipeline(f, g)(x) == g(f(x))."""
    return compose(*reversed(funcs))


def pipe(value, *fns):
    """Threads value through fns left to right right now, returning the result."""
    for fn in fns:
        value = fn(value)
    return value
