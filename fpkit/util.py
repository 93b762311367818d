from copy import copy
from functools import partial as functools_partial, wraps
from collections.abc import Mapping, Sequence, Set
from inspect import signature, Parameter
from json import JSONEncoder
from types import SimpleNamespace
import logging
import time
from fpkit.cursor import Cursor, collect, values
from fpkit.errors import RetryFailedError
from fpkit.records import fieldValues

log = logging.getLogger(__name__)

_missing = object()


def _name(fn):
    return getattr(fn, "__name__", type(fn).__name__)


def identity(x):
    return x


def constant(value):
    def constantly(*args, **kwargs):
        return value
    return constantly


def partial(fn, *args, **kwargs):
    """Binds leading positional (and keyword) arguments of fn."""
    out = functools_partial(fn, *args, **kwargs)
    out.__name__ = "partial_" + _name(fn)
    return out


def flip(fn):
    """Swaps the first two positional arguments before calling fn."""
    def flipped(a, b, *rest, **kwargs):
        return fn(b, a, *rest, **kwargs)
    flipped.__name__ = "flipped_" + _name(fn)
    return flipped


def apply(fn):
    """Wraps fn so that a single collection argument is spread into positional args."""
    def applied(list_args, **kwargs):
        return fn(*values(list_args), **kwargs)
    return applied


def ap(fns):
    """
    Applies every function to every value. Results are function-major: all of
    fns[0]'s results come first, then all of fns[1]'s, and so on.
    """
    fns = list(values(fns))

    def applied(collection):
        vals = list(values(collection))
        return [fn(v) for fn in fns for v in vals]
    return applied


def juxt(*fns):
    """
    Return a function, which calls all the functions in fns with the same argument.
    The return values of these functions are collated into a list, in fns order.
    """
    def juxtaposed(x):
        return [fn(x) for fn in fns]
    return juxtaposed


def maybe(fn):
    """None passes straight through; anything else goes to fn."""
    def maybeFn(value):
        if value is None:
            return None
        return fn(value)
    return maybeFn


def tap(fn):
    """Wrap fn so that it returns what comes in."""
    def tapped(arg):
        fn(arg)
        return arg
    return tapped


def when(cond, fn):
    return lambda value: fn(value) if cond(value) else value


def unless(cond, fn):
    return lambda value: value if cond(value) else fn(value)


def _arity(fn):
    positional = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)
    return len([p for p in signature(fn).parameters.values()
                if p.kind in positional and p.default is Parameter.empty])


def curry(fn, arity=None):
    """
    Collects positional arguments across calls until arity of them have been
    supplied, then calls fn. arity defaults to fn's required positional count.
    """
    if arity is None:
        arity = _arity(fn)

    def curried(*args):
        if len(args) >= arity:
            return fn(*args)
        return curry(partial(fn, *args), arity - len(args))
    curried.__name__ = "curried_" + _name(fn)
    return curried


def _lookup(record, key, default=None):
    if isinstance(record, Mapping):
        return record.get(key, default)
    if isinstance(key, int) and isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
        try:
            return record[key]
        except IndexError:
            return default
    if isinstance(key, str):
        return getattr(record, key, default)
    return default


def get(key, default=None):
    """
    Reads key from a mapping, an index from a sequence, or an attribute from
    any other object. Missing entries give default.
    """
    def getter(record):
        return _lookup(record, key, default)
    return getter


def path(dotted):
    """Follows a dotted path such as "user.address.0.city". Missing steps give None."""
    segments = dotted.split(".")

    def walker(record):
        current = record
        for segment in segments:
            if segment.lstrip("-").isdigit():
                if isinstance(current, Sequence):
                    segment = int(segment)
                elif isinstance(current, Mapping) and segment not in current:
                    segment = int(segment)
            current = _lookup(current, segment, _missing)
            if current is _missing:
                return None
        return current
    return walker


def prop(name):
    """Reverses the dot syntax (object.attr), so you can do prop(attr)(obj)."""
    def access(obj):
        return getattr(obj, name)
    return access


def method(name, *args, **kwargs):
    def call(obj):
        return getattr(obj, name)(*args, **kwargs)
    return call


def pick(*keys):
    def picked(record):
        if isinstance(record, Mapping):
            return {k: record[k] for k in keys if k in record}
        return SimpleNamespace(**{k: getattr(record, k) for k in keys if hasattr(record, k)})
    return picked


def omit(*keys):
    def omitted(record):
        if isinstance(record, Mapping):
            return {k: v for k, v in record.items() if k not in keys}
        return SimpleNamespace(**{k: v for k, v in vars(record).items() if k not in keys})
    return omitted


def assign(key, value):
    """
    Copy-with-assignment. Mappings and sequences come back as a dict with key
    set, objects are shallow-copied and given the attribute, and anything else
    becomes {key: value}. The input is never modified.
    """
    def assigned(record):
        if isinstance(record, (Mapping, list, tuple, Cursor)):
            result = collect(record)
            result[key] = value
            return result
        if not callable(record) and (hasattr(record, "__dict__") or hasattr(type(record), "__slots__")):
            result = copy(record)
            object.__setattr__(result, key, value)
            return result
        return {key: value}
    return assigned


json_encoder = JSONEncoder(ensure_ascii=False, sort_keys=True)
json_encode = lambda data: json_encoder.encode(data)


def _canonical(value):
    if value is None or isinstance(value, (bool, int, float, str)):
        return [type(value).__name__, value]
    if isinstance(value, bytes):
        return ["bytes", value.hex()]
    if isinstance(value, Mapping):
        items = [[_canonical(k), _canonical(v)] for k, v in value.items()]
        return [type(value).__name__, sorted(items, key=json_encode)]
    if isinstance(value, Set):
        return [type(value).__name__, sorted([_canonical(v) for v in value], key=json_encode)]
    if isinstance(value, (list, tuple)):
        return [type(value).__name__, [_canonical(v) for v in value]]
    if not callable(value) and (hasattr(value, "__dict__") or hasattr(type(value), "__slots__")):
        cls = type(value)
        return [cls.__module__ + "." + cls.__qualname__, _canonical(fieldValues(value))]
    return [type(value).__name__, repr(value)]


def serialize(value):
    """
    Deterministic structural encoding of value. Structurally equal values
    encode identically, even when they are distinct objects; values of
    different types (1, 1.0, True) never do.
    """
    return json_encode(_canonical(value))


def memoize(fn):
    """
    Caches fn's results keyed by the serialized argument list. Every call to
    memoize gets its own cache.
    """
    cache = {}

    @wraps(fn)
    def memoized(*args, **kwargs):
        key = serialize([list(args), kwargs])
        if key not in cache:
            cache[key] = fn(*args, **kwargs)
        return cache[key]
    return memoized


def trace(value, label=None):
    """Logs value at debug level and returns it unchanged."""
    if label is None:
        log.debug("trace: %r", value)
    else:
        log.debug("trace %s: %r", label, value)
    return value


def retry(maxAttempts, backoff=None, sleep=time.sleep, retryable=None):
    """
    Returns a function which calls a zero argument thunk up to maxAttempts
    times and returns its first result.
    backoff receives the 1-based number of the attempt which just failed and
    returns the seconds to wait before the next one; nothing is slept after
    the final attempt.
    retryable is a predicate which receives raised exceptions. If it returns
    False the exception is re-raised immediately.
    The last exception is re-raised once attempts run out.
    """
    def retrying(fn):
        if maxAttempts < 1:
            raise RetryFailedError(maxAttempts)
        for attempt in range(1, maxAttempts + 1):
            try:
                return fn()
            except Exception as e:
                if retryable is not None and not retryable(e):
                    raise
                if attempt == maxAttempts:
                    log.warning("%s failed after %d attempts: %r", _name(fn), attempt, e)
                    raise
                log.debug("%s attempt %d of %d failed: %r", _name(fn), attempt, maxAttempts, e)
                if backoff is not None:
                    delay = backoff(attempt)
                    if delay > 0:
                        sleep(delay)
    return retrying


def throttle(seconds, clock=time.monotonic):
    """
    Lets the decorated function run at most once every seconds. Calls inside
    the window skip fn and return the result of the last run.
    """
    def throttling(fn):
        lastRun = [None]
        lastResult = [None]

        @wraps(fn)
        def throttled(*args, **kwargs):
            now = clock()
            if lastRun[0] is None or now - lastRun[0] >= seconds:
                lastRun[0] = now
                lastResult[0] = fn(*args, **kwargs)
            return lastResult[0]
        return throttled
    return throttling


def debounce(seconds, sleep=time.sleep):
    """Waits seconds before every call of the decorated function."""
    def debouncing(fn):
        @wraps(fn)
        def debounced(*args, **kwargs):
            if seconds > 0:
                sleep(seconds)
            return fn(*args, **kwargs)
        return debounced
    return debouncing


set = assign
