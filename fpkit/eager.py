"""
Eager combinators. Each one consumes its whole input (or up to the point where
the answer is decided) and returns a concrete value.

Key rules:
  * key-preserving combinators return a dict keyed like their input.
  * renumbering combinators return a list.
  * key-generating combinators return a dict keyed by the caller's key function.
"""
import builtins
from collections.abc import Mapping
from functools import cmp_to_key
from func_prototypes import typed
from fpkit.cursor import Cursor, collect, pairs, values
from fpkit.errors import InvalidChunkSizeError, InvalidTupleError
from fpkit.predicates import strictEquals
from fpkit.transduce import \
    Reduced,       \
    dictOf,        \
    droppingWhile, \
    filtering,     \
    mapping,       \
    reduceWith,    \
    takingWhile,   \
    taking,        \
    transduce
from fpkit.util import get, serialize

_missing = object()


def _name(fn):
    return getattr(fn, "__name__", type(fn).__name__)


def _eagerly(xform):
    def eager(collection):
        return transduce(xform, dictOf, {}, pairs(collection))
    return eager


def amap(fn):
    mapped = _eagerly(mapping(lambda value, key: fn(value)))
    mapped.__name__ = "amapped_" + _name(fn)
    return mapped


def amapWithKeys(fn):
    """fn receives (value, key). Keys are preserved."""
    mapped = _eagerly(mapping(fn))
    mapped.__name__ = "amapped_" + _name(fn)
    return mapped


def afilter(pred=None):
    """Keeps the entries whose value passes pred (truthiness by default)."""
    if pred is None:
        pred = bool
    return _eagerly(filtering(lambda value, key: pred(value)))


def afilterWithKeys(pred=None):
    if pred is None:
        return afilter()
    return _eagerly(filtering(pred))


def reject(pred):
    return _eagerly(filtering(lambda value, key: not pred(value)))


def compact():
    """Drops None and False values. Keys are preserved."""
    return _eagerly(filtering(lambda value, key: value is not None and value is not False))


@typed(int)
def atake(count):
    if count <= 0:
        return lambda collection: {}
    return _eagerly(taking(count))


def takeWhile(pred):
    """Keeps the leading run of values passing pred and stops at the first failure."""
    return _eagerly(takingWhile(pred))


def dropWhile(pred):
    """
    Drops the leading run of values passing pred. Everything after the first
    failure is kept, even values which would pass pred again.
    """
    return _eagerly(droppingWhile(pred))


def fold(init, fn):
    """Left fold. fn is (acc -> value -> acc). Empty input returns init."""
    def folded(collection):
        return reduceWith(fn, init, values(collection))
    return folded


reduce = fold
foldl = fold


def reduceWithKeys(init, fn):
    def folded(collection):
        acc = init
        for key, value in pairs(collection):
            acc = fn(acc, value, key)
        return acc
    return folded


def reduceUntil(init, fn, stop):
    """Left fold which returns as soon as stop(acc) holds."""
    def step(acc, value):
        acc = fn(acc, value)
        if stop(acc):
            return Reduced(acc)
        return acc

    def folded(collection):
        return reduceWith(step, init, values(collection))
    return folded


def foldr(init, fn):
    """Right fold: fn(acc, value) is applied from the last value to the first."""
    def folded(collection):
        acc = init
        for value in reversed(list(values(collection))):
            acc = fn(acc, value)
        return acc
    return folded


def headtail(init, firstFn, restFn):
    """
    Reduces the first value with firstFn and every later value with restFn.
    Useful for fencepost problems such as joining with separators.
    """
    def folded(collection):
        it = values(collection)
        head = next(it, _missing)
        if head is _missing:
            return init
        acc = firstFn(init, head)
        for value in it:
            acc = restFn(acc, value)
        return acc
    return folded


def scan(init, fn):
    def scanned(collection):
        acc = init
        results = [acc]
        for value in values(collection):
            acc = fn(acc, value)
            results.append(acc)
        return results
    return scanned


def flatMap(fn):
    """
    fn returns an iterable for each value; the results are flattened one
    level into a renumbered list.
    """
    def flatMapped(collection):
        result = []
        for value in values(collection):
            result.extend(values(fn(value)))
        return result
    flatMapped.__name__ = "flatMapped_" + _name(fn)
    return flatMapped


bind = flatMap
chain = flatMap


def zip(*collections):
    """Position-wise tuples, as long as the shortest input."""
    if not collections:
        return []
    return list(builtins.zip(*[values(c) for c in collections]))


def zipWith(fn, *collections):
    return [fn(*row) for row in zip(*collections)]


def unzip(rows):
    columns = []
    for row in values(rows):
        if not isinstance(row, (list, tuple, Mapping, Cursor)):
            raise InvalidTupleError(row)
        for index, value in enumerate(values(row)):
            if index == len(columns):
                columns.append([])
            columns[index].append(value)
    return columns


@typed(int)
def chunk(size):
    """
    Splits a sequence into dicts of at most size entries each. The outer list
    is renumbered, each chunk keeps the original keys.
    """
    if size < 1:
        raise InvalidChunkSizeError(size)

    def chunked(collection):
        result = []
        current = {}
        count = 0
        for key, value in pairs(collection):
            current[key] = value
            count += 1
            if count == size:
                result.append(current)
                current = {}
                count = 0
        if count:
            result.append(current)
        return result
    return chunked


def sortBy(keyFn):
    """
    Stable sort on keyFn(value), keys preserved. None sorts ahead of every
    other sort key.
    """
    def sortKey(pair):
        k = keyFn(pair[1])
        return (k is not None, k)

    def sortedBy(collection):
        return dict(sorted(pairs(collection), key=sortKey))
    return sortedBy


def sortWith(cmp):
    """Stable sort using cmp(a, b) -> negative/zero/positive. Keys preserved."""
    sortKey = cmp_to_key(lambda a, b: cmp(a[1], b[1]))

    def sortedWith(collection):
        return dict(sorted(pairs(collection), key=sortKey))
    return sortedWith


def reverse(collection):
    return dict(reversed(list(pairs(collection))))


def sequence(collection):
    """
    Transposes a sequence of sequences. Ragged rows are allowed: the result
    is as wide as the longest row and short rows simply contribute nothing to
    the missing columns.
    """
    rows = [list(values(row)) for row in values(collection)]
    width = max([len(row) for row in rows], default=0)
    return [[row[i] for row in rows if i < len(row)] for i in range(width)]


def traverse(fn):
    def traversed(collection):
        return sequence(amap(fn)(collection))
    return traversed


def indexBy(keyFn):
    """Keys each value by keyFn(value). Later duplicates overwrite earlier ones."""
    def indexed(collection):
        return {keyFn(value): value for value in values(collection)}
    return indexed


def keyedMap(valueFn, keyFn=None):
    """Both functions receive (key, value). Without keyFn the original key is kept."""
    def keyed(collection):
        result = {}
        for key, value in pairs(collection):
            newKey = key if keyFn is None else keyFn(key, value)
            result[newKey] = valueFn(key, value)
        return result
    return keyed


def groupBy(keyFn):
    def grouped(collection):
        groups = {}
        for key, value in pairs(collection):
            groups.setdefault(keyFn(value), {})[key] = value
        return groups
    return grouped


def partition(pred):
    """Returns (passing, failing), both keyed like the input."""
    def partitioned(collection):
        passing = {}
        failing = {}
        for key, value in pairs(collection):
            if pred(value):
                passing[key] = value
            else:
                failing[key] = value
        return passing, failing
    return partitioned


def pluck(prop):
    """
    Reads prop from every record: mapping key, sequence index or attribute.
    A record without prop yields None rather than raising.
    """
    getter = get(prop)
    return amap(getter)


def append(value, key=None):
    def appended(collection):
        result = collect(collection)
        if key is None:
            ints = [k for k in result if isinstance(k, int) and not isinstance(k, bool)]
            result[max(max(ints) + 1, 0) if ints else 0] = value
        else:
            result[key] = value
        return result
    return appended


def prepend(value, key=None):
    """
    Puts value first. Integer keys (including an integer key argument) are
    renumbered from 0; string keys are kept as given.
    """
    def prepended(collection):
        if key is not None and not isinstance(key, int):
            result = {key: value}
            for k, v in pairs(collection):
                result.setdefault(k, v)
            return result
        result = {0: value}
        index = 1
        for k, v in pairs(collection):
            if isinstance(k, int):
                result[index] = v
                index += 1
            else:
                result[k] = v
        return result
    return prepended


def contains(needle):
    """Strict membership test. Stops pulling input at the first match."""
    isNeedle = strictEquals(needle)

    def containing(collection):
        for value in values(collection):
            if isNeedle(value):
                return True
        return False
    return containing


elem = contains


def every(pred):
    def checked(collection):
        for value in values(collection):
            if not pred(value):
                return False
        return True
    return checked


def some(pred):
    def checked(collection):
        for value in values(collection):
            if pred(value):
                return True
        return False
    return checked


def allWithKeys(pred):
    def checked(collection):
        for key, value in pairs(collection):
            if not pred(value, key):
                return False
        return True
    return checked


def anyWithKeys(pred):
    def checked(collection):
        for key, value in pairs(collection):
            if pred(value, key):
                return True
        return False
    return checked


def find(pred):
    def found(collection):
        for value in values(collection):
            if pred(value):
                return value
        return None
    return found


first = find


def firstWithKeys(pred):
    """First value for which pred(value, key) holds, or None."""
    def found(collection):
        for key, value in pairs(collection):
            if pred(value, key):
                return value
        return None
    return found


def firstValue(fn):
    """
    Returns the first truthy fn(value) itself rather than the value which
    produced it. None when no result is truthy.
    """
    def found(collection):
        for value in values(collection):
            result = fn(value)
            if result:
                return result
        return None
    return found


def firstValueWithKeys(fn):
    def found(collection):
        for key, value in pairs(collection):
            result = fn(value, key)
            if result:
                return result
        return None
    return found


def findIndex(pred):
    def found(collection):
        for key, value in pairs(collection):
            if pred(value):
                return key
        return None
    return found


def head(collection):
    return next(values(collection), None)


def last(collection):
    result = None
    for value in values(collection):
        result = value
    return result


def init(collection):
    return list(values(collection))[:-1]


def tail(collection):
    return list(values(collection))[1:]


def unique():
    """First occurrence wins; values are compared structurally."""
    def uniqued(collection):
        seen = set()
        result = {}
        for key, value in pairs(collection):
            marker = serialize(value)
            if marker not in seen:
                seen.add(marker)
                result[key] = value
        return result
    return uniqued


def uniqueBy(keyFn):
    def uniqued(collection):
        seen = set()
        result = {}
        for key, value in pairs(collection):
            marker = serialize(keyFn(value))
            if marker not in seen:
                seen.add(marker)
                result[key] = value
        return result
    return uniqued


def _nested(value):
    return isinstance(value, (list, tuple, Mapping, Cursor))


def flatten(collection):
    """Fully flattens nested lists, tuples, mappings and cursors into a list."""
    flat = []
    for value in values(collection):
        if _nested(value):
            flat.extend(flatten(value))
        else:
            flat.append(value)
    return flat


def concat(*collections):
    result = []
    for collection in collections:
        result.extend(values(collection))
    return result


def difference(collection, *others):
    excluded = concat(*others)
    return [value for value in values(collection) if value not in excluded]


def intersection(*collections):
    if not collections:
        return []
    rest = [list(values(c)) for c in collections[1:]]
    result = []
    for value in values(collections[0]):
        if len([r for r in rest if value not in r]) == 0:
            result.append(value)
    return result


def union(*collections):
    return list(unique()(concat(*collections)).values())


def liftA2(fn):
    """Applies the curried fn(a)(b) over every pairing of as and bs."""
    def lifted(as_, bs):
        bs = list(values(bs))
        return [fn(a)(b) for a in values(as_) for b in bs]
    return lifted


def liftA3(fn):
    """Applies the curried fn(a)(b)(c) over every combination of as, bs and cs."""
    def lifted(as_, bs, cs):
        bs = list(values(bs))
        cs = list(values(cs))
        result = []
        for a in values(as_):
            withA = fn(a)
            for b in bs:
                withB = withA(b)
                result.extend([withB(c) for c in cs])
        return result
    return lifted


all = every
any = some
map = amap
filter = afilter
lift = amap
