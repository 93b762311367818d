from fpkit.cursor import Cursor, collect, iterate
from fpkit.lazy import itfilter, itfilterWithKeys, itmap, itmapWithKeys, ittake, ittakeWhile
from fpkit.eager import amap, afilter
from fpkit.compose import pipe
import pytest


def inc(x):
    return x + 1


def even(x):
    return x % 2 == 0


def test_itmap(shape, build):
    mapped = itmap(inc)(build([1, 2, 3]))
    assert isinstance(mapped, Cursor)
    assert collect(mapped) == {0: 2, 1: 3, 2: 4}

def test_itmap_keeps_mapping_keys():
    assert list(itmap(inc)({'a': 1, 'b': 2}).items()) == [('a', 2), ('b', 3)]

def test_itmap_is_lazy(counted):
    fn = counted(inc)
    mapped = itmap(fn)([1, 2, 3])
    assert fn.count == 0
    assert next(mapped) == 2
    assert fn.count == 1

def test_itmap_name():
    assert itmap(inc).__name__ == "itmapped_inc"

def test_itmapWithKeys():
    mapped = itmapWithKeys(lambda v, k: "%s:%s" % (k, v))({'a': 1, 'b': 2})
    assert collect(mapped) == {'a': 'a:1', 'b': 'b:2'}

def test_itfilter(shape, build):
    assert collect(itfilter(even)(build([1, 2, 3, 4]))) == {1: 2, 3: 4}

def test_itfilter_default_truthiness():
    assert collect(itfilter()([0, 1, '', 'a', None, [], [0]])) == {1: 1, 3: 'a', 6: [0]}

def test_itfilterWithKeys():
    odd_keys = itfilterWithKeys(lambda v, k: k % 2 == 1)
    assert collect(odd_keys(['a', 'b', 'c', 'd'])) == {1: 'b', 3: 'd'}
    assert collect(itfilterWithKeys()([0, 5])) == {1: 5}

def test_itfilter_on_infinite_input():
    evens = itfilter(even)(iterate(1, inc))
    assert list(ittake(3)(evens)) == [2, 4, 6]

def test_ittake(shape, build):
    assert collect(ittake(2)(build([1, 2, 3]))) == {0: 1, 1: 2}
    assert collect(ittake(5)(build([1, 2]))) == {0: 1, 1: 2}
    assert collect(ittake(0)(build([1, 2]))) == {}

def test_ittake_pulls_only_what_it_needs():
    pulled = []
    def source():
        for x in range(10):
            pulled.append(x)
            yield x
    assert list(ittake(3)(source())) == [0, 1, 2]
    assert pulled == [0, 1, 2]

def test_ittakeWhile():
    assert list(ittakeWhile(lambda x: x < 4)(iterate(1, inc))) == [1, 2, 3]

def test_lazy_pipeline_runs_per_element():
    log = []
    def record(tag):
        def fn(x):
            log.append((tag, x))
            return x
        return fn
    out = pipe([1, 2], itmap(record('a')), itmap(record('b')))
    assert log == []
    assert list(out) == [1, 2]
    assert log == [('a', 1), ('b', 1), ('a', 2), ('b', 2)]

def test_lazy_and_eager_agree(shape, build):
    assert collect(itmap(inc)(build([3, 4]))) == amap(inc)(build([3, 4]))
    assert collect(itfilter(even)(build([3, 4]))) == afilter(even)(build([3, 4]))

def test_lazy_errors_surface_on_pull():
    def boom(x):
        raise RuntimeError(x)
    mapped = itmap(boom)([1])
    with pytest.raises(RuntimeError):
        next(mapped)
