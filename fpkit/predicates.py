from collections.abc import Sized
from func_prototypes import returned


def andPred(*preds):
    """
    True when every predicate holds for the given arguments. Evaluates left to
    right and stops at the first failure. With no predicates it is always True.
    """
    def conjunction(*args, **kwargs):
        for pred in preds:
            if not pred(*args, **kwargs):
                return False
        return True
    return conjunction


def orPred(*preds):
    """
    True when any predicate holds. Stops at the first success. With no
    predicates it is always False.
    """
    def disjunction(*args, **kwargs):
        for pred in preds:
            if pred(*args, **kwargs):
                return True
        return False
    return disjunction


def not_(pred):
    def inverted(*args, **kwargs):
        return not pred(*args, **kwargs)
    return inverted


def gt(bound):
    return lambda value: value > bound


def gte(bound):
    return lambda value: value >= bound


def lt(bound):
    return lambda value: value < bound


def lte(bound):
    return lambda value: value <= bound


def between(low, high):
    """Inclusive on both ends."""
    return lambda value: low <= value <= high


def equals(expected):
    return lambda value: value == expected


def strictEquals(expected):
    """
    Equal and of the same type, so 1, 1.0 and True are all distinct.
    The same object always matches itself (even nan).
    """
    def matches(value):
        return value is expected or (type(value) is type(expected) and value == expected)
    return matches


def typeIs(type_):
    return lambda value: isinstance(value, type_)


@returned(bool)
def isEmpty(value):
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return not value


def isNotEmpty(value):
    return not isEmpty(value)
