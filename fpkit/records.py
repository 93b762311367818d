class Newable(object):
    """Mixin giving a class a new(...) factory which forwards to its constructor."""

    @classmethod
    def new(cls, *args, **kwargs):
        return cls(*args, **kwargs)


def fieldNames(obj):
    """Declared fields of obj: annotations and __slots__ across its classes, then its __dict__."""
    names = []
    for klass in reversed(type(obj).__mro__):
        for name in getattr(klass, "__annotations__", {}):
            if name not in names:
                names.append(name)
        slots = getattr(klass, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    for name in getattr(obj, "__dict__", {}):
        if name not in names:
            names.append(name)
    return names


def fieldValues(obj):
    """Maps each field of obj which currently holds a value to that value."""
    state = {}
    for name in fieldNames(obj):
        try:
            state[name] = object.__getattribute__(obj, name)
        except AttributeError:
            continue
    return state


class Evolvable(object):
    """
    Mixin for copy-with-changes updates.

    evolve() builds a new instance of the same class without running
    __init__. Named fields take the given values, every other field keeps its
    current value, and fields which were never set stay unset. Works on frozen
    dataclasses and slotted classes too.
    """

    def evolve(self, **changes):
        cls = type(self)
        fields = fieldNames(self)
        unknown = sorted([name for name in changes if name not in fields])
        if unknown:
            raise TypeError("%s has no field(s): %s" % (cls.__name__, ", ".join(unknown)))
        state = fieldValues(self)
        state.update(changes)
        clone = cls.__new__(cls)
        for name, value in state.items():
            object.__setattr__(clone, name, value)
        return clone
