"""
Argot helpers shared by every layer of the package.

Contents
- Unset: the "argument omitted" marker. None is a value a caller may pass on
  purpose (a description of None, a default of None), so omission needs a
  marker of its own.
- coalesce(value, default): swap Unset for a default, keep everything else.
- rename(function, name) / @rename(name): give generated callables a readable
  name in tracebacks and reprs.
- mirror("attr"): read-only property over self._attr; containers come back as
  tuple / mappingproxy / frozenset snapshots.
- ordinal(position): "first" ... "tenth", then "11th", "21st", "102nd".

    >>> coalesce(Unset, "-")
    '-'
    >>> ordinal(22)
    '22nd'
"""
import functools
from collections.abc import Mapping, Sequence, Set
from types import MappingProxyType
from typing import final

_WORDS = ("first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth", "tenth")


@final
class UnsetType:
    """
    Type of the Unset marker.

    There is exactly one instance: calling UnsetType() again, copying it or
    unpickling it all give back Unset. The marker is falsy, prints as "Unset"
    and the type refuses subclasses.
    """

    @functools.cache
    def __new__(cls):
        return object.__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return UnsetType, ()

    def __init_subclass__(cls, **options):
        raise TypeError("UnsetType cannot be subclassed")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """Return default when object is Unset, object otherwise (even if falsy)."""
    if object is Unset:
        return default
    return object


def rename(*parameters):
    """
    rename(function, name) renames function in place and returns it;
    rename(name) returns a decorator doing the same.
    """
    match parameters:
        case (function, str() as name):
            if not callable(function):
                raise TypeError("rename() expects a callable, got %r" % (function,))
            function.__name__ = function.__qualname__ = name
            return function
        case (str() as name,):
            return functools.partial(_rename_later, name=name)
        case _:
            raise TypeError("rename() expects (function, name) or (name), got %d arguments" % len(parameters))


def _rename_later(function, /, *, name):
    return rename(function, name)


def _freeze(object):
    if isinstance(object, (str, bytes, bytearray)):
        return object
    if isinstance(object, Sequence):
        return tuple(object)
    if isinstance(object, Mapping):
        return MappingProxyType(dict(object))
    if isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Property reading self._<name>, frozen when it is a container.

        class Registry:
            options = mirror("options")   # exposes self._options as a tuple
    """
    if not isinstance(name, str):
        raise TypeError("mirror() expects an attribute name, got %r" % (name,))

    attribute = "_" + name

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, attribute))

    return property(getter)


def ordinal(number, /):
    """English ordinal of a 1-based position, spelled out up to ten."""
    if 1 <= number <= len(_WORDS):
        return _WORDS[number - 1]
    if number % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return "%d%s" % (number, suffix)


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "mirror",
    "ordinal",
)
