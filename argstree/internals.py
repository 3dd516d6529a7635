import functools
from collections.abc import Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    internal singleton sentinel for "no value given".

    the parser uses it to tell a token without "=" apart from "name=" (an empty
    assigned value), since both None and "" are meaningful there.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def rename(x, /, name=None):
    """
    set __name__/__qualname__ on a callable, or return a curried renamer when
    given the name first.
    """
    if isinstance(x, str):
        return functools.partial(rename, name=x)
    if not isinstance(name, str):
        raise TypeError("callable name must be a string")
    x.__qualname__ = name
    x.__name__ = name
    return x


class StorageGuard:
    """
    internal base for write-once objects (parsed nodes, spec builders).

    rules
    - attribute names starting with '-' are backing storage: never readable
      through getattr, writable only during the build phase.
    - the build phase is the body of the context manager returned by __new__:
        with super().__new__(cls) as self:
            setattr(self, "-field", value)
    """
    __slots__ = ("__building",)

    @contextmanager
    def __new__(cls):
        self = super().__new__(cls)
        self.__building = True
        try:
            yield self
        finally:
            self.__building = False

    def __getattribute__(self, name, /):
        if isinstance(name, str) and name.startswith("-"):
            raise AttributeError("internal storage is not accessible")
        return object.__getattribute__(self, name)

    def __setattr__(self, name, value, /):
        if isinstance(name, str) and name.startswith("-") and not self.__building:
            raise AttributeError("internal storage is read-only")
        return object.__setattr__(self, name, value)


def view(name):
    """
    read-only property over the backing field "-<name>".

    lists come back as tuples and mappings as MappingProxyType, so callers
    cannot grow a node after it was built.
    """

    @rename(name)
    def getter(self):
        value = object.__getattribute__(self, "-" + name)
        if isinstance(value, list):
            return tuple(value)
        if isinstance(value, Mapping):
            return MappingProxyType(value)
        return value

    return property(getter)


__all__ = (
    "UnsetType",
    "Unset",
    "rename",
    "StorageGuard",
    "view",
)
