"""
The functor capability lenses are generic over, and its two instances.

    Identity.of(2).map(f)   == Identity(f(2))     # the function is applied
    Const.of(2).map(f)      == Const(2)           # the function is ignored

Contains:
    class Functor(ABC, Generic[T])
        of                  (cls, value: T) -> Functor[T]
        map                 (self, fn: Hom[T, X]) -> Functor[X]
    class Identity(Functor)
    class Const(Functor)
    fmap                    (fn: Hom[X, Y], functor: Functor[X] | list | tuple | dict) -> Functor[Y] | list | tuple | dict
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic

from optica.basetypes import T, X, Y, Hom
from optica.curry import curried


class Functor(ABC, Generic[T]):
    """
    A single wrapped value with a law-abiding map:
        x.map(identity) == x
        x.map(f).map(g) == x.map(lambda v: g(f(v)))
    Instances are immutable and compare equal when they are of the same class and wrap equal values.
    """
    __slots__ = ('value',)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, 'value', value)

    @classmethod
    def of(cls, value: T) -> Functor[T]:
        """
        Wraps a bare value.
        :param value: The value to wrap.
        :returns: A new instance of cls holding value.
        """
        return cls(value)

    @abstractmethod
    def map(self, fn: Hom[T, X]) -> Functor[X]:
        ...

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Identity(Functor[T]):
    """Applies mapped functions; lenses run their setter through it to rebuild the target."""
    __slots__ = ()

    def map(self, fn: Hom[T, X]) -> Identity[X]:
        return Identity(fn(self.value))


class Const(Functor[T]):
    """Ignores mapped functions; lenses read their focus through it without rebuilding the target."""
    __slots__ = ()

    def map(self, fn: Hom[T, X]) -> Const[T]:
        return self


@curried
def fmap(fn: Hom[X, Y], functor: Any) -> Any:
    """
    Maps fn over a functor, a list or tuple (element-wise), or a dict (value-wise).
    :param fn: The function to apply.
    :param functor: A Functor instance or a supported container.
    :returns: The mapped functor or container.
    :raises TypeError: If functor is none of the supported kinds.
    """
    if isinstance(functor, Functor):
        return functor.map(fn)
    if isinstance(functor, (list, tuple)):
        return type(functor)(fn(x) for x in functor) if isinstance(functor, tuple) else [fn(x) for x in functor]
    if isinstance(functor, Mapping):
        return {k: fn(v) for k, v in functor.items()}
    msg = f"Cannot map over {type(functor).__name__}"
    raise TypeError(msg)


__all__ = ['Functor', 'Identity', 'Const', 'fmap']
