"""
Shared type variables, aliases and the placeholder sentinel.

Defines types:
    Type variables
        T, X, Y  # generic type variables
        S, A     # lens source and focus
    Type aliases
        Func                Callable[..., Any]
        End[T]              Callable[[T], T]
        Hom[X, Y]           Callable[[X], Y]
        Key                 Hashable key or integer index
        Path                Sequence[Key]
        Getter[S, A]        Callable[[S], A]
        Setter[S, A]        Callable[[A, S], S]

Contains:
    class Placeholder
    __, PLACEHOLDER         the Placeholder singleton
    is_placeholder          (obj: Any) -> bool
"""
from __future__ import annotations

from typing import TypeVar, TypeAlias, Any, Union

from collections.abc import Callable, Hashable, Sequence

T, X, Y = TypeVar('T'), TypeVar('X'), TypeVar('Y')
S, A = TypeVar('S'), TypeVar('A')

Func = Callable[..., Any]
End = Callable[[T], T]
Hom = Callable[[X], Y]

Key: TypeAlias = Union[Hashable, int]
Path: TypeAlias = Sequence[Key]
Getter = Callable[[S], A]
Setter = Callable[[A, S], S]


class Placeholder:
    """
    Marks an argument position as "supplied later" in a curried call.
    There is exactly one instance; it is only ever equal to itself.
    """
    _instance: Placeholder | None = None

    def __new__(cls) -> Placeholder:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "__"

    def __eq__(self, other: Any) -> bool:
        return other is self

    def __hash__(self) -> int:
        return id(self)

    # copies and unpickled instances must stay the singleton
    def __copy__(self) -> Placeholder:
        return self

    def __deepcopy__(self, memo: dict) -> Placeholder:
        return self

    def __reduce__(self) -> str:
        return "PLACEHOLDER"


__ = PLACEHOLDER = Placeholder()


def is_placeholder(obj: Any) -> bool:
    """
    Checks whether obj is the placeholder sentinel.
    :param obj: The object to test.
    :returns: True only for the placeholder itself.
    """
    return obj is PLACEHOLDER
