"""
Small combinators shared by the object helpers and the lenses.

Contains:
    identity                (x: T) -> T
    always                  (value: T) -> Callable[..., T]
    compose                 (*fns: Func) -> Func
"""
from __future__ import annotations


from toolz import compose as _compose, identity

from optica.basetypes import T, Func
from optica.curry import curried


@curried
def always(value: T) -> Func:
    """
    always(v) is a function that returns v whatever it is called with.
    :param value: The value to return.
    :returns: The constant function.
    """
    def _(*args, **kwargs) -> T:
        return value
    return _


def compose(*fns: Func) -> Func:
    """
    Right-to-left composition: compose(f, g)(x) == f(g(x)).
    Lenses compose in reading order with it: compose(lens_prop('a'), lens_index(0)) focuses on obj['a'][0].
    :param fns: The functions to compose; curried functions are fine.
    :returns: The composed function (the identity if fns is empty).
    """
    return _compose(*fns)


__all__ = ['identity', 'always', 'compose']
