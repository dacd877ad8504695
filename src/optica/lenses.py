"""
Van Laarhoven lenses: a lens is a function (a -> F a) -> s -> F s for any Functor F.

Reading and writing share one code path; the functor chosen at call time decides which happens.
view runs the lens through Const, which drops the setter's rebuild, and over runs it through Identity,
which applies it. Lenses never mutate their target: untouched substructure is shared with the input.

    name = lens_prop('name')
    view(name, {'name': 'Ada'})                        == 'Ada'
    set(name, 'Grace', {'name': 'Ada'})                == {'name': 'Grace'}
    over(lens_index(1), lambda v: v * 10, [1, 2, 3])   == [1, 20, 3]
    view(compose(lens_prop('a'), lens_index(0)), {'a': [5]}) == 5

Contains:
    lens                    (getter: Getter[S, A], setter: Setter[S, A]) -> Lens
    lens_prop               (key: Key) -> Lens
    lens_index              (n: int) -> Lens
    lens_path               (keys: Path) -> Lens
    view                    (lens: Lens, target: S) -> A
    over                    (lens: Lens, fn: End[A], target: S) -> S
    set                     (lens: Lens, value: A, target: S) -> S
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from optica.basetypes import S, A, End, Getter, Setter, Key, Path
from optica.curry import curried
from optica.functions import always
from optica.functors import Functor, Identity, Const, fmap
from optica import objects

Lens = Callable[[Callable[[Any], Functor]], Callable[[Any], Functor]]


@curried
def lens(getter: Getter[S, A], setter: Setter[S, A]) -> Lens:
    """
    Builds a lens from a getter and a non-mutating setter.
    :param getter: Reads the focus from a target.
    :param setter: Called as setter(focus, target); returns a new target holding focus.
    :returns: A curried function of (to_functor_fn, target) returning a Functor of the target type.
    """
    @curried
    def run_lens(to_functor_fn: Callable[[A], Functor[A]], target: S) -> Functor[S]:
        return fmap(lambda focus: setter(focus, target), to_functor_fn(getter(target)))
    return run_lens


@curried
def lens_prop(key: Key) -> Lens:
    """Lens focused on obj[key]; setting copies obj with key replaced."""
    return lens(objects.prop(key), objects.assoc(key))


@curried
def lens_index(n: int) -> Lens:
    """Lens focused on element n of a list or tuple."""
    return lens(objects.nth(n), objects.update(n))


@curried
def lens_path(keys: Path) -> Lens:
    """
    Lens focused on the value at the end of keys.
    Viewing a missing path gives None; setting one creates the missing containers. The empty path focuses
    on the whole target.
    :param keys: Mapping keys and sequence indices, outermost first.
    """
    keys = tuple(keys)
    return lens(objects.path(keys), objects.assoc_path(keys))


# lenses are applied one argument at a time so composed lenses work like curried ones

@curried
def view(lens: Lens, target: S) -> A:
    """
    Reads the focus of lens in target.
    :param lens: The lens.
    :param target: The structure to read.
    :returns: The focused value, or None if it is absent.
    """
    return lens(Const.of)(target).value


@curried
def over(lens: Lens, fn: End[A], target: S) -> S:
    """
    Returns a copy of target with the focus of lens replaced by fn(focus).
    :param lens: The lens.
    :param fn: Transforms the current focus.
    :param target: The structure to update; it is left untouched.
    :returns: The updated structure.
    """
    return lens(lambda focus: Identity.of(focus).map(fn))(target).value


@curried
def set(lens: Lens, value: A, target: S) -> S:
    """
    Returns a copy of target with the focus of lens replaced by value.
    """
    return over(lens, always(value), target)


__all__ = ['Lens', 'lens', 'lens_prop', 'lens_index', 'lens_path', 'view', 'over', 'set']
