"""
Curried, non-mutating helpers for dictionaries and sequences.

Reads never raise for a missing key, a missing index or a non-container along a path: they return None.
Writes return new containers and share untouched values with their input.

Contains:
    prop, prop_or, props, path                  reads
    assoc, dissoc, assoc_path                   keyed writes
    nth, update                                 sequence read/write
    has, keys, values, to_pairs
    merge, omit, pick, pick_all, pick_by
    eq_props, where
"""
from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import toolz

from optica.basetypes import Key, Path
from optica.curry import curried

_lookup_errors = (KeyError, IndexError, TypeError)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


@curried
def prop(key: Key, obj: Any) -> Any:
    """
    Reads obj[key], or None if it isn't there.
    :param key: A mapping key or sequence index.
    :param obj: The container to read from.
    :returns: The value, or None.
    """
    return toolz.get_in([key], obj)


@curried
def prop_or(default: Any, key: Key, obj: Any) -> Any:
    """
    Reads obj[key], falling back to default when the key is absent or maps to None.
    """
    value = toolz.get_in([key], obj)
    return default if value is None else value


@curried
def props(keys: Sequence[Key], obj: Any) -> list:
    return [toolz.get_in([k], obj) for k in keys]


@curried
def path(keys: Path, obj: Any) -> Any:
    """
    Follows keys into nested containers.
    :param keys: Mapping keys and sequence indices, outermost first. An empty path returns obj itself.
    :param obj: The structure to traverse.
    :returns: The value at the end of the path, or None if any step is missing or passes through a
        non-container (strings and bytes included).
    """
    for key in keys:
        if not (isinstance(obj, Mapping) or _is_sequence(obj)):
            return None
        obj = toolz.get_in([key], obj)
    return obj


@curried
def nth(n: int, seq: Sequence) -> Any:
    """
    Reads seq[n]; negative n counts from the end.
    :returns: The element, or None when n is out of range.
    """
    try:
        return seq[n]
    except _lookup_errors:
        return None


@curried
def update(n: int, value: Any, seq: Sequence) -> Sequence:
    """
    Returns a copy of seq with element n replaced by value.
    :param n: The index to replace; negative n counts from the end.
    :param value: The new element.
    :param seq: A list or tuple; the copy has the same type.
    :returns: The updated copy, or an unchanged copy if n is out of range.
    """
    items = list(seq)
    if -len(items) <= n < len(items):
        items[n] = value
    return type(seq)(items) if isinstance(seq, tuple) else items


def _assign(obj: Any, key: Key, value: Any) -> Any:
    # set one key or index on a copy of obj, creating obj if it isn't a container
    if isinstance(key, int) and _is_sequence(obj):
        items = list(obj)
        if key < 0:
            key += len(items)
            if key < 0:
                return type(obj)(items) if isinstance(obj, tuple) else items
        items.extend([None] * (key + 1 - len(items)))
        items[key] = value
        return type(obj)(items) if isinstance(obj, tuple) else items
    if isinstance(obj, Mapping):
        if not isinstance(obj, dict):
            return toolz.assoc(obj, key, value)
        # copy.copy keeps dict subclasses intact, including a defaultdict's default_factory
        copied = copy.copy(obj)
        copied[key] = value
        return copied
    if isinstance(key, int) and key >= 0:
        return _assign([], key, value)
    return {key: value}


@curried
def assoc(key: Key, value: Any, obj: Any) -> Any:
    """
    Makes a shallow copy of obj with key set to value. Integer keys on lists and tuples set an index.
    :param key: The key or index to set.
    :param value: The value to place there.
    :param obj: The container to copy.
    :returns: The new container.
    """
    return _assign(obj, key, value)


@curried
def dissoc(key: Key, obj: Mapping) -> dict:
    return toolz.dissoc(obj, key)


@curried
def assoc_path(keys: Path, value: Any, obj: Any) -> Any:
    """
    Returns a copy of obj with value placed at the end of keys.
    Only containers along the path are copied. Missing intermediates are created: a list when the next key
    is an int, otherwise a dict. Lists are padded with None up to an index past their end.
    :param keys: The path, outermost key first. An empty path replaces obj with value.
    :param value: The value to place.
    :param obj: The structure to copy.
    :returns: The new structure.
    """
    if not keys:
        return value
    head, rest = keys[0], keys[1:]
    if rest:
        child = toolz.get_in([head], obj)
        if not (isinstance(child, Mapping) or _is_sequence(child)):
            child = [] if isinstance(rest[0], int) else {}
        value = assoc_path(rest, value, child)
    return _assign(obj, head, value)


@curried
def has(key: Key, obj: Mapping) -> bool:
    return key in obj


@curried
def keys(obj: Mapping) -> list:
    return list(obj.keys())


@curried
def values(obj: Mapping) -> list:
    return list(obj.values())


@curried
def to_pairs(obj: Mapping) -> list[tuple]:
    return list(obj.items())


@curried
def merge(obj_a: Mapping, obj_b: Mapping) -> dict:
    """
    Merges two mappings into a new dict; on shared keys obj_b wins.
    """
    return toolz.merge(obj_a, obj_b)


@curried
def omit(names: Sequence[Key], obj: Mapping) -> dict:
    return toolz.keyfilter(lambda k: k not in names, obj)


@curried
def pick(names: Sequence[Key], obj: Mapping) -> dict:
    """
    Keeps only the listed keys; keys obj lacks are skipped.
    """
    return toolz.keyfilter(lambda k: k in names, obj)


@curried
def pick_all(names: Sequence[Key], obj: Mapping) -> dict:
    """
    Like pick, but every listed key appears in the result, mapped to None when obj lacks it.
    """
    return {k: obj.get(k) for k in names}


@curried
def pick_by(predicate: Callable[[Any, Key], bool], obj: Mapping) -> dict:
    """
    Keeps the entries for which predicate(value, key) is truthy.
    """
    return toolz.itemfilter(lambda item: predicate(item[1], item[0]), obj)


@curried
def eq_props(key: Key, obj_a: Mapping, obj_b: Mapping) -> bool:
    return toolz.get_in([key], obj_a) == toolz.get_in([key], obj_b)


@curried
def where(predicates: Mapping[Key, Callable[[Any], bool]], obj: Mapping) -> bool:
    """
    Tests obj against a mapping of per-key predicates.
    :param predicates: Maps each key to a predicate on obj's value for that key (None if missing).
    :param obj: The mapping to test.
    :returns: True if every predicate holds.
    """
    return all(test(toolz.get_in([k], obj)) for k, test in predicates.items())


__all__ = [
    'prop', 'prop_or', 'props', 'path', 'nth', 'update', 'assoc', 'dissoc', 'assoc_path',
    'has', 'keys', 'values', 'to_pairs', 'merge', 'omit', 'pick', 'pick_all', 'pick_by',
    'eq_props', 'where',
]
