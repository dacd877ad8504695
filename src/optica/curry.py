"""
Currying with placeholder-aware partial application.

A curried function collects positional arguments over any number of calls and runs the wrapped
function once `arity` real values are bound. The placeholder `__` reserves a position for a later call:
    add3 = curry(lambda a, b, c: a + b + c)
    add3(1)(2)(3) == add3(1, 2)(3) == add3(__, 2, 3)(1) == add3(__, __, 3)(1, 2) == 6

Contains:
    class ArityError(TypeError)
    class Curried
        func, arity, args, remaining
        __call__            (self, *args) -> Curried | Any
    curry                   (fn: Func, arity: int | None = None, *, exception_handler: ExceptionHandler | None = None) -> Curried
    curried                 (fn: Func | None = None, *, arity: int | None = None) -> Curried | Decorator
    infer_arity             (fn: Func) -> int
"""
from __future__ import annotations

import inspect
import logging
from contextvars import ContextVar
from functools import update_wrapper
from typing import Any

from optica.basetypes import Func, is_placeholder
from optica.config import ExceptionHandler, get_exception_handler

logger = logging.getLogger(__name__)

_depth: ContextVar[int] = ContextVar('optica_curried_depth', default=0)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class ArityError(TypeError):
    """Raised when a curried function receives more arguments than it has open positions."""


def infer_arity(fn: Func) -> int:
    """
    Counts the required positional parameters of fn.
    :param fn: The callable to inspect.
    :returns: The number of positional parameters without a default value.
    :raises TypeError: If fn accepts *args or its signature can't be read; pass an explicit arity instead.
    """
    name = getattr(fn, '__name__', repr(fn))
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError) as e:
        msg = f"Cannot infer the arity of {name}; pass it explicitly"
        raise TypeError(msg) from e
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        msg = f"{name} is variadic; pass its arity explicitly"
        raise TypeError(msg)
    arity = sum(1 for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty)
    logger.debug("inferred arity %d for %s", arity, name)
    return arity


class Curried:
    """
    A function of fixed arity together with the arguments bound to it so far.
    Bound arguments live in an immutable slot tuple; each call builds a new Curried, so partial
    applications branching off the same Curried never see each other's arguments.
    """
    def __init__(self,
                 func: Func,
                 arity: int,
                 args: tuple[Any, ...] = (),
                 exception_handler: ExceptionHandler | None = None
        ) -> None:
        """
        :param func: The function to call once all positions are filled.
        :param arity: The number of positional arguments func takes.
        :param args: Arguments bound so far, possibly including placeholders.
        :param exception_handler: Handler used instead of the process-wide one when func raises.
        """
        update_wrapper(self, func)
        self.func: Func = func
        self.arity: int = arity
        self.args: tuple[Any, ...] = args
        self._handler: ExceptionHandler | None = exception_handler

    @property
    def remaining(self) -> int:
        """Number of positions still waiting for a real value."""
        return self.arity - len(self.args) + sum(1 for a in self.args if is_placeholder(a))

    def _merge(self, new_args: tuple[Any, ...]) -> tuple[Any, ...]:
        # new arguments fill open placeholder slots left to right, then extend the tuple
        slots = list(self.args)
        pending = list(new_args)
        for i, slot in enumerate(slots):
            if not pending:
                break
            if is_placeholder(slot):
                slots[i] = pending.pop(0)
        slots.extend(pending)
        if len(slots) > self.arity:
            name = getattr(self.func, '__name__', 'function')
            msg = f"{name} takes {self.arity} arguments but {len(slots)} were supplied"
            raise ArityError(msg)
        return tuple(slots)

    def _invoke(self, args: tuple[Any, ...]) -> Any:
        # only the outermost curried call falls back on the process-wide handler, so an error raised
        # several curried layers down reaches it once, from the call the user made
        depth = _depth.get()
        token = _depth.set(depth + 1)
        try:
            return self.func(*args)
        except Exception as e:
            handler = self._handler or (get_exception_handler() if depth == 0 else None)
            if handler is None:
                raise
            name = getattr(self.func, '__name__', repr(self.func))
            logger.debug("exception in %s handled by %r: %s", name, handler, e)
            return handler(e, name)
        finally:
            _depth.reset(token)

    def __call__(self, *args) -> Curried | Any:
        """
        Binds args to the open positions.
        :param args: Real values or placeholders, at most as many as there are open positions.
        :returns: The wrapped function's result once every position holds a real value, otherwise a new Curried.
        :raises ArityError: If more arguments are supplied than the function takes.
        """
        slots = self._merge(args)
        if len(slots) == self.arity and not any(is_placeholder(a) for a in slots):
            return self._invoke(slots)
        return Curried(self.func, self.arity, slots, self._handler)

    def __repr__(self) -> str:
        name = getattr(self.func, '__qualname__', None) or getattr(self.func, '__name__', repr(self.func))
        bound = ", ".join(map(repr, self.args))
        return f"<curried {name}/{self.arity}({bound})>"


def curry(fn: Func, arity: int | None = None, *, exception_handler: ExceptionHandler | None = None) -> Curried:
    """
    Turns fn into a curried function.
    :param fn: The function to curry. A Curried is re-wrapped with its bound arguments kept.
    :param arity: Number of positional arguments fn takes; inferred from its signature if omitted.
    :param exception_handler: Called as handler(exc, name) instead of the process-wide handler when fn raises.
    :returns: A Curried with no arguments bound (or fn's bound arguments, if fn is already curried).
    :raises ValueError: If arity is not a non-negative integer.
    :raises TypeError: If arity is omitted and can't be inferred.
    """
    bound: tuple[Any, ...] = ()
    if isinstance(fn, Curried):
        bound, exception_handler = fn.args, exception_handler or fn._handler
        arity = fn.arity if arity is None else arity
        fn = fn.func
    if arity is None:
        arity = infer_arity(fn)
    if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        msg = f"arity must be a non-negative integer, got {arity!r}"
        raise ValueError(msg)
    if len(bound) > arity:
        msg = f"{len(bound)} arguments already bound exceed arity {arity}"
        raise ArityError(msg)
    return Curried(fn, arity, bound, exception_handler)


def curried(fn: Func | None = None, *, arity: int | None = None) -> Any:
    """
    Decorator form of curry; usable bare (@curried) or with an explicit arity (@curried(arity=2)).
    :param fn: The function being decorated.
    :param arity: Explicit arity, required for variadic functions.
    :returns: The curried function, or a decorator when called without fn.
    """
    if fn is None:
        return lambda f: curry(f, arity)
    return curry(fn, arity)


__all__ = ['ArityError', 'Curried', 'curry', 'curried', 'infer_arity']
