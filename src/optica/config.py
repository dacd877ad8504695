"""
Process-wide configuration for curried functions.

The only setting is the exception handler consulted when a fully applied
curried function raises. Individual curried functions may carry their own
handler (see curry.curry), which takes precedence over this one.

Contains:
    class Settings(BaseModel)
    settings                the process-wide Settings instance
    set_exception_handler   (handler: ExceptionHandler | None) -> None
    get_exception_handler   () -> ExceptionHandler | None
    reset                   () -> None
    exception_handler       (handler: ExceptionHandler | None) -> ContextManager[None]
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from collections.abc import Callable, Iterator
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

ExceptionHandler = Callable[[Exception, str], Any]


class Settings(BaseModel):
    """
    Validated holder for library-wide settings.
    :param exception_handler: Called as handler(exc, name) when a wrapped function raises; its return value
        replaces the call's result. None means errors propagate unchanged.
    """
    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    exception_handler: Optional[ExceptionHandler] = None


settings = Settings()


def set_exception_handler(handler: ExceptionHandler | None) -> None:
    """
    Installs (or, with None, clears) the process-wide exception handler.
    :param handler: A callable taking (exception, function name), or None.
    :raises pydantic.ValidationError: If handler is neither callable nor None.
    """
    settings.exception_handler = handler
    logger.debug("exception handler %s", "cleared" if handler is None else f"set to {handler!r}")


def get_exception_handler() -> ExceptionHandler | None:
    return settings.exception_handler


def reset() -> None:
    """Restores every setting to its default."""
    for name, field in Settings.model_fields.items():
        setattr(settings, name, field.default)


@contextmanager
def exception_handler(handler: ExceptionHandler | None) -> Iterator[None]:
    """
    Installs handler for the duration of a with-block, restoring the previous handler afterwards.
    :param handler: The handler to install, or None to suspend the current one.
    """
    previous = get_exception_handler()
    set_exception_handler(handler)
    try:
        yield
    finally:
        set_exception_handler(previous)
