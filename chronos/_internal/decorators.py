"""Decorators used inside Chronos.

    - @deprecated(replacement): Warn when an old factory alias is used
    - @compute_once: Cache the result of a zero-argument lookup

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import warnings
from typing import Callable, Generic, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


def deprecated(replacement: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Mark a function as a deprecated alias of ``replacement``.

    Every call emits a DeprecationWarning that names the replacement,
    then runs the wrapped function.

    Args:
        replacement: Dotted name of the function to use instead.

    Examples:
        >>> @deprecated("Instant.from_timestamp")
        ... def create_from_timestamp(ts):
        ...     return Instant.from_timestamp(ts)
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        message = f"{func.__qualname__}() is deprecated, use {replacement}() instead"

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        wrapper.__deprecated__ = message  # type: ignore[attr-defined]
        return wrapper

    return decorator


class compute_once(Generic[T]):
    """Call a zero-argument function once and keep its result.

    ``cache_clear()`` drops the stored value so the next call computes
    it again.
    """

    _unset = object()

    def __init__(self, func: Callable[[], T]) -> None:
        functools.update_wrapper(self, func)
        self._func = func
        self._value: object = self._unset

    def __call__(self) -> T:
        if self._value is self._unset:
            self._value = self._func()
        return self._value  # type: ignore[return-value]

    def cache_clear(self) -> None:
        self._value = self._unset


__all__ = [
    "deprecated",
    "compute_once",
]
