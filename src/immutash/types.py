"""Shared sentinels, aliases and truthiness rules."""

from __future__ import annotations

from collections.abc import Callable
from numbers import Number
from typing import Any, Final

Iteratee = Callable[[Any], Any]
Predicate = Callable[[Any], Any]


class _Undefined:
    """The absent marker.

    Distinct from ``None``, which plays the role of the null sentinel in
    ordering. There is exactly one instance, ``UNDEFINED``.
    """

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def identity(value: Any) -> Any:
    return value


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything, return ``None``."""
    return None


def truthy(value: Any) -> bool:
    """Truthiness with the collection library's falsey set.

    Falsey: ``UNDEFINED``, ``None``, ``False``, numeric zero, NaN and the
    empty string. Everything else, empty containers included, is truthy.
    """
    if value is None or value is UNDEFINED or value is False:
        return False
    if isinstance(value, Number):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True
