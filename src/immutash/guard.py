"""Empty-input guard shared by every collection operation.

Each operation assumes its first argument is a non-degenerate collection.
``@guarded`` centralizes the degenerate case: when the first argument
is empty or absent it is returned as-is and the operation never
runs. Everything else, including errors raised by caller callbacks,
passes straight through.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Sized
from typing import Any, TypeVar

from .types import UNDEFINED

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def is_empty(value: Any) -> bool:
    """True for ``None``, ``UNDEFINED`` and anything sized with length zero."""
    if value is None or value is UNDEFINED:
        return True
    return isinstance(value, Sized) and len(value) == 0


def guarded(fn: F) -> F:
    """Short-circuit ``fn`` when its first argument is empty.

    The first argument, passed positionally or by keyword, is returned
    unchanged (the same object). The remaining arguments are not inspected.
    A call that omits the first argument runs ``fn``, so variadic operations
    decide their own zero-argument result.

    Example:
        >>> @guarded
        ... def head(seq):
        ...     return seq[0]
        >>> head(pvector())
        pvector([])
        >>> head(seq=None) is None
        True
    """
    params = list(inspect.signature(fn).parameters.values())
    # Only a named first parameter can also arrive by keyword
    first_name = (
        params[0].name
        if params and params[0].kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
        else None
    )

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if args:
            first = args[0]
        elif first_name is not None and first_name in kwargs:
            first = kwargs[first_name]
        else:
            return fn(*args, **kwargs)
        if is_empty(first):
            logger.debug("%s: empty first argument, returning it unchanged", fn.__name__)
            return first
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
