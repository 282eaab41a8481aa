"""Substitutable random source for the sampling operations.

The active source is held in a context variable, so threads and asyncio
tasks can each install their own. Sampling operations read it once per call.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator, MutableSequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Protocol, runtime_checkable

from .config import get_settings
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Port for random draws. ``random.Random`` satisfies it."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...

    def shuffle(self, x: MutableSequence[Any]) -> None:
        """Shuffle ``x`` in place."""
        ...


_default_source: RandomSource | None = None
_current_source: ContextVar[RandomSource | None] = ContextVar("immutash_random_source", default=None)


def default_random_source() -> RandomSource:
    """Process-wide fallback source, seeded from ``IMMUTASH_RANDOM_SEED`` when set."""
    global _default_source
    if _default_source is None:
        seed = get_settings().random_seed
        if seed is not None:
            logger.debug("Seeding default random source with %d", seed)
        _default_source = random.Random(seed)
    return _default_source


def current_random_source() -> RandomSource:
    """The source installed for this context, else the process default."""
    source = _current_source.get()
    return source if source is not None else default_random_source()


def _check(source: Any) -> RandomSource:
    if not isinstance(source, RandomSource):
        raise InvalidArgumentError(
            f"Random source must provide randint() and shuffle(), got {type(source).__name__}",
            source,
        )
    return source


def set_random_source(source: RandomSource | None) -> None:
    """Install ``source`` for the current context; ``None`` restores the default."""
    if source is not None:
        _check(source)
    logger.debug("Installing random source %r", source)
    _current_source.set(source)


@contextmanager
def use_random_source(source: RandomSource) -> Iterator[RandomSource]:
    """Temporarily install ``source`` for the current context.

    Example:
        >>> with use_random_source(random.Random(7)):
        ...     shuffle(v(1, 2, 3))
    """
    token = _current_source.set(_check(source))
    try:
        yield source
    finally:
        _current_source.reset(token)


def resolve_random_source(source: RandomSource | None) -> RandomSource:
    """Pick the explicit ``source`` if given, else the current one."""
    if source is None:
        return current_random_source()
    return _check(source)
