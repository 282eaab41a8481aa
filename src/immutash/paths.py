"""Dot/bracket property paths over nested collections."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .substrate import is_sequence
from .types import UNDEFINED

_PATH_SEPARATORS = re.compile(r"[\[\].]+")


def split_path(path: str) -> list[str]:
    """Split ``"a[0].b.c"`` into ``["a", "0", "b", "c"]``.

    Runs of separators collapse and empty segments are dropped.
    """
    return [segment for segment in _PATH_SEPARATORS.split(path) if segment]


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        try:
            key = int(segment)
        except ValueError:
            return UNDEFINED
        return current[key] if key in current else UNDEFINED
    if is_sequence(current):
        try:
            index = int(segment)
        except ValueError:
            return UNDEFINED
        if -len(current) <= index < len(current):
            return current[index]
    return UNDEFINED


def get_in(collection: Any, path: str) -> Any:
    """Resolve ``path`` against ``collection``, ``UNDEFINED`` when any step is missing."""
    current = collection
    for segment in split_path(path):
        current = _step(current, segment)
        if current is UNDEFINED:
            break
    return current
