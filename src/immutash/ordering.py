"""Ordering engine - insertion points in sorted collections.

Keys are compared with a total order that places the special values after
every ordinary key:

    ordinary keys < None < UNDEFINED < NaN

``None`` and ``UNDEFINED`` candidates never compare "less" than an ordinary
search key, so sequences ending in those values still bisect correctly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .guard import guarded
from .types import UNDEFINED, Iteratee, identity

MAX_LIST_LENGTH = 2**32 - 1
MAX_LIST_INDEX = MAX_LIST_LENGTH - 1


def insertion_index(
    collection: Sequence[Any] | None,
    value: Any,
    key_fn: Iteratee = identity,
    prefer_highest: bool = False,
) -> int:
    """Binary search for the index at which ``value`` keeps ``collection`` sorted.

    Args:
        collection: Sequence already sorted by ``key_fn``
        value: The value to place
        key_fn: Derives the comparison key for ``value`` and every element
        prefer_highest: Return the highest valid index among equal keys
            instead of the lowest

    Returns:
        An index in ``[0, len(collection)]``, capped at ``MAX_LIST_INDEX``
    """
    value = key_fn(value)

    low = 0
    high = len(collection) if collection is not None else 0
    val_is_nan = value != value
    val_is_null = value is None
    val_is_undefined = value is UNDEFINED

    while low < high:
        mid = (low + high) // 2
        computed = key_fn(collection[mid])  # type: ignore[index]
        oth_is_defined = computed is not UNDEFINED
        oth_is_null = computed is None
        oth_is_reflexive = computed == computed

        if val_is_nan:
            set_low = prefer_highest or oth_is_reflexive
        elif val_is_undefined:
            set_low = oth_is_reflexive and (prefer_highest or oth_is_defined)
        elif val_is_null:
            set_low = oth_is_reflexive and oth_is_defined and (prefer_highest or not oth_is_null)
        elif oth_is_null or not oth_is_defined:
            # No ordering against an ordinary key
            set_low = False
        else:
            set_low = computed <= value if prefer_highest else computed < value

        if set_low:
            low = mid + 1
        else:
            high = mid
    return min(high, MAX_LIST_INDEX)


@guarded
def sorted_index(seq: Sequence[Any], value: Any) -> int:
    """Lowest index at which ``value`` can be inserted into sorted ``seq``.

    Example:
        >>> sorted_index(v(30, 50), 40)
        1
    """
    return insertion_index(seq, value)


@guarded
def sorted_index_by(seq: Sequence[Any], value: Any, iteratee: Iteratee = identity) -> int:
    """Like :func:`sorted_index`, ranking ``value`` and elements by ``iteratee``.

    Example:
        >>> sorted_index_by(v(m(x=4), m(x=5)), m(x=4), lambda o: o["x"])
        0
    """
    return insertion_index(seq, value, iteratee)


@guarded
def sorted_last_index(seq: Sequence[Any], value: Any) -> int:
    """Highest index at which ``value`` can be inserted into sorted ``seq``."""
    return insertion_index(seq, value, prefer_highest=True)


@guarded
def sorted_last_index_by(seq: Sequence[Any], value: Any, iteratee: Iteratee = identity) -> int:
    return insertion_index(seq, value, iteratee, prefer_highest=True)
