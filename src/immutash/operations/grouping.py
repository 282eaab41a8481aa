"""Grouping operations that fold a collection into a PMap or a pair."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pyrsistent import PMap, PVector, pmap, pvector

from ..guard import guarded
from ..substrate import entries
from ..types import Iteratee, Predicate, identity, truthy


@guarded
def count_by(seq: Iterable[Any], iteratee: Iteratee = identity) -> PMap:
    """Count elements per ``iteratee`` result.

    Example:
        >>> count_by(v(6.1, 4.2, 6.3), math.floor)
        pmap({4: 1, 6: 2})
    """
    counts: dict[Any, int] = {}
    for value in seq:
        key = iteratee(value)
        counts[key] = counts.get(key, 0) + 1
    return pmap(counts)


@guarded
def group_by(collection: Iterable[Any], iteratee: Iteratee = identity) -> PMap:
    """Group entry keys by the ``iteratee`` result of their value.

    For a mapping the grouped items are its keys, for a set its members,
    for a sequence their positions. Within each group the order follows
    ``collection`` iteration.

    Example:
        >>> group_by(m(a=1, b=1, c=2))
        pmap({1: pvector(['a', 'b']), 2: pvector(['c'])})
    """
    groups: dict[Any, list[Any]] = {}
    for key, value in entries(collection):
        groups.setdefault(iteratee(value), []).append(key)
    return pmap({derived: pvector(keys) for derived, keys in groups.items()})


@guarded
def key_by(seq: Iterable[Any], iteratee: Iteratee = identity) -> PMap:
    """Index values by ``iteratee`` result; the last value for a key wins."""
    return pmap({iteratee(value): value for value in seq})


@guarded
def partition(seq: Iterable[Any], predicate: Predicate = identity) -> PVector:
    """Split ``seq`` into ``[matching, non_matching]``.

    Both halves keep the original order.

    Example:
        >>> partition(v(0, 1, False, 2, "", 3))
        pvector([pvector([1, 2, 3]), pvector([0, False, ''])])
    """
    truths = pvector().evolver()
    falsehoods = pvector().evolver()
    for value in seq:
        if truthy(predicate(value)):
            truths.append(value)
        else:
            falsehoods.append(value)
    return pvector([truths.persistent(), falsehoods.persistent()])
