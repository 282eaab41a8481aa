"""Mapping operations: path lookup, defaults, inversion and key filtering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pyrsistent import PMap, PVector, pmap, pset, pvector

from ..guard import guarded
from ..paths import get_in
from ..types import UNDEFINED, Predicate, identity, truthy


def _as_pmap(mapping: Mapping[Any, Any]) -> PMap:
    if isinstance(mapping, PMap):
        return mapping
    return pmap(mapping)


@guarded
def at(mapping: Mapping[Any, Any], paths: Iterable[str]) -> PVector:
    """Values at each dot/bracket path; ``UNDEFINED`` where a path is missing.

    Example:
        >>> at(freeze({"a": [{"b": {"c": 3}}, 4]}), v("a[0].b.c", "a[1]"))
        pvector([3, 4])
    """
    return pvector(get_in(mapping, path) for path in paths)


def _fill_missing(target: PMap, source: Mapping[Any, Any], deep: bool) -> PMap:
    result = target.evolver()
    for key, incoming in source.items():
        current = target.get(key, UNDEFINED)
        if current is UNDEFINED:
            result[key] = incoming
        elif deep and isinstance(current, Mapping) and isinstance(incoming, Mapping):
            result[key] = _fill_missing(_as_pmap(current), incoming, deep)
    return result.persistent()


@guarded
def defaults(mapping: Mapping[Any, Any], *sources: Mapping[Any, Any]) -> PMap:
    """Fill keys of ``mapping`` that are missing or ``UNDEFINED`` from ``sources``.

    Sources apply left to right; once a key holds a value, later sources are
    ignored for it. Only the top level is considered.

    Example:
        >>> defaults(m(a=1), m(b=2), m(a=3))
        pmap({'a': 1, 'b': 2})
    """
    result = _as_pmap(mapping)
    for source in sources:
        result = _fill_missing(result, source, deep=False)
    return result


@guarded
def defaults_deep(mapping: Mapping[Any, Any], *sources: Mapping[Any, Any]) -> PMap:
    """Like :func:`defaults`, recursing where both sides hold a mapping.

    Example:
        >>> defaults_deep(freeze({"a": {"b": 2}}), freeze({"a": {"b": 1, "c": 3}}))
        pmap({'a': pmap({'b': 2, 'c': 3})})
    """
    result = _as_pmap(mapping)
    for source in sources:
        result = _fill_missing(result, source, deep=True)
    return result


@guarded
def invert(mapping: Mapping[Any, Any]) -> PMap:
    """Swap keys and values; for duplicate values the last key iterated wins."""
    return pmap({value: key for key, value in mapping.items()})


def _filter_keys(mapping: Mapping[Any, Any], predicate: Predicate, keep: bool) -> PMap:
    result = _as_pmap(mapping).evolver()
    for key in mapping:
        if truthy(predicate(key)) != keep:
            result.remove(key)
    return result.persistent()


@guarded
def omit_by(mapping: Mapping[Any, Any], predicate: Predicate = identity) -> PMap:
    """Drop entries whose KEY satisfies ``predicate``.

    The predicate is called with the key only, not the value.

    Example:
        >>> omit_by(m(a=1, b=2, c=3), lambda key: key == "a")
        pmap({'b': 2, 'c': 3})
    """
    return _filter_keys(mapping, predicate, keep=False)


@guarded
def pick_by(mapping: Mapping[Any, Any], predicate: Predicate = identity) -> PMap:
    """Keep only entries whose KEY satisfies ``predicate``.

    The predicate is called with the key only, not the value.
    """
    return _filter_keys(mapping, predicate, keep=True)


@guarded
def omit(mapping: Mapping[Any, Any], props: Iterable[Any]) -> PMap:
    """Drop the keys listed in ``props``."""
    excluded = pset(props)
    return omit_by(mapping, lambda key: key in excluded)


@guarded
def pick(mapping: Mapping[Any, Any], props: Iterable[Any]) -> PMap:
    """Keep only the keys listed in ``props``."""
    included = pset(props)
    return pick_by(mapping, lambda key: key in included)
