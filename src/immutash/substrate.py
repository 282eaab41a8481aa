"""Adapter over the pyrsistent collections.

Operations that promise "the same kind" of collection as their input build
their result through :func:`same_kind`; everything else about structural
sharing is left to pyrsistent.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pyrsistent import PSet, PVector, pset, pvector


def same_kind(template: Any, items: Iterable[Any]) -> Any:
    """Build a collection of the same kind as ``template`` from ``items``.

    ``PSet`` and ``tuple`` are preserved; any other input yields a ``PVector``.
    """
    if isinstance(template, PSet):
        return pset(items)
    if isinstance(template, tuple):
        return tuple(items)
    return pvector(items)


def entries(collection: Any) -> Iterator[tuple[Any, Any]]:
    """Iterate ``(key, value)`` pairs.

    Mappings yield their items, sets key each member by itself, anything
    else yields ``(position, value)``.
    """
    if isinstance(collection, Mapping):
        return iter(collection.items())
    if isinstance(collection, (PSet, set, frozenset)):
        return ((value, value) for value in collection)
    return enumerate(collection)


def is_sequence(value: Any) -> bool:
    """True for indexable, ordered collections other than text."""
    return isinstance(value, (PVector, list, tuple))


def as_pvector(items: Iterable[Any]) -> PVector:
    """``items`` itself when already a PVector, otherwise a new one."""
    if isinstance(items, PVector):
        return items
    return pvector(items)


def is_flattenable(value: Any) -> bool:
    """True for collections ``concat`` splices in: sequences and sets, not text or mappings."""
    return is_sequence(value) or isinstance(value, (PSet, set, frozenset))
