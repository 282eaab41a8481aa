"""Sequence operations: chunking, filtering and set-like combination.

Results are either "the same kind" as the input (see
:func:`immutash.substrate.same_kind`) or lazy iterators, as documented per
function.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain
from typing import Any

from more_itertools import unique_everseen
from pyrsistent import PVector, pset, pvector

from ..errors import InvalidArgumentError
from ..guard import guarded
from ..substrate import as_pvector, is_flattenable, same_kind
from ..types import UNDEFINED, Iteratee, identity, truthy


@guarded
def chunk(seq: Sequence[Any], size: int = 1) -> PVector:
    """Split ``seq`` into slices of length ``size``.

    The final slice holds whatever is left over.

    Args:
        seq: The sequence to split
        size: Length of each slice (must be >= 1)

    Returns:
        PVector of slices

    Raises:
        InvalidArgumentError: If ``size`` is less than 1

    Example:
        >>> chunk(v("a", "b", "c", "d"), 3)
        pvector([pvector(['a', 'b', 'c']), pvector(['d'])])
    """
    if size < 1:
        raise InvalidArgumentError(f"chunk size must be >= 1, got {size}", size)
    return pvector(seq[start:start + size] for start in range(0, len(seq), size))


@guarded
def compact(seq: Iterable[Any]) -> Any:
    """Same kind as ``seq`` with falsey values removed.

    Falsey: UNDEFINED, None, False, 0, NaN and "".
    """
    return same_kind(seq, (value for value in seq if truthy(value)))


@guarded
def concat(seq: Iterable[Any], *values: Any) -> PVector:
    """Append ``values`` to ``seq``.

    Sequence and set values are flattened one level; text, mappings and
    scalars are appended as a single element.

    Example:
        >>> concat(v(1), v(2), v(v(3)), 4)
        pvector([1, 2, pvector([3]), 4])
    """
    result = as_pvector(seq).evolver()
    for value in values:
        if is_flattenable(value):
            result.extend(value)
        else:
            result.append(value)
    return result.persistent()


@guarded
def difference(seq: Iterable[Any], values: Iterable[Any]) -> Any:
    """Elements of ``seq`` not in ``values``, in ``seq`` order."""
    excluded = pset(values)
    return same_kind(seq, (value for value in seq if value not in excluded))


@guarded
def difference_by(seq: Iterable[Any], values: Iterable[Any], iteratee: Iteratee = identity) -> Any:
    """Like :func:`difference`, comparing ``iteratee`` results.

    Example:
        >>> difference_by(v(2.1, 1.2), v(2.3, 3.4), math.floor)
        pvector([1.2])
    """
    excluded = pset(iteratee(value) for value in values)
    return same_kind(seq, (value for value in seq if iteratee(value) not in excluded))


@guarded
def fill(seq: Sequence[Any], value: Any, start: int = 0, end: int | None = None) -> PVector:
    """Replace ``end - start`` positions from ``start`` with ``value``.

    Follows splice semantics: a negative ``start`` counts from the end, and
    positions past the end are appended rather than rejected.

    Example:
        >>> fill(v(4, 6, 8, 10), "*", 1, 3)
        pvector([4, '*', '*', 10])
    """
    length = len(seq)
    if end is None:
        end = length
    count = end - start

    if start < 0:
        start = max(length + start, 0)
    start = min(start, length)
    if count <= 0:
        return as_pvector(seq)

    result = as_pvector(seq).evolver()
    replaced = min(count, length - start)
    for index in range(start, start + replaced):
        result[index] = value
    result.extend([value] * (count - replaced))
    return result.persistent()


@guarded
def intersection(*seqs: Iterable[Any]) -> Any:
    """Unique values of the first collection present in all the others.

    Lazy; order follows the first collection. With no arguments an empty
    ``PSet`` is returned.

    Example:
        >>> list(intersection(v(2, 1, 3), v(1, 2, 3), v(1, 2)))
        [2, 1]
    """
    if not seqs:
        return pset()
    first, *others = seqs
    other_sets = [pset(other) for other in others]
    return (value for value in unique_everseen(first) if all(value in other for other in other_sets))


@guarded
def pull_at(seq: Sequence[Any], indexes: Iterable[int]) -> PVector:
    """Values of ``seq`` at ``indexes``; ``seq`` itself is untouched.

    Out-of-range indexes yield ``UNDEFINED`` in their position.
    """
    length = len(seq)
    return pvector(seq[index] if -length <= index < length else UNDEFINED for index in indexes)


@guarded
def union(*seqs: Iterable[Any]) -> Iterator[Any]:
    """Lazy unique values across all ``seqs`` in first-seen order."""
    return unique_everseen(chain.from_iterable(seqs))


@guarded
def uniq(seq: Iterable[Any]) -> Iterator[Any]:
    """Lazy de-duplication of ``seq`` keeping first occurrences."""
    return unique_everseen(seq)


@guarded
def xor(*seqs: Iterable[Any]) -> Iterator[Any]:
    """Lazy values that occur in exactly one of ``seqs``.

    Duplicates within a single collection do not count twice. Order is
    first-seen across the collections.

    Example:
        >>> list(xor(v(2, 1), v(2, 3)))
        [1, 3]
    """
    seqs = tuple(tuple(seq) for seq in seqs)
    occurrences = Counter(chain.from_iterable(pset(seq) for seq in seqs))
    return (value for value in unique_everseen(chain.from_iterable(seqs)) if occurrences[value] == 1)

