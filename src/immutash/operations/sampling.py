"""Random sampling and size queries.

Each randomized call resolves its random source once on entry and draws
only from it. Pass ``random_source=`` or install one with
:func:`immutash.random_source.use_random_source` for deterministic runs.
"""

from __future__ import annotations

from collections.abc import Sequence, Sized
from typing import Any

from pyrsistent import PVector

from ..errors import InvalidArgumentError
from ..guard import guarded
from ..random_source import RandomSource, resolve_random_source
from ..substrate import as_pvector
from ..types import UNDEFINED
from .sequences import pull_at


@guarded
def sample(seq: Sequence[Any], *, random_source: RandomSource | None = None) -> Any:
    """One uniformly random element of ``seq``."""
    rng = resolve_random_source(random_source)
    return seq[rng.randint(0, len(seq) - 1)]


@guarded
def sample_size(seq: Sequence[Any], n: int = 1, *, random_source: RandomSource | None = None) -> PVector:
    """``min(n, len(seq))`` distinct positions of ``seq`` in random order.

    Partial Fisher-Yates: only the first ``n`` positions are settled.

    Args:
        seq: The sequence to sample
        n: Number of elements to take (must be >= 0)
        random_source: Source of random draws, defaults to the current one

    Returns:
        PVector of sampled elements

    Raises:
        InvalidArgumentError: If ``n`` is negative

    Example:
        >>> sample_size(v(1, 2, 3), 4)
        pvector([2, 3, 1])
    """
    if n < 0:
        raise InvalidArgumentError(f"sample size must be >= 0, got {n}", n)
    rng = resolve_random_source(random_source)
    result = as_pvector(seq).evolver()
    length = len(result)
    taken = min(n, length)

    for index in range(taken):
        swap = rng.randint(index, length - 1)
        result[index], result[swap] = result[swap], result[index]

    return result.persistent()[:taken]


@guarded
def shuffle(seq: Sequence[Any], *, random_source: RandomSource | None = None) -> PVector:
    """A random permutation of ``seq`` (Fisher-Yates over its positions)."""
    rng = resolve_random_source(random_source)
    indexes = list(range(len(seq)))
    rng.shuffle(indexes)
    return pull_at(seq, indexes)


def size(value: Any) -> int:
    """Element count of a collection, character count of text.

    ``None`` and ``UNDEFINED`` count as 0, as does any value with no notion
    of length.
    """
    if value is None or value is UNDEFINED:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return 0
