"""Operations - guarded transformations over persistent collections."""

from .grouping import count_by, group_by, key_by, partition
from .mappings import at, defaults, defaults_deep, invert, omit, omit_by, pick, pick_by
from .sampling import sample, sample_size, shuffle, size
from .sequences import (
    chunk,
    compact,
    concat,
    difference,
    difference_by,
    fill,
    intersection,
    pull_at,
    union,
    uniq,
    xor,
)

__all__ = [
    # Sequences
    "chunk",
    "compact",
    "concat",
    "difference",
    "difference_by",
    "fill",
    "intersection",
    "pull_at",
    "union",
    "uniq",
    "xor",
    # Grouping
    "count_by",
    "group_by",
    "key_by",
    "partition",
    # Sampling
    "sample",
    "sample_size",
    "shuffle",
    "size",
    # Mappings
    "at",
    "defaults",
    "defaults_deep",
    "invert",
    "omit",
    "omit_by",
    "pick",
    "pick_by",
]
