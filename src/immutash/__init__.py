import logging

from .errors import ImmutashError, InvalidArgumentError
from .guard import guarded, is_empty
from .operations import (
    at,
    chunk,
    compact,
    concat,
    count_by,
    defaults,
    defaults_deep,
    difference,
    difference_by,
    fill,
    group_by,
    intersection,
    invert,
    key_by,
    omit,
    omit_by,
    partition,
    pick,
    pick_by,
    pull_at,
    sample,
    sample_size,
    shuffle,
    size,
    union,
    uniq,
    xor,
)
from .ordering import (
    MAX_LIST_INDEX,
    insertion_index,
    sorted_index,
    sorted_index_by,
    sorted_last_index,
    sorted_last_index_by,
)
from .random_source import RandomSource, set_random_source, use_random_source
from .types import UNDEFINED, identity, noop, truthy

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    # Ordering
    "insertion_index",
    "sorted_index",
    "sorted_index_by",
    "sorted_last_index",
    "sorted_last_index_by",
    "MAX_LIST_INDEX",
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
    "RandomSource",
    "set_random_source",
    "use_random_source",
    # Mappings
    "at",
    "defaults",
    "defaults_deep",
    "invert",
    "omit",
    "omit_by",
    "pick",
    "pick_by",
    # Guard & helpers
    "guarded",
    "is_empty",
    "identity",
    "noop",
    "truthy",
    "UNDEFINED",
    # Errors
    "ImmutashError",
    "InvalidArgumentError",
]
