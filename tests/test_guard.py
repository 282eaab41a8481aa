"""Tests for the empty-input guard."""

import inspect

import pytest
from pyrsistent import pmap, pset, pvector, v

import immutash
from immutash import UNDEFINED, guarded, is_empty

GUARDED_OPERATIONS = [
    immutash.chunk,
    immutash.compact,
    immutash.concat,
    immutash.difference,
    immutash.difference_by,
    immutash.fill,
    immutash.intersection,
    immutash.pull_at,
    immutash.sorted_index,
    immutash.sorted_index_by,
    immutash.sorted_last_index,
    immutash.sorted_last_index_by,
    immutash.union,
    immutash.uniq,
    immutash.xor,
    immutash.count_by,
    immutash.group_by,
    immutash.key_by,
    immutash.partition,
    immutash.sample,
    immutash.sample_size,
    immutash.shuffle,
    immutash.at,
    immutash.defaults,
    immutash.defaults_deep,
    immutash.invert,
    immutash.omit,
    immutash.omit_by,
    immutash.pick,
    immutash.pick_by,
]


class TestIsEmpty:
    """Tests for is_empty."""

    def test_absent_values_are_empty(self):
        """None and UNDEFINED count as empty."""
        assert is_empty(None)
        assert is_empty(UNDEFINED)

    def test_zero_length_collections_are_empty(self):
        """Any sized value of length zero is empty."""
        assert is_empty(pvector())
        assert is_empty(pmap())
        assert is_empty(pset())
        assert is_empty([])
        assert is_empty("")

    def test_non_empty_values(self):
        """Populated collections, text and unsized scalars are not empty."""
        assert not is_empty(v(1))
        assert not is_empty("a")
        assert not is_empty(0)
        assert not is_empty(False)


@pytest.mark.parametrize("operation", GUARDED_OPERATIONS, ids=lambda fn: fn.__name__)
@pytest.mark.parametrize("empty", [None, UNDEFINED, pvector(), pmap(), pset()], ids=repr)
def test_empty_first_argument_is_returned_unchanged(operation, empty) -> None:
    """Every guarded operation echoes back an empty first argument."""
    assert operation(empty) is empty


@pytest.mark.parametrize("operation", GUARDED_OPERATIONS, ids=lambda fn: fn.__name__)
def test_remaining_arguments_are_ignored_when_empty(operation) -> None:
    """Malformed trailing arguments are never looked at."""
    empty = pvector()
    assert operation(empty, object(), object()) is empty


def test_guard_preserves_metadata() -> None:
    """The wrapper keeps the name, docstring and wrapped function."""
    assert immutash.chunk.__name__ == "chunk"
    assert "slices" in immutash.chunk.__doc__
    assert immutash.chunk.__wrapped__(v(1, 2), 1) == v(v(1), v(2))


KEYWORD_OPERATIONS = [
    operation
    for operation in GUARDED_OPERATIONS
    if next(iter(inspect.signature(operation).parameters.values())).kind
    is inspect.Parameter.POSITIONAL_OR_KEYWORD
]


@pytest.mark.parametrize("operation", KEYWORD_OPERATIONS, ids=lambda fn: fn.__name__)
@pytest.mark.parametrize("empty", [None, UNDEFINED, pvector(), pmap()], ids=repr)
def test_empty_first_argument_by_keyword_is_returned_unchanged(operation, empty) -> None:
    """The guard also applies when the first argument is passed by name."""
    first_name = next(iter(inspect.signature(operation).parameters))
    assert operation(**{first_name: empty}) is empty


def test_keyword_first_argument_calls_through() -> None:
    """A non-empty first argument passed by name reaches the operation."""
    assert immutash.count_by(seq=v(1, 1, 2)) == pmap({1: 2, 2: 1})
    assert immutash.sample(seq=v("only")) == "only"


def test_variadic_operations_take_no_keyword_first_argument() -> None:
    """Variadic operations have no named first parameter to guard."""
    names = {operation.__name__ for operation in KEYWORD_OPERATIONS}
    assert {"intersection", "union", "xor"}.isdisjoint(names)
    assert {"sample", "count_by", "chunk", "at"} <= names


def test_guard_calls_through_for_non_empty_input() -> None:
    """Non-empty first arguments reach the wrapped function."""
    calls = []

    @guarded
    def record(first, *rest):
        calls.append((first, rest))
        return "ran"

    assert record(v(1), 2) == "ran"
    assert calls == [(v(1), (2,))]


def test_guard_propagates_callback_errors() -> None:
    """Errors from caller callbacks are not swallowed."""

    def explode(_):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        immutash.count_by(v(1, 2), explode)


def test_unguarded_helpers() -> None:
    """size and noop are plain functions."""
    assert immutash.size(None) == 0
    assert immutash.noop(1, key="value") is None
    assert not hasattr(immutash.size, "__wrapped__")
