"""Error types for collection operations."""

from __future__ import annotations


class ImmutashError(Exception):
    """Base class for errors raised by immutash itself.

    Errors coming out of caller-supplied iteratees and predicates are not
    wrapped and propagate as-is.
    """


class InvalidArgumentError(ImmutashError, ValueError):
    """Error raised when an argument would make an operation misbehave.

    The offending value is kept on ``raw_value`` for debugging.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvalidArgumentError({super().__repr__()}, raw_value={self.raw_value!r})"
