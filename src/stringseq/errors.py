"""Exception classes for stringseq.

Provides standardized exceptions for error handling throughout stringseq.
Each concrete error also derives from the matching builtin exception so
callers can catch either.
"""

from __future__ import annotations


class StringSeqError(Exception):
    """Base exception for all stringseq errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(StringSeqError, TypeError):
    """A required argument was None or had the wrong shape.

    Raised immediately at call time, including for lazy operations whose
    elements are only pulled later.
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        """Initialize invalid argument error.

        Args:
            param_name: Name of the offending parameter
            message: Description of the problem (defaults to "must not be None")
        """
        self.param_name = param_name
        self.message = message or "must not be None"
        super().__init__(f"Argument '{param_name}' {self.message}")


class BufferReleasedError(StringSeqError, RuntimeError):
    """A StringBuilder was used after it was released to its pool."""

    pass


class FormatError(StringSeqError, ValueError):
    """A self-formatting element broke its formatting contract.

    Raised when try_format() returns more characters than it was offered.
    """

    def __init__(self, type_name: str, max_length: int, written: int) -> None:
        """Initialize format error.

        Args:
            type_name: Name of the element type that misbehaved
            max_length: Space offered to try_format()
            written: Number of characters actually returned
        """
        self.type_name = type_name
        self.max_length = max_length
        self.written = written
        super().__init__(
            f"{type_name}.try_format() returned {written} characters "
            f"but only {max_length} were available"
        )


__all__ = [
    "BufferReleasedError",
    "FormatError",
    "InvalidArgumentError",
    "StringSeqError",
]
