"""Text predicates and case folding for stringseq.

Provides the canonical single-string helpers that the sequence operations
are built on.

Example:
    >>> from stringseq.utils.text import fold_case, is_null_or_empty
    >>> fold_case("Straße") == fold_case("STRASSE")
    True
    >>> is_null_or_empty("")
    True
"""

from __future__ import annotations

from typing import TypeVar

from stringseq.errors import InvalidArgumentError

T = TypeVar("T")


def fold_case(value: str) -> str:
    """Fold a string for case-insensitive comparison.

    Uses Unicode case folding, which does not depend on locale. Two strings
    compare equal ignoring case when their folded forms are equal.

    Args:
        value: Text to fold

    Returns:
        Case-folded text

    Examples:
        >>> fold_case("Hello")
        'hello'
    """
    return value.casefold()


def is_null_or_empty(value: str | None) -> bool:
    """Return True for None or the empty string."""
    return not value


def is_null_or_whitespace(value: str | None) -> bool:
    """Return True for None, the empty string, or whitespace-only text.

    Examples:
        >>> is_null_or_whitespace("  \\t")
        True
        >>> is_null_or_whitespace(" a ")
        False
    """
    return not value or value.isspace()


def require(value: T | None, param_name: str) -> T:
    """Return value unchanged, raising InvalidArgumentError if it is None.

    Args:
        value: Argument to check
        param_name: Parameter name reported in the error

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(param_name)
    return value
