"""Membership, prefix, suffix and substring tests over string sequences.

Every test short-circuits on the first matching element and skips None
elements. Case-insensitive comparisons fold both sides with fold_case().

Example:
    >>> starts_with_ignore_case(["apple", "banana"], "BAN")
    True
    >>> contains_a_part(["hello world", "sample"], "test")
    False
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sized

from stringseq.utils.text import fold_case, require


def contains_a_part(
    sequence: Iterable[str | None],
    part: str | None,
    ignore_case: bool = True,
) -> bool:
    """Return True if any element contains part as a substring.

    A None or empty part never matches.

    Args:
        sequence: Strings to search
        part: Substring to look for
        ignore_case: Compare after case folding

    Raises:
        InvalidArgumentError: If sequence is None
    """
    require(sequence, "sequence")
    if not part:
        return False
    if isinstance(sequence, Sized) and len(sequence) == 0:
        return False

    if not ignore_case:
        return any(value is not None and part in value for value in sequence)

    needle = fold_case(part)
    return any(value is not None and needle in fold_case(value) for value in sequence)


def starts_with_ignore_case(sequence: Iterable[str | None], prefix: str) -> bool:
    """Return True if any element starts with prefix, ignoring case.

    An empty prefix matches any non-None element.

    Raises:
        InvalidArgumentError: If sequence or prefix is None
    """
    require(sequence, "sequence")
    require(prefix, "prefix")
    folded = fold_case(prefix)
    return _any_folded(sequence, lambda value: value.startswith(folded))


def ends_with_ignore_case(sequence: Iterable[str | None], suffix: str) -> bool:
    """Return True if any element ends with suffix, ignoring case.

    An empty suffix matches any non-None element.

    Raises:
        InvalidArgumentError: If sequence or suffix is None
    """
    require(sequence, "sequence")
    require(suffix, "suffix")
    folded = fold_case(suffix)
    return _any_folded(sequence, lambda value: value.endswith(folded))


def contains_ignore_case(sequence: Iterable[str | None], value: str) -> bool:
    """Return True if any element equals value, ignoring case.

    Raises:
        InvalidArgumentError: If sequence or value is None
    """
    require(sequence, "sequence")
    require(value, "value")
    folded = fold_case(value)
    return _any_folded(sequence, lambda current: current == folded)


def _any_folded(sequence: Iterable[str | None], test: Callable[[str], bool]) -> bool:
    for current in sequence:
        if current is not None and test(fold_case(current)):
            return True
    return False


__all__ = [
    "contains_a_part",
    "contains_ignore_case",
    "ends_with_ignore_case",
    "starts_with_ignore_case",
]
