"""Lazy null, empty and whitespace filters.

Example:
    >>> list(remove_null_or_empty(["one", "", None, "two"]))
    ['one', 'two']
    >>> list(remove_null_or_whitespace(["one", "  ", None, "two"]))
    ['one', 'two']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from stringseq.utils.text import is_null_or_empty, is_null_or_whitespace, require


def remove_null_or_empty(sequence: Iterable[str | None]) -> Iterator[str]:
    """Lazily drop None and "" elements."""
    require(sequence, "sequence")
    return _remove(sequence, is_null_or_empty)


def remove_null_or_whitespace(sequence: Iterable[str | None]) -> Iterator[str]:
    """Lazily drop None, "" and whitespace-only elements."""
    require(sequence, "sequence")
    return _remove(sequence, is_null_or_whitespace)


def _remove(
    sequence: Iterable[str | None],
    predicate: Callable[[str | None], bool],
) -> Iterator[str]:
    for value in sequence:
        if not predicate(value):
            yield value  # type: ignore[misc]


__all__ = [
    "remove_null_or_empty",
    "remove_null_or_whitespace",
]
