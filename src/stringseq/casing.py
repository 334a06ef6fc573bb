"""Case conversion and case-insensitive collections.

Case-insensitive means equal after fold_case(), a fixed Unicode case
folding that does not depend on locale.

Example:
    >>> list(to_upper(["one", None, "Two"]))
    ['ONE', '', 'TWO']
    >>> list(distinct_ignore_case(["one", "One", "TWO", "two", "three"]))
    ['one', 'TWO', 'three']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSet

from stringseq.utils.text import fold_case, require


def to_lower(sequence: Iterable[str | None]) -> Iterator[str]:
    """Lazily lower-case every element. None becomes ""."""
    require(sequence, "sequence")
    return _convert(sequence, str.lower)


def to_upper(sequence: Iterable[str | None]) -> Iterator[str]:
    """Lazily upper-case every element. None becomes ""."""
    require(sequence, "sequence")
    return _convert(sequence, str.upper)


def _convert(sequence: Iterable[str | None], convert: Callable[[str], str]) -> Iterator[str]:
    for value in sequence:
        yield "" if value is None else convert(value)


class CaseInsensitiveSet(MutableSet[str]):
    """Set of strings compared ignoring case.

    Keeps the first-seen spelling of each case class as its representative
    and iterates in insertion order. None is never stored.

    Usage:
            >>> s = CaseInsensitiveSet(["Hello", "hello", "WORLD"])
            >>> len(s)
            2
            >>> "HELLO" in s
            True
            >>> list(s)
            ['Hello', 'WORLD']

    Thread Safety:
        Not thread-safe. Guard concurrent mutation externally.

    """

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[str | None] = ()) -> None:
        self._items: dict[str, str] = {}
        for value in values:
            self.add(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        return fold_case(value) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: str | None) -> None:
        """Add value unless an equal spelling is already present."""
        if value is None:
            return
        self._items.setdefault(fold_case(value), value)

    def discard(self, value: str | None) -> None:
        """Remove the member equal to value ignoring case, if any."""
        if value is None:
            return
        self._items.pop(fold_case(value), None)

    def get(self, value: str) -> str | None:
        """Return the stored spelling equal to value ignoring case."""
        return self._items.get(fold_case(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items.values())!r})"


def to_hash_set_ignore_case(sequence: Iterable[str | None]) -> CaseInsensitiveSet:
    """Collect the unique strings of sequence, ignoring case.

    Examples:
        >>> sorted(to_hash_set_ignore_case(["Hello", "hello", "WORLD", "world"]))
        ['Hello', 'WORLD']
    """
    require(sequence, "sequence")
    return CaseInsensitiveSet(sequence)


def distinct_ignore_case(sequence: Iterable[str | None]) -> Iterator[str]:
    """Lazily yield the first occurrence of each case class.

    Order is preserved and None elements are dropped.
    """
    require(sequence, "sequence")
    return _distinct(sequence)


def _distinct(sequence: Iterable[str | None]) -> Iterator[str]:
    seen: set[str] = set()
    for value in sequence:
        if value is None:
            continue
        key = fold_case(value)
        if key not in seen:
            seen.add(key)
            yield value


__all__ = [
    "CaseInsensitiveSet",
    "distinct_ignore_case",
    "to_hash_set_ignore_case",
    "to_lower",
    "to_upper",
]
