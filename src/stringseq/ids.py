"""Composite id splitting.

A composite id packs a partition key and a document id into one string,
separated by ":". An id without the delimiter is its own partition key.

Example:
    >>> split_id("tenant-1:order-42")
    ('tenant-1', 'order-42')
    >>> to_split_ids(["a:b", "c"])
    [('a', 'b'), ('c', 'c')]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sized

from stringseq.errors import InvalidArgumentError
from stringseq.utils.text import require

ID_DELIMITER = ":"

SplitId = tuple[str, str]


def split_id(value: str, delimiter: str = ID_DELIMITER) -> SplitId:
    """Split a composite id at the first delimiter.

    Args:
        value: Composite id
        delimiter: Separator between partition key and document id

    Returns:
        (partition_key, document_id)

    Raises:
        InvalidArgumentError: If value is None or empty

    Examples:
        >>> split_id("pk:doc:with:colons")
        ('pk', 'doc:with:colons')
        >>> split_id("single")
        ('single', 'single')
    """
    if not value:
        raise InvalidArgumentError("value", "must be a non-empty string")
    partition_key, found, document_id = value.partition(delimiter)
    if not found:
        return value, value
    return partition_key, document_id


def to_split_ids(
    ids: Iterable[str],
    splitter: Callable[[str], SplitId] = split_id,
) -> list[SplitId]:
    """Split every composite id, preserving order.

    Args:
        ids: Composite ids
        splitter: Function that parses one id (defaults to split_id)

    Returns:
        One (partition_key, document_id) pair per id

    Raises:
        InvalidArgumentError: If ids is None, or an id is None or empty
    """
    require(ids, "ids")
    if isinstance(ids, Sized) and len(ids) == 0:
        return []
    return [splitter(value) for value in ids]


__all__ = [
    "ID_DELIMITER",
    "SplitId",
    "split_id",
    "to_split_ids",
]
