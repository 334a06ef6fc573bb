"""Join values of any type into one delimited string.

The joiner inspects the input once: a sized collection gets a buffer
estimate proportional to its length, anything else starts at the default
capacity. The buffer is rented from a BufferPool and released on every
exit path.

Example:
    >>> from stringseq.joining import comma_join, join
    >>> comma_join(["one", "two", "three"], include_space=True)
    'one, two, three'
    >>> join([1, None, 2.5], ";")
    '1;;2.5'
    >>> join(None, ";")
    ''
"""

from __future__ import annotations

from collections.abc import Iterable, Sized

from stringseq.config import JoinConfig, get_join_config
from stringseq.errors import InvalidArgumentError
from stringseq.formatting import append_element
from stringseq.pool import BufferPool, get_shared_pool
from stringseq.profiling import get_join_accumulator


def estimate_capacity(sequence: Iterable[object], config: JoinConfig | None = None) -> int:
    """Initial buffer capacity for joining sequence.

    Args:
        sequence: Input about to be joined
        config: Join configuration (defaults to the active context config)

    Returns:
        len(sequence) * capacity_per_element clamped to
        [default_capacity, max_initial_capacity] for sized inputs,
        default_capacity otherwise

    Examples:
        >>> estimate_capacity(range(10))
        128
        >>> estimate_capacity(range(100))
        400
        >>> estimate_capacity(range(10_000))
        4096
        >>> estimate_capacity(iter([1, 2]))
        128
    """
    if config is None:
        config = get_join_config()
    if isinstance(sequence, Sized):
        estimate = len(sequence) * config.capacity_per_element
        return min(max(estimate, config.default_capacity), config.max_initial_capacity)
    return config.default_capacity


def join(
    sequence: Iterable[object] | None,
    separator: str,
    include_space: bool = False,
    *,
    pool: BufferPool | None = None,
) -> str:
    """Join the text of every element, separated by a single character.

    None elements contribute empty text. When include_space is set, a
    single space follows each separator.

    Args:
        sequence: Values to join (None is treated as empty)
        separator: Single separator character
        include_space: Whether a space follows each separator
        pool: Pool to rent the buffer from (defaults to the shared pool)

    Returns:
        The joined string, or "" for a None or empty sequence

    Raises:
        InvalidArgumentError: If separator is not a single character
    """
    if sequence is None:
        return ""
    if not isinstance(separator, str) or len(separator) != 1:
        raise InvalidArgumentError("separator", "must be a single character")
    if isinstance(sequence, Sized) and len(sequence) == 0:
        return ""

    acc = get_join_accumulator()

    if (
        not include_space
        and isinstance(sequence, (list, tuple))
        and all(isinstance(item, str) for item in sequence)
    ):
        result = separator.join(sequence)
        if acc is not None:
            acc.record_join(len(sequence), len(result), fast_path=True)
        return result

    config = get_join_config()
    delimiter = separator + " " if include_space else separator
    if pool is None:
        pool = get_shared_pool()

    count = 0
    with pool.rent(estimate_capacity(sequence, config)) as builder:
        for item in sequence:
            if count:
                builder.append(delimiter)
            append_element(builder, item, config)
            count += 1

        if not count:
            return ""
        result = builder.to_string_and_release()

    if acc is not None:
        acc.record_join(count, len(result))
    return result


def comma_join(
    sequence: Iterable[object] | None,
    include_space: bool = False,
    *,
    pool: BufferPool | None = None,
) -> str:
    """Join with "," (or ", " when include_space is set).

    Examples:
        >>> comma_join(["one", "two", "three"])
        'one,two,three'
        >>> comma_join([])
        ''
    """
    return join(sequence, ",", include_space, pool=pool)


__all__ = [
    "comma_join",
    "estimate_capacity",
    "join",
]
