"""Process-wide pool of reusable StringBuilder storage.

Builders are rented through a context manager that guarantees release on
every exit path:

    >>> from stringseq.pool import get_shared_pool
    >>> with get_shared_pool().rent(256) as sb:
    ...     _ = sb.append("a").append("b")
    ...     text = sb.to_string_and_release()

If the block exits without releasing (normally because an exception is
propagating), the rental releases the builder itself.

Thread Safety:
    The free list is guarded by a threading.Lock. The pool keeps the parts
    list and grown capacity of released builders, never the builders
    themselves: every acquire() returns a new StringBuilder, so a released
    handle kept by its previous renter cannot touch the next renter's buffer.

"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from stringseq.stringbuilder import StringBuilder
from stringseq.utils.logger import get_logger

logger = get_logger(__name__)

# Builders that grew beyond this many characters are not kept
DEFAULT_MAX_RETAINED_CAPACITY = 1 << 16
DEFAULT_MAX_RETAINED = 16


class BufferPool:
    """Bounded free list of StringBuilder storage.

    Args:
        max_retained: Maximum number of idle buffers kept
        max_retained_capacity: Builders with a larger capacity are dropped
            on release instead of being kept

    """

    __slots__ = (
        "_created",
        "_dropped",
        "_free",
        "_lock",
        "_max_retained",
        "_max_retained_capacity",
        "_rented",
        "_reused",
    )

    def __init__(
        self,
        max_retained: int = DEFAULT_MAX_RETAINED,
        max_retained_capacity: int = DEFAULT_MAX_RETAINED_CAPACITY,
    ) -> None:
        # (parts, capacity) of released builders
        self._free: list[tuple[list[str], int]] = []
        self._lock = threading.Lock()
        self._max_retained = max_retained
        self._max_retained_capacity = max_retained_capacity
        self._rented = 0
        self._reused = 0
        self._created = 0
        self._dropped = 0

    def acquire(self, capacity: int) -> StringBuilder:
        """Take a builder with at least the given capacity.

        The caller must release it (release() or to_string_and_release()).
        Prefer rent(), which does that on every exit path.
        """
        with self._lock:
            self._rented += 1
            if self._free:
                storage = self._free.pop()
                self._reused += 1
            else:
                storage = None
                self._created += 1
        if storage is None:
            return StringBuilder(capacity, pool=self)
        parts, retained_capacity = storage
        return StringBuilder(max(capacity, retained_capacity), pool=self, parts=parts)

    @contextmanager
    def rent(self, capacity: int) -> Iterator[StringBuilder]:
        """Rent a builder for the duration of a with block.

        Args:
            capacity: Minimum initial capacity in characters

        Yields:
            A live StringBuilder owned by the caller
        """
        builder = self.acquire(capacity)
        try:
            yield builder
        finally:
            if not builder.released:
                builder.release()

    def _return(self, parts: list[str], capacity: int) -> None:
        """Take back released storage (called by StringBuilder.release)."""
        if capacity > self._max_retained_capacity:
            with self._lock:
                self._dropped += 1
            logger.debug(
                "Dropping builder with capacity %d (limit %d)",
                capacity,
                self._max_retained_capacity,
            )
            return
        with self._lock:
            if len(self._free) < self._max_retained:
                self._free.append((parts, capacity))
                return
            self._dropped += 1
        logger.debug("Pool full (%d buffers), dropping builder", self._max_retained)

    @property
    def available(self) -> int:
        """Number of idle buffers currently held."""
        with self._lock:
            return len(self._free)

    def stats(self) -> dict[str, int]:
        """Snapshot of pool counters.

        Returns:
            Dict with rented, reused, created, dropped and available.
        """
        with self._lock:
            return {
                "rented": self._rented,
                "reused": self._reused,
                "created": self._created,
                "dropped": self._dropped,
                "available": len(self._free),
            }

    def clear(self) -> None:
        """Discard all idle buffers."""
        with self._lock:
            self._free.clear()


_SHARED_POOL = BufferPool()


def get_shared_pool() -> BufferPool:
    """Return the process-wide pool used by join() when none is given."""
    return _SHARED_POOL


__all__ = [
    "BufferPool",
    "get_shared_pool",
]
