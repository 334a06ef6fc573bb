"""StringBuilder for O(n) string accumulation with pooled reuse.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Tracks a logical capacity that doubles
whenever appended content does not fit. When pooled, the parts list and
grown capacity outlive the builder: each rental gets a fresh StringBuilder
over retained storage, so a handle that was released stays released.

Thread Safety:
A StringBuilder is exclusively owned by whoever created or rented it.
Builders are never shared between threads while rented.

Lifecycle:
    >>> sb = StringBuilder()
    >>> _ = sb.append("one").append(",").append("two")
    >>> sb.to_string_and_release()
    'one,two'

After to_string_and_release() (or release()) any further use raises
BufferReleasedError.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stringseq.errors import BufferReleasedError

if TYPE_CHECKING:
    from stringseq.pool import BufferPool

# Smallest capacity a builder is created with
MIN_CAPACITY = 16


class StringBuilder:
    """Efficient growable string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder(capacity=8)
            >>> _ = sb.append("<h1>").append("Hello").append("</h1>")
            >>> sb.capacity
            16
            >>> sb.build()
            '<h1>Hello</h1>'

    """

    __slots__ = ("_capacity", "_length", "_parts", "_pool", "_released")

    def __init__(
        self,
        capacity: int = MIN_CAPACITY,
        pool: BufferPool | None = None,
        parts: list[str] | None = None,
    ) -> None:
        """Initialize empty StringBuilder.

        Args:
            capacity: Initial capacity in characters (raised to MIN_CAPACITY)
            pool: Pool the storage returns to on release (None = unpooled)
            parts: Empty parts list to reuse (pool storage)
        """
        self._parts: list[str] = parts if parts is not None else []
        self._length = 0
        self._capacity = max(capacity, MIN_CAPACITY)
        self._pool = pool
        self._released = False

    @property
    def capacity(self) -> int:
        """Current capacity in characters."""
        return self._capacity

    @property
    def released(self) -> bool:
        """True once the builder has been released."""
        return self._released

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining

        Raises:
            BufferReleasedError: If the builder was released
        """
        self._check_live()
        if s:
            n = len(s)
            if self._length + n > self._capacity:
                self.ensure_capacity(self._length + n)
            self._parts.append(s)
            self._length += n
        return self

    def ensure_capacity(self, required: int) -> int:
        """Grow capacity by doubling until it holds required characters.

        Args:
            required: Total number of characters the builder must hold

        Returns:
            The resulting capacity
        """
        self._check_live()
        capacity = self._capacity
        while capacity < required:
            capacity *= 2
        self._capacity = capacity
        return capacity

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        self._check_live()
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts, keeping capacity.

        Returns:
            self for method chaining
        """
        self._check_live()
        self._parts.clear()
        self._length = 0
        return self

    def to_string_and_release(self) -> str:
        """Build the final string and release the builder in one step.

        Returns:
            Concatenated string of all appended parts
        """
        text = self.build()
        self.release()
        return text

    def release(self) -> None:
        """Release the builder, returning its storage to its pool if it has one.

        The builder itself is never handed out again.

        Raises:
            BufferReleasedError: If the builder was already released
        """
        self._check_live()
        parts = self._parts
        parts.clear()
        self._parts = []
        self._length = 0
        self._released = True
        if self._pool is not None:
            self._pool._return(parts, self._capacity)

    def _check_live(self) -> None:
        if self._released:
            raise BufferReleasedError("StringBuilder used after release")

    def __len__(self) -> int:
        """Return number of characters appended."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any characters have been appended."""
        return self._length > 0
