"""Protocols for stringseq.

Defines the contract for elements that format themselves into a bounded
region of the join buffer.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SpanFormattable(Protocol):
    """Protocol for values that can format into a fixed amount of space.

    The joiner offers a region of max_length characters. Implementations
    return their text if it fits, or None to ask for a larger region.
    Returning more than max_length characters raises FormatError.

    Thread Safety:
        Implementations must not mutate shared state while formatting.

    """

    def try_format(self, max_length: int) -> str | None:
        """Format into at most max_length characters.

        Args:
            max_length: Number of characters available

        Returns:
            The formatted text, or None if it does not fit
        """
        ...


__all__ = ["SpanFormattable"]
