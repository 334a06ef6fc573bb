"""stringseq JoinAccumulator: opt-in profiling for joins.

This module provides accumulated metrics across join calls:
- Number of join calls
- Elements joined
- Characters produced
- Fast-path hits

Zero overhead when disabled (get_join_accumulator() returns None).

Example:
    from stringseq import comma_join
    from stringseq.profiling import profiled_join

    with profiled_join() as metrics:
        comma_join(["a", "b", "c"])

    print(metrics.summary())
    # {"total_ms": 0.01, "join_calls": 1, "elements": 3, "characters": 5, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class JoinAccumulator:
    """Accumulated metrics during joining.

    Attributes:
        start_time: Profiling start timestamp.
        join_calls: Number of join() calls recorded.
        elements: Total number of elements joined.
        characters: Total length of the strings produced.
        fast_path_calls: Joins served by the list/tuple-of-str path.

    """

    start_time: float = field(default_factory=perf_counter)
    join_calls: int = 0
    elements: int = 0
    characters: int = 0
    fast_path_calls: int = 0

    def record_join(self, elements: int, characters: int, *, fast_path: bool = False) -> None:
        """Record a join call.

        Args:
            elements: Number of elements in the joined sequence.
            characters: Length of the resulting string.
            fast_path: Whether the direct str.join path was taken.

        """
        self.join_calls += 1
        self.elements += elements
        self.characters += characters
        if fast_path:
            self.fast_path_calls += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of join metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "join_calls": self.join_calls,
            "elements": self.elements,
            "characters": self.characters,
            "fast_path_calls": self.fast_path_calls,
        }


_accumulator: ContextVar[JoinAccumulator | None] = ContextVar(
    "join_accumulator",
    default=None,
)


def get_join_accumulator() -> JoinAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_join() -> Iterator[JoinAccumulator]:
    """Context manager for profiled joining.

    Creates a JoinAccumulator and makes it available via
    get_join_accumulator() for the duration of the with block.

    Yields:
        JoinAccumulator that will be populated during join calls.

    """
    acc = JoinAccumulator()
    token: Token[JoinAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "JoinAccumulator",
    "get_join_accumulator",
    "profiled_join",
]
