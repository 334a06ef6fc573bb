"""ContextVar-based join configuration for stringseq.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The joiner reads the active config once per call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and overrides in one thread never leak into another.

Usage:
    # Read the active config
    from stringseq.config import get_join_config
    config = get_join_config()

    # Override for the current context
    from stringseq.config import set_join_config, reset_join_config, JoinConfig

    set_join_config(JoinConfig(default_capacity=256))
    try:
        text = join(values, ";")
    finally:
        reset_join_config()

    # Or use the context manager
    with join_config_context(JoinConfig(max_initial_capacity=1024)):
        text = join(values, ";")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class JoinConfig:
    """Immutable join configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        default_capacity: Initial buffer capacity when the input length is
            unknown, and the lower bound of the sized estimate
        max_initial_capacity: Upper bound of the sized estimate
        capacity_per_element: Characters reserved per element of a sized input
        initial_format_hint: First space offered to a self-formatting element
        max_format_hint: Largest space offered before falling back to str()

    """

    default_capacity: int = 128
    max_initial_capacity: int = 4096
    capacity_per_element: int = 4
    initial_format_hint: int = 32
    max_format_hint: int = 1 << 20

    @classmethod
    def from_dict(cls, config_dict: dict) -> "JoinConfig":
        """Create JoinConfig from dictionary.

        Only includes keys that are valid JoinConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                JoinConfig attribute names.

        Returns:
            New JoinConfig instance with values from dict.

        Example:
            >>> config = JoinConfig.from_dict({
            ...     "default_capacity": 64,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_capacity
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: JoinConfig = JoinConfig()

_join_config: ContextVar[JoinConfig] = ContextVar(
    "join_config",
    default=_DEFAULT_CONFIG,
)


def get_join_config() -> JoinConfig:
    """Get current join configuration (thread-local).

    Returns:
        The active JoinConfig for this thread/context.

    """
    return _join_config.get()


def set_join_config(config: JoinConfig) -> None:
    """Set join configuration for current context.

    Args:
        config: JoinConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _join_config.set(config)


def reset_join_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _join_config.set(_DEFAULT_CONFIG)


@contextmanager
def join_config_context(config: JoinConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: JoinConfig to use within the context.

    Yields:
        None

    Example:
        >>> with join_config_context(JoinConfig(default_capacity=16)):
        ...     get_join_config().default_capacity
        16

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _join_config.get()
    _join_config.set(config)
    try:
        yield
    finally:
        _join_config.set(previous)


__all__ = [
    "JoinConfig",
    "get_join_config",
    "join_config_context",
    "reset_join_config",
    "set_join_config",
]
