"""Element formatting for the joiner.

Each element is classified once into an ElementKind and appended to the
builder by the matching strategy:

- NULL: None contributes no text
- TEXT: str is appended as is
- SELF_FORMATTING: SpanFormattable values are offered a region that starts
  at initial_format_hint characters and doubles until the value fits or
  max_format_hint is exceeded, then falls back to str(). Only the text
  actually written grows the builder
- GENERIC: everything else is appended as str(value)

Example:
    >>> from stringseq.stringbuilder import StringBuilder
    >>> sb = StringBuilder()
    >>> for value in ("a", None, 3):
    ...     append_element(sb, value)
    >>> sb.build()
    'a3'
"""

from __future__ import annotations

from enum import Enum, auto

from stringseq.config import JoinConfig, get_join_config
from stringseq.errors import FormatError
from stringseq.protocols import SpanFormattable
from stringseq.stringbuilder import StringBuilder
from stringseq.utils.logger import get_logger

logger = get_logger(__name__)


class ElementKind(Enum):
    """Formatting strategy for a single element."""

    NULL = auto()
    TEXT = auto()
    SELF_FORMATTING = auto()
    GENERIC = auto()


def classify_element(value: object) -> ElementKind:
    """Resolve the formatting strategy for a value.

    Examples:
        >>> classify_element(None)
        <ElementKind.NULL: 1>
        >>> classify_element("x")
        <ElementKind.TEXT: 2>
        >>> classify_element(42)
        <ElementKind.GENERIC: 4>
    """
    match value:
        case None:
            return ElementKind.NULL
        case str():
            return ElementKind.TEXT
        case SpanFormattable():
            return ElementKind.SELF_FORMATTING
        case _:
            return ElementKind.GENERIC


def append_element(
    builder: StringBuilder,
    value: object,
    config: JoinConfig | None = None,
) -> None:
    """Append the text of one element to the builder.

    Args:
        builder: Live builder to append to
        value: Element to format
        config: Join configuration (defaults to the active context config)

    Raises:
        FormatError: If a SpanFormattable returns more text than offered
    """
    match classify_element(value):
        case ElementKind.NULL:
            return
        case ElementKind.TEXT:
            builder.append(value)  # type: ignore[arg-type]
        case ElementKind.SELF_FORMATTING:
            _append_span_formattable(
                builder,
                value,  # type: ignore[arg-type]
                config if config is not None else get_join_config(),
            )
        case ElementKind.GENERIC:
            builder.append(str(value))


def _append_span_formattable(
    builder: StringBuilder,
    value: SpanFormattable,
    config: JoinConfig,
) -> None:
    hint = max(config.initial_format_hint, 1)
    while hint <= config.max_format_hint:
        text = value.try_format(hint)
        if text is not None:
            if len(text) > hint:
                raise FormatError(type(value).__name__, hint, len(text))
            builder.append(text)
            return
        hint *= 2

    logger.debug(
        "%s did not fit in %d characters, falling back to str()",
        type(value).__name__,
        config.max_format_hint,
    )
    builder.append(str(value))


__all__ = [
    "ElementKind",
    "append_element",
    "classify_element",
]
