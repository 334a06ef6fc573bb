"""Utility modules for stringseq.

Provides:
- text: fold_case, is_null_or_empty, is_null_or_whitespace, require
- logger: get_logger for logging
"""

from stringseq.utils.logger import get_logger
from stringseq.utils.text import (
    fold_case,
    is_null_or_empty,
    is_null_or_whitespace,
    require,
)

__all__ = [
    "fold_case",
    "get_logger",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "require",
]
