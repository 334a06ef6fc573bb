"""
stringseq — helpers for sequences of strings.

Splitting composite ids, joining values with a separator, case conversion,
case-insensitive sets and matching, and null/empty filtering. Zero runtime
dependencies.

Quick Start:
    >>> from stringseq import comma_join, distinct_ignore_case, to_split_ids
    >>> comma_join(["one", "two", "three"], include_space=True)
    'one, two, three'
    >>> list(distinct_ignore_case(["one", "One", "TWO"]))
    ['one', 'TWO']
    >>> to_split_ids(["tenant:doc-1"])
    [('tenant', 'doc-1')]

Joining arbitrary values:
    >>> from stringseq import join
    >>> join([1, None, 2.5], "|", include_space=True)
    '1| | 2.5'

Lazy operations (to_lower, to_upper, distinct_ignore_case and the
remove_* filters) return generators: arguments are checked on call, and
elements are pulled on demand.
"""

from stringseq.casing import (
    CaseInsensitiveSet,
    distinct_ignore_case,
    to_hash_set_ignore_case,
    to_lower,
    to_upper,
)
from stringseq.config import (
    JoinConfig,
    get_join_config,
    join_config_context,
    reset_join_config,
    set_join_config,
)
from stringseq.errors import (
    BufferReleasedError,
    FormatError,
    InvalidArgumentError,
    StringSeqError,
)
from stringseq.filters import remove_null_or_empty, remove_null_or_whitespace
from stringseq.formatting import ElementKind, append_element, classify_element
from stringseq.ids import split_id, to_split_ids
from stringseq.joining import comma_join, estimate_capacity, join
from stringseq.matching import (
    contains_a_part,
    contains_ignore_case,
    ends_with_ignore_case,
    starts_with_ignore_case,
)
from stringseq.pool import BufferPool, get_shared_pool
from stringseq.profiling import JoinAccumulator, get_join_accumulator, profiled_join
from stringseq.protocols import SpanFormattable
from stringseq.stringbuilder import StringBuilder

__version__ = "0.1.0"

__all__ = [
    # Joining
    "comma_join",
    "estimate_capacity",
    "join",
    "append_element",
    "classify_element",
    "ElementKind",
    "SpanFormattable",
    # Buffers
    "BufferPool",
    "StringBuilder",
    "get_shared_pool",
    # Ids
    "split_id",
    "to_split_ids",
    # Case
    "CaseInsensitiveSet",
    "distinct_ignore_case",
    "to_hash_set_ignore_case",
    "to_lower",
    "to_upper",
    # Filters
    "remove_null_or_empty",
    "remove_null_or_whitespace",
    # Matching
    "contains_a_part",
    "contains_ignore_case",
    "ends_with_ignore_case",
    "starts_with_ignore_case",
    # Configuration
    "JoinConfig",
    "get_join_config",
    "join_config_context",
    "reset_join_config",
    "set_join_config",
    # Profiling
    "JoinAccumulator",
    "get_join_accumulator",
    "profiled_join",
    # Errors
    "BufferReleasedError",
    "FormatError",
    "InvalidArgumentError",
    "StringSeqError",
    "__version__",
]
