"""Functional primitives for extkit.

This module provides helpers over ordered sequences: cyclic repetition,
subsequence search, first-match lookups, in-place removal and thread-pool
iteration. Apart from the ``mutate`` helpers, which edit the sequence they
are given, utilities are stateless and leave their input untouched.
"""

from extkit.functional.mutate import (
    append_optional,
    remove_and_return,
    remove_first,
    remove_first_where,
)
from extkit.functional.parallel import (
    BatchHandle,
    concurrent_loop,
    concurrent_map,
    parallel_loop,
    parallel_map,
)
from extkit.functional.repeat import cyclic_walk, repeating_list
from extkit.functional.search import (
    filter_first,
    filter_first_with_index,
    find_match,
    indices,
    unique_count,
)

__all__ = [
    "append_optional",
    "remove_and_return",
    "remove_first",
    "remove_first_where",
    "BatchHandle",
    "concurrent_loop",
    "concurrent_map",
    "parallel_loop",
    "parallel_map",
    "cyclic_walk",
    "repeating_list",
    "filter_first",
    "filter_first_with_index",
    "find_match",
    "indices",
    "unique_count",
]
