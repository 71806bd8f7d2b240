"""extkit: small helpers for sequences and strings."""

from extkit.functional import (
    BatchHandle,
    append_optional,
    concurrent_loop,
    concurrent_map,
    cyclic_walk,
    filter_first,
    filter_first_with_index,
    find_match,
    indices,
    parallel_loop,
    parallel_map,
    remove_and_return,
    remove_first,
    remove_first_where,
    repeating_list,
    unique_count,
)
from extkit.text import (
    char_at,
    decode_objects,
    is_email,
    is_mobile,
    is_mobile_number,
    parse_date,
    time_interval_since_1970,
    to_dictionary,
)

__all__ = [
    "BatchHandle",
    "append_optional",
    "concurrent_loop",
    "concurrent_map",
    "cyclic_walk",
    "filter_first",
    "filter_first_with_index",
    "find_match",
    "indices",
    "parallel_loop",
    "parallel_map",
    "remove_and_return",
    "remove_first",
    "remove_first_where",
    "repeating_list",
    "unique_count",
    "char_at",
    "decode_objects",
    "is_email",
    "is_mobile",
    "is_mobile_number",
    "parse_date",
    "time_interval_since_1970",
    "to_dictionary",
]
