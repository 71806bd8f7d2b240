"""Text validation and decoding helpers."""

from extkit.text.dates import parse_date, time_interval_since_1970
from extkit.text.strings import (
    char_at,
    decode_objects,
    is_email,
    is_mobile,
    is_mobile_number,
    to_dictionary,
)

__all__ = [
    "parse_date",
    "time_interval_since_1970",
    "char_at",
    "decode_objects",
    "is_email",
    "is_mobile",
    "is_mobile_number",
    "to_dictionary",
]
