"""Date parsing helpers backed by pandas timestamps."""

from typing import Optional

import pandas as pd

__all__ = [
    "parse_date",
    "time_interval_since_1970",
]


def parse_date(
    text: str, date_format: str, tz: Optional[str] = None
) -> Optional[pd.Timestamp]:
    """Parse ``text`` with a strptime-style ``date_format``.

    Args:
        text: Date string, e.g. ``"2024-03-01 12:30"``.
        date_format: Format directives, e.g. ``"%Y-%m-%d %H:%M"``. The whole
            string must match.
        tz: Time zone name used to localize a result that carries no offset.
            Such results are left naive when ``tz`` is ``None``.

    Returns:
        The parsed timestamp, or ``None`` if ``text`` does not match
        ``date_format``, is out of the representable range, or names a wall
        time that does not exist or is ambiguous in ``tz``.
    """
    try:
        timestamp = pd.to_datetime(text, format=date_format)
        if tz is not None and not pd.isna(timestamp) and timestamp.tzinfo is None:
            # Wall times skipped or repeated by a DST change become NaT
            timestamp = timestamp.tz_localize(
                tz, ambiguous="NaT", nonexistent="NaT"
            )
    except (ValueError, TypeError):
        return None

    if pd.isna(timestamp):
        return None
    return timestamp


def time_interval_since_1970(
    text: str, date_format: str, tz: Optional[str] = None
) -> Optional[float]:
    """Seconds between the Unix epoch and the date in ``text``.

    Naive results (no offset in the text and no ``tz``) are read as UTC.

    Args:
        text: Date string.
        date_format: Format directives for :func:`parse_date`.
        tz: Time zone for dates without an offset.

    Returns:
        Possibly fractional seconds since 1970-01-01T00:00:00Z, or ``None``
        if parsing fails.

    Example:
        >>> time_interval_since_1970("1970-01-02", "%Y-%m-%d")
        86400.0
    """
    timestamp = parse_date(text, date_format, tz=tz)
    if timestamp is None:
        return None
    return timestamp.timestamp()
