"""Utility functions for Neovate Wrapped.

This module provides shared helper functions used across the package:
- parse_timestamp(): Tolerant ISO-8601 parsing into local aware datetimes
- format_date_key(): Local calendar date key (YYYY-MM-DD)
- format_number(): Thousands-separated integer formatting
- format_duration(): Human-readable duration formatting
- format_timestamp(): Safe datetime formatting with fallback
"""

import re
from datetime import date, datetime
from typing import Any, Optional, Union

from .constants import DATE_KEY_FORMAT, DATETIME_FORMAT

# Fractional seconds of any length; fromisoformat before 3.11 takes only 3 or 6 digits
_FRACTION_RE = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


def _normalize_fraction(match: "re.Match[str]") -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a record timestamp into a timezone-aware local datetime.

    Accepts ISO-8601 strings (a trailing "Z" is treated as UTC, fractional
    seconds may have any number of digits) and epoch milliseconds. Naive
    timestamps are interpreted as local time.

    Args:
        value: Raw timestamp value from a JSONL record

    Returns:
        Aware datetime in the local timezone, or None if the value is not a
        valid point in time

    Example:
        >>> parse_timestamp("2025-01-15T10:00:00").year
        2025
        >>> parse_timestamp("not-a-date") is None
        True
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000).astimezone()
        if isinstance(value, str) and value:
            value = _FRACTION_RE.sub(_normalize_fraction, value.replace("Z", "+00:00"), count=1)
            return datetime.fromisoformat(value).astimezone()
    except (ValueError, OverflowError, OSError):
        return None
    return None


def format_date_key(moment: Union[date, datetime]) -> str:
    """Format a date or datetime as a local calendar key like '2025-01-15'."""
    return moment.strftime(DATE_KEY_FORMAT)


def format_number(value: int) -> str:
    """Format an integer with thousands separators.

    Example:
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{value:,}"


def format_duration(minutes: int) -> str:
    """Format a duration in minutes as a human-readable string.

    Args:
        minutes: Duration in minutes

    Returns:
        Formatted string like "45m" or "2h 30m"

    Example:
        >>> format_duration(90)
        '1h 30m'
    """
    if minutes < 60:
        return f"{minutes}m"
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours}h {mins}m"


def format_timestamp(dt: Optional[datetime], fmt: str = DATETIME_FORMAT) -> str:
    """Format a datetime with a default pattern ("unknown" when None)."""
    return dt.strftime(fmt) if dt else "unknown"
