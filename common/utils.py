"""Shared presentation helpers for byte sizes and timestamps."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from django.conf import settings
from django.utils import formats, timezone

# Base-1024 suffixes, smallest first
SIZE_UNITS = ('B', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')

DEFAULT_DATE_FORMAT = 'M j, Y'

_EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)

# Latest timestamp that stays a valid datetime in any UTC offset (9999-12-30)
MAX_TIMESTAMP = int((datetime(9999, 12, 30, tzinfo=dt_timezone.utc) - _EPOCH).total_seconds())


def size_to_string(size: int) -> str:
    """Return a human-readable byte count such as ``'0 B'`` or ``'1.50 KB'``.

    The largest unit whose scaled value is at least 1 is used. Whole bytes are
    shown without decimals, larger units always with two.
    """
    if size < 0:
        raise ValueError(f"Size cannot be negative: {size}")

    exponent = 0
    while exponent < len(SIZE_UNITS) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1

    if exponent == 0:
        return f"{formats.number_format(size)} {SIZE_UNITS[0]}"
    scaled = Decimal(size) / Decimal(1024 ** exponent)
    return f"{formats.number_format(scaled, decimal_pos=2)} {SIZE_UNITS[exponent]}"


def date_format_setting() -> str:
    """Return the configured date format for media library listings."""
    return getattr(settings, 'MEDIA_LIBRARY_DATE_FORMAT', None) or DEFAULT_DATE_FORMAT


def timestamp_to_date_string(timestamp: int, format: str | None = None) -> str:
    """Format a Unix timestamp as a calendar date in the active time zone."""
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise ValueError(f"Timestamp out of range: {timestamp}")
    moment = _EPOCH + timedelta(seconds=timestamp)
    local = timezone.localtime(moment)
    return formats.date_format(local, format or date_format_setting())
