from django import template

from common.utils import MAX_TIMESTAMP, size_to_string, timestamp_to_date_string

register = template.Library()


@register.filter(name="filesize")
def filesize(value):
    """Render a byte count with base-1024 units.

    Usage: {{ item.size|filesize }} -> '1.50 KB'. Values that are not
    non-negative integers render as an empty string.
    """
    try:
        size = int(value)
    except (TypeError, ValueError):
        return ""
    if size < 0:
        return ""
    return size_to_string(size)


@register.filter(name="timestamp_date")
def timestamp_date(value, format=None):
    """Render a Unix timestamp as a date; ``None`` renders as an empty string."""
    if value is None or value == "":
        return ""
    try:
        timestamp = int(value)
    except (TypeError, ValueError):
        return ""
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        return ""
    return timestamp_to_date_string(timestamp, format or None)
