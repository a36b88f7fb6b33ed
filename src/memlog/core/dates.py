"""Date formatting helpers."""

from datetime import datetime, timezone
from typing import Any


def date_to_string(date: Any = None, use_local_timezone: bool = True) -> str:
    """Convert a datetime to an ISO 8601 string without a zone designator.

    Args:
        date: The point in time to render. Default is now. Naive datetimes
            are taken as local time.
        use_local_timezone: Render local wall-clock fields (True) or UTC
            fields (False).

    Returns:
        A string shaped ``YYYY-MM-DDTHH:MM:SS.sss``, or an empty string if
        date is not a datetime or cannot be converted.
    """
    if date is None:
        date = datetime.now(timezone.utc)
    if not isinstance(date, datetime):
        return ""

    try:
        if use_local_timezone:
            shifted = date.astimezone()
        else:
            shifted = date.astimezone(timezone.utc)
    except (OverflowError, ValueError, OSError):
        # Shift falls outside the representable datetime range.
        return ""

    return shifted.replace(tzinfo=None).isoformat(timespec="milliseconds")
