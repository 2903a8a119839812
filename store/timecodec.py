"""Conversion between datetimes and the sortable UTC text stored in the database."""

import re
from datetime import datetime, timezone

from common.constants import TIME_FORMAT
from store.exceptions import MalformedTimestampError

_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def format_time(dt: datetime) -> str:
    """
    Render a datetime as UTC text with second precision.

    Naive datetimes are taken to be UTC already. Microseconds are dropped.

    Args:
        dt: Point in time to render

    Returns:
        Timestamp string such as '2024-01-01T00:00:00Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    utc = dt.astimezone(timezone.utc).replace(microsecond=0, tzinfo=None)
    return utc.isoformat() + "Z"


def parse_time(value: str) -> datetime:
    """
    Parse text produced by format_time back into an aware UTC datetime.

    Args:
        value: Stored timestamp string

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        MalformedTimestampError: If value does not match the stored format
    """
    if not isinstance(value, str) or not _TIMESTAMP_PATTERN.match(value):
        raise MalformedTimestampError(f"malformed timestamp: {value!r}")

    try:
        parsed = datetime.strptime(value, TIME_FORMAT)
    except ValueError as e:
        raise MalformedTimestampError(f"malformed timestamp: {value!r}") from e

    return parsed.replace(tzinfo=timezone.utc)
