"""Date and time formatting for views and feeds."""

from __future__ import annotations

from datetime import datetime, timezone

NICETIME_FORMAT = "%b %d, %Y &ndash; %H:%M"
TIME_TAG_FORMAT = (
    "<time datetime='%Y-%m-%dT%H:%M:%S%z' title='%Y-%m-%d %H:%M:%S'>"
    "%B %d, %Y %H:%M</time>"
)
RFC_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"  # 2003-12-13T18:30:02Z


def nicetime(date: datetime) -> str:
    """Format a date for humans, e.g. ``Dec 13, 2003 &ndash; 18:30``."""
    return date.strftime(NICETIME_FORMAT)


def time_tag(date: datetime) -> str:
    """Render a ``<time>`` element with machine and human readable forms.

    Naive datetimes are taken to be UTC so the offset is always present.
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.strftime(TIME_TAG_FORMAT)


def rfc_date(date: datetime) -> str:
    """Format a date for Atom feed entries.

    Aware datetimes are converted to UTC; naive ones must already be UTC.
    """
    if date.tzinfo is not None:
        date = date.astimezone(timezone.utc)
    return date.strftime(RFC_DATE_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC.

    Raises:
        ValueError: If the value is not an ISO-8601 string
    """
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
