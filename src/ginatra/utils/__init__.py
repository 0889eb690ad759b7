"""Utility functions for ginatra."""

from .dates import nicetime, time_tag, rfc_date, parse_timestamp
from .formatting import TruncateOptions, truncate, simple_format
from .url import prefix_url, gravatar_url

__all__ = [
    "nicetime",
    "time_tag",
    "rfc_date",
    "parse_timestamp",
    "TruncateOptions",
    "truncate",
    "simple_format",
    "prefix_url",
    "gravatar_url",
]
