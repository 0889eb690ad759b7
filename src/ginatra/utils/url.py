"""URL utility functions."""

from __future__ import annotations

import hashlib
from typing import Any

GRAVATAR_BASE_URL = "https://secure.gravatar.com/avatar/"


def prefix_url(rest_of_url: str = "", prefix: Any = "") -> str:
    """Join a path onto the configured base-path prefix.

    Examples:
        prefix_url("repo/x", "/git/") -> /git/repo/x
        prefix_url("repo/x", "") -> /repo/x
        prefix_url("", None) -> /

    Args:
        rest_of_url: Path relative to the site root
        prefix: Configured prefix (None and non-strings are tolerated)

    Returns:
        Prefixed path
    """
    prefix = "" if prefix is None else str(prefix)
    if prefix.endswith("/"):
        prefix = prefix[:-1]
    return f"{prefix}/{rest_of_url}"


def gravatar_url(email: str, size: int = 40) -> str:
    """Build a secure Gravatar URL for an email address.

    The email is hashed exactly as given (no case folding or trimming).

    Args:
        email: Email address
        size: Avatar size in pixels

    Returns:
        Gravatar image URL
    """
    digest = hashlib.md5(email.encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE_URL}{digest}?s={size}"
