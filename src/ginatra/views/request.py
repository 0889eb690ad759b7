"""Helpers derived from request headers.

Headers are passed explicitly as any mapping (a plain dict, a framework's
header object, or a CGI/WSGI style environ). Lookups ignore case and also
match ``HTTP_``-prefixed environ keys.
"""

from __future__ import annotations

from typing import Mapping, Optional

FORWARDED_HOST_HEADERS = ("X-Forwarded-Host", "X-Forwarded-Server", "Host")


def _environ_key(name: str) -> str:
    return "HTTP_" + name.upper().replace("-", "_")


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Look up a header by name, case-insensitively.

    Examples:
        get_header({"x-pjax": "true"}, "X-PJAX") -> "true"
        get_header({"HTTP_X_PJAX": "true"}, "X-PJAX") -> "true"
    """
    wanted = {name.lower(), _environ_key(name).lower()}
    for key, value in headers.items():
        if key.lower() in wanted:
            return value
    return None


def is_pjax(headers: Mapping[str, str]) -> bool:
    """Check whether the request is a PJAX partial-page request."""
    return get_header(headers, "X-PJAX") is not None


def hostname(headers: Mapping[str, str]) -> Optional[str]:
    """Return the public hostname, preferring forwarded headers.

    Returns:
        First non-empty value of X-Forwarded-Host, X-Forwarded-Server
        or Host; None if none is set.
    """
    for name in FORWARDED_HOST_HEADERS:
        value = get_header(headers, name)
        if value:
            return value
    return None
