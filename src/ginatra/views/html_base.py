"""Base HTML utilities for views."""

from __future__ import annotations

from typing import Any

_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})


def html_escape(text: Any) -> str:
    """Escape text for safe HTML output.

    Only ``& < > "`` are replaced. When combining with ``simple_format``,
    escape first and insert line breaks afterwards, never the other way
    around.

    Args:
        text: Text to escape (will be converted to string)

    Returns:
        HTML-escaped string
    """
    return str(text).translate(_ESCAPES)


h = html_escape
