"""Text formatting utility functions."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

_SPACE_RUN = re.compile(r" +")
_CARRIAGE_RETURN = re.compile(r"\r\n?")


@dataclass(frozen=True)
class TruncateOptions:
    """Options for :func:`truncate`."""

    # Maximum length of the output, omission included
    length: int = 30
    # Marker appended to truncated text
    omission: str = "..."
    # Cut at the last occurrence of this string that fits, if any
    separator: Optional[str] = None


def truncate(
    text: Optional[str],
    options: Optional[TruncateOptions] = None,
    **overrides,
) -> Optional[str]:
    """Truncate text to a number of characters, appending an omission marker.

    Examples:
        truncate("abcdefghij", length=5) -> "ab..."
        truncate("hello big world", length=10, separator=" ") -> "hello..."

    Args:
        text: Text to truncate. None yields None.
        options: Truncation options (defaults to TruncateOptions())
        **overrides: Field overrides applied on top of ``options``

    Returns:
        The original text if it fits, otherwise the prefix up to the cut
        point followed by the omission marker.
    """
    if text is None:
        return None

    opts = options or TruncateOptions()
    if overrides:
        opts = replace(opts, **overrides)

    if len(text) <= opts.length:
        return text

    limit = max(opts.length - len(opts.omission), 0)
    stop = limit
    if opts.separator:
        found = text.rfind(opts.separator, 0, limit + len(opts.separator))
        if found != -1:
            stop = found

    return text[:stop] + opts.omission


def simple_format(text: str) -> str:
    """Collapse repeated spaces and turn newlines into HTML line breaks.

    The text must already be escaped with ``html_escape``: the ``<br />``
    tags inserted here are raw markup.

    Args:
        text: Escaped text to format

    Returns:
        Formatted text
    """
    text = _SPACE_RUN.sub(" ", text)
    text = _CARRIAGE_RETURN.sub("\n", text)
    return text.replace("\n", "<br />\n")
