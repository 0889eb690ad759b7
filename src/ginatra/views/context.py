"""Template namespace with configuration bound into the helpers."""

from __future__ import annotations

from functools import partial
from typing import Any, Mapping, Optional

from ..config import GinatraConfig
from ..utils import TruncateOptions, gravatar_url, nicetime, prefix_url, rfc_date, simple_format, time_tag, truncate
from .html_base import h, html_escape
from .links import archive_link, atom_feed_link, commit_ref, commit_refs, patch_link
from .listing import file_listing
from .request import hostname, is_pjax


def helper_namespace(
    config: GinatraConfig,
    headers: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    """Build the mapping of helpers handed to a template.

    URL helpers get ``config.prefix`` bound, so templates call them with
    the same arguments as before minus the prefix. Request-derived values
    are computed once when headers are given.

    Args:
        config: Loaded configuration
        headers: Request headers, if rendering for a request

    Returns:
        Dict of template names to helpers (and precomputed values)
    """
    prefix = config.prefix
    namespace: dict[str, Any] = {
        "h": h,
        "html_escape": html_escape,
        "nicetime": nicetime,
        "time_tag": time_tag,
        "rfc_date": rfc_date,
        "simple_format": simple_format,
        "truncate": partial(_configured_truncate, default_length=config.truncate_length),
        "gravatar_url": partial(_sized_gravatar_url, default_size=config.gravatar_size),
        "prefix_url": partial(prefix_url, prefix=prefix),
        "archive_link": partial(archive_link, prefix=prefix),
        "patch_link": partial(patch_link, prefix=prefix),
        "atom_feed_link": partial(atom_feed_link, prefix=prefix),
        "commit_ref": partial(commit_ref, prefix=prefix),
        "commit_refs": partial(commit_refs, prefix=prefix),
        "file_listing": file_listing,
    }

    if headers is not None:
        namespace["is_pjax"] = is_pjax(headers)
        namespace["hostname"] = hostname(headers)

    return namespace


def _sized_gravatar_url(email: str, size: Optional[int] = None, *, default_size: int) -> str:
    return gravatar_url(email, default_size if size is None else size)


def _configured_truncate(
    text: Optional[str],
    options: Optional[TruncateOptions] = None,
    *,
    default_length: int,
    **overrides,
) -> Optional[str]:
    if options is None:
        options = TruncateOptions(length=default_length)
    return truncate(text, options, **overrides)
