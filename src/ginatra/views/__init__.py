"""HTML fragments for ginatra templates."""

from .html_base import html_escape, h
from .links import archive_link, patch_link, atom_feed_link, commit_ref, commit_refs
from .listing import file_listing
from .request import is_pjax, hostname
from .context import helper_namespace

__all__ = [
    "html_escape",
    "h",
    "archive_link",
    "patch_link",
    "atom_feed_link",
    "commit_ref",
    "commit_refs",
    "file_listing",
    "is_pjax",
    "hostname",
    "helper_namespace",
]
