"""Link builders for archives, patches, feeds and refs."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from ..models import Ref
from ..utils.url import prefix_url
from .html_base import html_escape


def _anchor(href: str, text: str, title: Optional[str] = None) -> str:
    if title is None:
        return f"<a href='{href}'>{text}</a>"
    return f"<a href='{href}' title='{title}'>{text}</a>"


def archive_link(tree_id: str, repo_param: str, prefix: Any = "") -> str:
    """Return a link to download a tar.gz snapshot of a tree.

    Args:
        tree_id: Tree (or commit) object id
        repo_param: URL-safe repository name
        prefix: Configured URL prefix

    Returns:
        HTML anchor
    """
    url = prefix_url(f"{repo_param}/archive/{tree_id}.tar.gz", prefix)
    return _anchor(url, "Download Archive", "Download a tar.gz snapshot of this Tree")


def patch_link(commit_id: str, repo_param: str, prefix: Any = "") -> str:
    """Return a link to download a commit as a patch file."""
    url = prefix_url(f"{repo_param}/commit/{commit_id}.patch", prefix)
    return _anchor(url, "Download Patch", "Download a patch file of this Commit")


def atom_feed_link(repo_param: str, ref: Optional[str] = None, prefix: Any = "") -> str:
    """Return a link to the Atom feed of a repository, or of one of its refs."""
    if ref is None:
        url = prefix_url(f"{repo_param}.atom", prefix)
    else:
        url = prefix_url(f"{repo_param}/{html_escape(ref)}.atom", prefix)
    return _anchor(url, "Feed", "Atom Feed")


def commit_ref(ref: Union[Ref, str], repo_param: str, prefix: Any = "") -> str:
    """Return a link to a branch or tag.

    Args:
        ref: Ref object or ref name
        repo_param: URL-safe repository name
        prefix: Configured URL prefix

    Returns:
        HTML anchor whose text is the ref name
    """
    name = html_escape(ref.name if isinstance(ref, Ref) else ref)
    return _anchor(prefix_url(f"{repo_param}/{name}", prefix), name)


def commit_refs(refs: Iterable[Union[Ref, str]], repo_param: str, prefix: Any = "") -> str:
    """Return ref links for every ref, one per line."""
    return "\n".join(commit_ref(ref, repo_param, prefix) for ref in refs)
