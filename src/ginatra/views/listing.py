"""Changed-file listing for commit pages."""

from __future__ import annotations

from typing import Iterable, Union

from ..models import ChangeRecord, Commit
from .html_base import html_escape


def _change_style(change: ChangeRecord) -> tuple[str, str]:
    """Return (css class, icon class) for a change."""
    if change.deleted:
        return "deleted", "icon-remove"
    if change.added:
        return "added", "icon-ok"
    return "changed", "icon-edit"


def file_listing(changes: Union[Commit, Iterable[ChangeRecord]]) -> str:
    """Render the files altered by a commit as a ``<ul>``.

    Each item carries a class for added/changed/deleted and links to the
    ``#file-N`` anchor of its diff further down the page, N being the
    1-based position of the change in the commit.

    Args:
        changes: Commit or ordered change records

    Returns:
        HTML list
    """
    if isinstance(changes, Commit):
        changes = changes.changes

    items = []
    for index, change in enumerate(changes, start=1):
        cls, icon = _change_style(change)
        items.append(
            f"<li class='{cls}'><i class='{icon}'></i> "
            f"<a href='#file-{index}'>{html_escape(change.path)}</a></li>"
        )
    return f"<ul class='unstyled'>{''.join(items)}</ul>"
