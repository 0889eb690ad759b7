"""Data models for the values ginatra views render."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, TypedDict


class ChangeRecordDict(TypedDict, total=False):
    """TypedDict for a changed file in commit JSON."""

    path: str
    added: bool
    deleted: bool


class CommitDict(TypedDict, total=False):
    """TypedDict for commit JSON."""

    id: str
    message: str
    author_email: str
    committed_at: str
    refs: list[str]
    changes: list[ChangeRecordDict]


@dataclass
class ChangeRecord:
    """One file changed by a commit.

    A record that is neither added nor deleted is a modification.
    """

    path: str
    added: bool = False
    deleted: bool = False

    @property
    def modified(self) -> bool:
        return not (self.added or self.deleted)

    @classmethod
    def from_dict(cls, data: ChangeRecordDict) -> ChangeRecord:
        return cls(
            path=str(data.get("path", "")),
            added=bool(data.get("added", False)),
            deleted=bool(data.get("deleted", False)),
        )


@dataclass
class Ref:
    """A named pointer to a commit (branch or tag)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Commit:
    """The parts of a commit the views need."""

    id: str
    message: str = ""
    author_email: str = ""
    committed_at: Optional[datetime] = None
    refs: list[Ref] = field(default_factory=list)
    changes: list[ChangeRecord] = field(default_factory=list)
