"""Commit loading for rendering views outside a running site."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Union

from .models import ChangeRecord, Commit, CommitDict, Ref
from .utils.dates import parse_timestamp


class CommitLoadError(Exception):
    """Exception raised when commit loading fails."""

    pass


def _fail(msg: str, exit_on_error: bool, cause: Exception | None = None) -> None:
    if exit_on_error:
        print(f"Error: {msg}", file=sys.stderr)
        sys.exit(1)
    raise CommitLoadError(msg) from cause


def _list_field(data: CommitDict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise CommitLoadError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _str_field(data: CommitDict, key: str) -> str:
    value = data.get(key) or ""
    if not isinstance(value, str):
        raise CommitLoadError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def parse_commit(data: CommitDict) -> Commit:
    """Build a Commit from its JSON form.

    Raises:
        CommitLoadError: If the id is missing or a field has the wrong type
    """
    if not isinstance(data, dict) or not data.get("id"):
        raise CommitLoadError("Commit data must be an object with an 'id'")

    committed_at = None
    if data.get("committed_at"):
        try:
            committed_at = parse_timestamp(data["committed_at"])
        except (ValueError, TypeError) as e:
            raise CommitLoadError(f"Invalid committed_at: {data['committed_at']!r}") from e

    refs = _list_field(data, "refs")
    for name in refs:
        if not isinstance(name, str):
            raise CommitLoadError(f"Ref names must be strings, got {name!r}")

    changes = _list_field(data, "changes")
    for change in changes:
        if not isinstance(change, dict) or not isinstance(change.get("path"), str):
            raise CommitLoadError(f"Each change must be an object with a 'path', got {change!r}")

    return Commit(
        id=str(data["id"]),
        message=_str_field(data, "message"),
        author_email=_str_field(data, "author_email"),
        committed_at=committed_at,
        refs=[Ref(name) for name in refs],
        changes=[ChangeRecord.from_dict(c) for c in changes],
    )


def load_commit(
    commit_file: Union[str, Path],
    *,
    exit_on_error: bool = True,
) -> Commit:
    """Load and parse a commit JSON file.

    Args:
        commit_file: Path to the JSON file
        exit_on_error: If True (default), print error and exit on failure.
                       If False, raise CommitLoadError instead.

    Returns:
        Commit instance

    Raises:
        CommitLoadError: If exit_on_error is False and loading fails
    """
    commit_path = Path(commit_file)

    try:
        with open(commit_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in commit file '{commit_path}': {e}", exit_on_error, e)
    except OSError as e:
        _fail(f"Cannot read commit file '{commit_path}': {e}", exit_on_error, e)

    try:
        return parse_commit(data)
    except CommitLoadError as e:
        _fail(f"{e} ({commit_path})", exit_on_error, e)
