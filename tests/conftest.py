"""Pytest fixtures for ginatra tests."""

import json

import pytest

from ginatra.models import ChangeRecord, Commit, Ref


@pytest.fixture
def sample_commit_data():
    """Sample commit data for testing."""
    return {
        "id": "9f1c2e4b7a3d5c8e0f1a2b3c4d5e6f708192a3b4",
        "message": "Add a.txt, drop b.txt",
        "author_email": "user@example.com",
        "committed_at": "2003-12-13T18:30:02+00:00",
        "refs": ["master", "v1.0"],
        "changes": [
            {"path": "a.txt", "added": True},
            {"path": "b.txt", "deleted": True},
            {"path": "src/c.py"},
        ],
    }


@pytest.fixture
def sample_commit(sample_commit_data):
    """Sample Commit built directly from models."""
    return Commit(
        id=sample_commit_data["id"],
        message=sample_commit_data["message"],
        author_email=sample_commit_data["author_email"],
        refs=[Ref("master"), Ref("v1.0")],
        changes=[
            ChangeRecord("a.txt", added=True),
            ChangeRecord("b.txt", deleted=True),
            ChangeRecord("src/c.py"),
        ],
    )


@pytest.fixture
def sample_commit_file(tmp_path, sample_commit_data):
    """Create a temporary commit JSON file."""
    commit_file = tmp_path / "commit.json"
    commit_file.write_text(json.dumps(sample_commit_data), encoding="utf-8")
    return commit_file


@pytest.fixture
def empty_commit_file(tmp_path):
    """Create a commit JSON file with no refs or changes."""
    commit_file = tmp_path / "empty.json"
    commit_file.write_text(json.dumps({"id": "abc123"}), encoding="utf-8")
    return commit_file


@pytest.fixture
def prefixed_config_file(tmp_path):
    """Create a config file that mounts the site under /git/."""
    config_file = tmp_path / "ginatra.yaml"
    config_file.write_text(
        "ginatra:\n  prefix: /git/\n  gravatar_size: 80\n  truncate_length: 10\n",
        encoding="utf-8",
    )
    return config_file
