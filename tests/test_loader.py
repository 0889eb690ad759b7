"""Tests for commit loading."""

import json
from datetime import datetime, timezone

import pytest

from ginatra.loader import CommitLoadError, load_commit, parse_commit
from ginatra.models import ChangeRecord, Ref


class TestParseCommit:
    """Tests for parse_commit function."""

    def test_full(self, sample_commit_data):
        """Test all fields are parsed."""
        commit = parse_commit(sample_commit_data)
        assert commit.id == sample_commit_data["id"]
        assert commit.message == "Add a.txt, drop b.txt"
        assert commit.author_email == "user@example.com"
        assert commit.committed_at == datetime(2003, 12, 13, 18, 30, 2, tzinfo=timezone.utc)
        assert commit.refs == [Ref("master"), Ref("v1.0")]
        assert commit.changes[0] == ChangeRecord("a.txt", added=True)
        assert commit.changes[1].deleted
        assert commit.changes[2].modified

    def test_minimal(self):
        """Test only id is required."""
        commit = parse_commit({"id": "abc"})
        assert commit.refs == []
        assert commit.changes == []
        assert commit.committed_at is None

    def test_missing_id(self):
        """Test missing id is rejected."""
        with pytest.raises(CommitLoadError):
            parse_commit({"refs": ["master"]})

    def test_not_an_object(self):
        """Test non-object JSON is rejected."""
        with pytest.raises(CommitLoadError):
            parse_commit(["abc"])

    def test_bad_timestamp(self):
        """Test malformed timestamp is rejected."""
        with pytest.raises(CommitLoadError, match="committed_at"):
            parse_commit({"id": "abc", "committed_at": "yesterday"})

    def test_zulu_timestamp(self):
        """Test a trailing Z is read as UTC."""
        commit = parse_commit({"id": "abc", "committed_at": "2003-12-13T18:30:02Z"})
        assert commit.committed_at == datetime(2003, 12, 13, 18, 30, 2, tzinfo=timezone.utc)

    @pytest.mark.parametrize("data", [
        {"id": "abc", "changes": ["a.txt"]},
        {"id": "abc", "changes": [{"added": True}]},
        {"id": "abc", "changes": {"path": "a.txt"}},
        {"id": "abc", "refs": "master"},
        {"id": "abc", "refs": [{"name": "master"}]},
        {"id": "abc", "committed_at": 1071340202},
        {"id": "abc", "message": ["subject"]},
    ])
    def test_wrong_types(self, data):
        """Test fields of the wrong type are rejected."""
        with pytest.raises(CommitLoadError):
            parse_commit(data)


class TestLoadCommit:
    """Tests for load_commit function."""

    def test_load(self, sample_commit_file):
        """Test loading a commit file."""
        commit = load_commit(sample_commit_file)
        assert len(commit.changes) == 3

    def test_invalid_json_raises(self, tmp_path):
        """Test invalid JSON raises when not exiting."""
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(CommitLoadError, match="Invalid JSON"):
            load_commit(bad, exit_on_error=False)

    def test_missing_file_raises(self, tmp_path):
        """Test unreadable file raises when not exiting."""
        with pytest.raises(CommitLoadError, match="Cannot read"):
            load_commit(tmp_path / "missing.json", exit_on_error=False)

    def test_missing_id_raises(self, tmp_path):
        """Test structurally invalid commit raises when not exiting."""
        bad = tmp_path / "noid.json"
        bad.write_text(json.dumps({"refs": []}), encoding="utf-8")
        with pytest.raises(CommitLoadError, match="noid.json"):
            load_commit(bad, exit_on_error=False)

    def test_exits_by_default(self, tmp_path, capsys):
        """Test default behaviour prints and exits."""
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            load_commit(bad)
        assert exc_info.value.code == 1
        assert "Error: Invalid JSON" in capsys.readouterr().err

    def test_wrong_types_exit(self, tmp_path, capsys):
        """Test malformed commits print an error and exit by default."""
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"id": "abc", "changes": ["a.txt"]}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            load_commit(bad)
        assert exc_info.value.code == 1
        assert "Error: Each change must be an object" in capsys.readouterr().err
