"""
Tests for settingsfile.paths module.

Tests filesystem helpers including:
- User config directory resolution
- Reading, writing and removing files
- Mapping OS errors to StorageError
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from settingsfile import paths
from settingsfile.exceptions import StorageError


class TestUserConfigDir:
    """Tests for user_config_dir()."""

    def test_xdg_config_home(self, monkeypatch, tmp_path):
        """Test XDG_CONFIG_HOME takes precedence."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert paths.user_config_dir() == tmp_path

    @pytest.mark.skipif(os.name == "nt", reason="Windows uses APPDATA")
    def test_posix_default(self, monkeypatch, tmp_path):
        """Test the ~/.config fallback."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert paths.user_config_dir() == tmp_path / ".config"


class TestFileOperations:
    """Tests for read_file, write_file and remove_file."""

    def test_write_creates_parents(self, tmp_path):
        """Test that write_file creates missing directories."""
        target = tmp_path / "a" / "b" / "settings.toml"

        paths.write_file(target, b"x = 1\n")

        assert target.read_bytes() == b"x = 1\n"

    def test_read_file(self, tmp_path):
        """Test reading a file back."""
        target = tmp_path / "settings.json"
        target.write_bytes(b"{}")

        assert paths.read_file(target) == b"{}"

    def test_read_missing_raises(self, tmp_path):
        """Test reading a missing file raises StorageError."""
        target = tmp_path / "missing.toml"

        with pytest.raises(StorageError) as exc_info:
            paths.read_file(target)

        assert exc_info.value.path == target
        assert exc_info.value.operation == "read"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_write_under_file_raises(self, tmp_path):
        """Test that a file blocking the parent directory raises StorageError."""
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")

        with pytest.raises(StorageError) as exc_info:
            paths.write_file(blocker / "settings.toml", b"")

        assert exc_info.value.operation == "mkdir"
        assert exc_info.value.path == blocker

    def test_remove_file(self, tmp_path):
        """Test removing an existing and a missing file."""
        target = tmp_path / "settings.yaml"
        target.write_bytes(b"a: 1\n")

        assert paths.remove_file(target) is True
        assert not target.exists()
        assert paths.remove_file(target) is False

    def test_working_dir(self, work_dir):
        """Test working_dir() follows the process working directory."""
        assert paths.working_dir() == Path.cwd()
