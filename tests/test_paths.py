"""Tests for target resolution and path comparison."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from diskfs.paths import is_equal, join_path, to_file_path
from diskfs.platform import HostPlatform


class TestToFilePath:
    """Tests for to_file_path."""

    def test_plain_path(self, tmp_path: Path) -> None:
        """Test an absolute path is returned normalized."""
        assert to_file_path(tmp_path) == os.path.normpath(str(tmp_path))

    def test_collapses_redundant_segments(self, tmp_path: Path) -> None:
        """Test duplicate separators and dot segments are collapsed."""
        messy = f"{tmp_path}{os.sep}{os.sep}a{os.sep}.{os.sep}b{os.sep}..{os.sep}c"

        assert to_file_path(messy) == os.path.join(str(tmp_path), "a", "c")

    def test_relative_path_is_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test relative targets resolve against the working directory."""
        monkeypatch.chdir(tmp_path)

        assert to_file_path("file.txt") == os.path.join(os.getcwd(), "file.txt")

    def test_file_uri(self, tmp_path: Path) -> None:
        """Test file:// URIs are translated, including escapes."""
        target = tmp_path / "with space.txt"

        assert to_file_path(target.as_uri()) == str(target)

    def test_unsupported_scheme(self) -> None:
        """Test remote schemes are rejected."""
        with pytest.raises(ValueError, match="Unsupported scheme"):
            to_file_path("ssh://host/etc/passwd")


class TestIsEqual:
    """Tests for is_equal."""

    def test_identical(self) -> None:
        assert is_equal("/a/b", "/a/b") is True

    def test_case_difference_is_significant_by_default(self) -> None:
        assert is_equal("/a/file.txt", "/a/File.txt") is False

    def test_ignore_case(self) -> None:
        assert is_equal("/a/file.txt", "/A/File.TXT", ignore_case=True) is True

    def test_different_paths_ignore_case(self) -> None:
        assert is_equal("/a/file.txt", "/a/other.txt", ignore_case=True) is False


def test_join_path() -> None:
    """Test joining normalizes the result."""
    assert join_path(os.sep + "base", "child") == os.path.normpath(os.sep + "base/child")


class TestHostPlatform:
    """Tests for HostPlatform flags."""

    def test_windows(self) -> None:
        host = HostPlatform.windows()

        assert host.is_windows and not host.is_linux and not host.is_macintosh

    def test_linux(self) -> None:
        host = HostPlatform.linux()

        assert host.is_linux and not host.is_windows

    def test_macintosh(self) -> None:
        host = HostPlatform.macintosh()

        assert host.is_macintosh and not host.is_linux

    def test_current(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the current platform reads sys.platform."""
        monkeypatch.setattr("diskfs.platform.sys.platform", "linux")

        assert HostPlatform.current().is_linux is True
