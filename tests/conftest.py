"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from diskfs.config import ProviderConfig
from diskfs.context import AppContext
from diskfs.filesystem import RealFileSystem
from diskfs.platform import HostPlatform
from diskfs.provider import DiskFileSystemProvider


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for staged deletes."""
    staging = tmp_path / "staging"
    staging.mkdir()
    return staging


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create an empty directory to operate in."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def test_config(staging_dir: Path) -> ProviderConfig:
    """Config with no retry delay and a private staging directory."""
    return ProviderConfig(write_retry_delay_ms=0, temp_dir=staging_dir)


# ============================================================================
# Provider Fixtures
# ============================================================================


def make_provider(
    host: HostPlatform,
    config: ProviderConfig,
    filesystem: RealFileSystem | None = None,
) -> DiskFileSystemProvider:
    """Build a provider over the real disk pretending to run on host."""
    return DiskFileSystemProvider(
        filesystem=filesystem or RealFileSystem(),
        host=host,
        config=config,
    )


@pytest.fixture
def provider(test_config: ProviderConfig) -> DiskFileSystemProvider:
    """Case-sensitive (Linux) provider."""
    return make_provider(HostPlatform.linux(), test_config)


@pytest.fixture
def case_insensitive_provider(test_config: ProviderConfig) -> DiskFileSystemProvider:
    """Provider that treats paths as case-insensitive (macOS policy)."""
    return make_provider(HostPlatform.macintosh(), test_config)


@pytest.fixture
def windows_provider(test_config: ProviderConfig) -> DiskFileSystemProvider:
    """Provider taking the Windows safe-write branch."""
    return make_provider(HostPlatform.windows(), test_config)


# ============================================================================
# Failure Simulation
# ============================================================================


class FlakyFileSystem(RealFileSystem):
    """RealFileSystem that fails selected calls on demand.

    Attributes:
        truncate_error: Raised by truncate() when set.
        update_errors: Raised, in order, by in-place ("r+b") writes. Once
            exhausted, in-place writes go to disk.
        update_attempts: Number of in-place writes attempted.
    """

    def __init__(self) -> None:
        self.truncate_error: OSError | None = None
        self.update_errors: list[OSError] = []
        self.update_attempts = 0
        self.modes: list[str] = []

    def truncate(self, path: str, length: int = 0) -> None:
        if self.truncate_error is not None:
            raise self.truncate_error
        super().truncate(path, length)

    def write_file(self, path: str, content: bytes, mode: str = "wb") -> None:
        self.modes.append(mode)
        if mode == "r+b":
            self.update_attempts += 1
            if self.update_errors:
                raise self.update_errors.pop(0)
        super().write_file(path, content, mode)


@pytest.fixture
def flaky_fs() -> FlakyFileSystem:
    return FlakyFileSystem()


@pytest.fixture
def flaky_windows_provider(
    flaky_fs: FlakyFileSystem, test_config: ProviderConfig
) -> DiskFileSystemProvider:
    """Windows provider whose native calls can be made to fail."""
    return make_provider(HostPlatform.windows(), test_config, flaky_fs)


def can_symlink(tmp_path: Path) -> bool:
    """Check whether the current user may create symbolic links."""
    link = tmp_path / ".symlink-check"
    try:
        os.symlink(tmp_path, link)
    except (OSError, NotImplementedError):
        return False
    link.unlink()
    return True


# ============================================================================
# Mock Provider Fixture
# ============================================================================


@pytest.fixture
def mock_provider() -> MagicMock:
    """Create a mock provider whose operations are awaitable."""
    provider = MagicMock()
    for name in ("stat", "readdir", "read_file", "write_file", "mkdir", "delete", "rename", "copy"):
        setattr(provider, name, AsyncMock())
    return provider


@pytest.fixture
def mock_context(mock_provider: MagicMock) -> AppContext:
    """Create an AppContext around the mock provider."""
    return AppContext(provider=mock_provider)


@pytest.fixture
def require_symlinks(tmp_path: Path) -> None:
    """Skip the test where symbolic links cannot be created."""
    if not can_symlink(tmp_path):
        pytest.skip("symbolic links not supported")
