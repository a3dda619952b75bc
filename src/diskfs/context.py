"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The provider is typed using the FileSystemProvider Protocol rather than the
concrete disk implementation, so test doubles can be injected without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from diskfs.config import ProviderConfig, load_config
from diskfs.protocols import FileSystemProvider


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    provider: FileSystemProvider
    config: ProviderConfig = field(default_factory=ProviderConfig)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_path: Override config file location (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from diskfs.provider import DiskFileSystemProvider

    config = load_config(config_path)
    provider = DiskFileSystemProvider.create(config)

    return AppContext(provider=provider, config=config)
