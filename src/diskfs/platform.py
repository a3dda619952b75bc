"""Host operating system identification."""

from __future__ import annotations

import sys
from dataclasses import dataclass

__all__ = ["HostPlatform"]


@dataclass(frozen=True)
class HostPlatform:
    """Flags describing the host operating system.

    Providers take this as a dependency instead of reading ``sys.platform``
    directly, so platform specific branches can be exercised anywhere.
    """

    name: str

    @property
    def is_windows(self) -> bool:
        return self.name == "win32"

    @property
    def is_linux(self) -> bool:
        return self.name.startswith("linux")

    @property
    def is_macintosh(self) -> bool:
        return self.name == "darwin"

    @classmethod
    def current(cls) -> HostPlatform:
        """Describe the platform this interpreter runs on."""
        return cls(name=sys.platform)

    @classmethod
    def windows(cls) -> HostPlatform:
        return cls(name="win32")

    @classmethod
    def linux(cls) -> HostPlatform:
        return cls(name="linux")

    @classmethod
    def macintosh(cls) -> HostPlatform:
        return cls(name="darwin")
