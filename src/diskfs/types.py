"""Shared data types for the disk file system provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

__all__ = [
    "FileChange",
    "FileChangeType",
    "FileDeleteOptions",
    "FileOpenOptions",
    "FileOverwriteOptions",
    "FileSystemProviderCapabilities",
    "FileType",
    "FileWriteOptions",
    "StatResult",
    "WatchOptions",
]


class FileType(IntEnum):
    """Type of a file system entry."""

    UNKNOWN = 0
    FILE = 1
    DIRECTORY = 2
    SYMBOLIC_LINK = 64


class FileSystemProviderCapabilities(IntFlag):
    """Operation groups and path semantics a provider supports."""

    FILE_READ_WRITE = 1 << 1
    FILE_OPEN_READ_WRITE_CLOSE = 1 << 2
    FILE_FOLDER_COPY = 1 << 3
    PATH_CASE_SENSITIVE = 1 << 10


class FileChangeType(IntEnum):
    """Kind of change reported to file change listeners."""

    UPDATED = 0
    ADDED = 1
    DELETED = 2


@dataclass(frozen=True)
class StatResult:
    """Metadata of a file system entry.

    Attributes:
        type: Entry type. Symbolic links are reported as such, never
            as the type of their target.
        ctime: Change time in milliseconds since the epoch.
        mtime: Modification time in milliseconds since the epoch.
        size: Size in bytes.
    """

    type: FileType
    ctime: int
    mtime: int
    size: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.size < 0:
            raise ValueError("size cannot be negative")


@dataclass(frozen=True)
class FileWriteOptions:
    """Preconditions for a whole-file write."""

    overwrite: bool = False
    create: bool = True


@dataclass(frozen=True)
class FileDeleteOptions:
    recursive: bool = False


@dataclass(frozen=True)
class FileOverwriteOptions:
    overwrite: bool = False


@dataclass(frozen=True)
class FileOpenOptions:
    create: bool = False


@dataclass(frozen=True)
class WatchOptions:
    recursive: bool = False
    excludes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FileChange:
    """A single change event for a resource."""

    type: FileChangeType
    resource: str
