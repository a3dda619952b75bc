"""Disk-backed file system provider with a normalized error taxonomy."""

__version__ = "0.1.0"

from diskfs.errors import (
    FileSystemProviderError,
    FileSystemProviderErrorCode,
)
from diskfs.protocols import FileSystem, FileSystemProvider
from diskfs.provider import DiskFileSystemProvider
from diskfs.types import (
    FileDeleteOptions,
    FileOverwriteOptions,
    FileSystemProviderCapabilities,
    FileType,
    FileWriteOptions,
    StatResult,
)

__all__ = [
    "__version__",
    "DiskFileSystemProvider",
    "FileDeleteOptions",
    "FileOverwriteOptions",
    "FileSystem",
    "FileSystemProvider",
    "FileSystemProviderCapabilities",
    "FileSystemProviderError",
    "FileSystemProviderErrorCode",
    "FileType",
    "FileWriteOptions",
    "StatResult",
]
