"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the two layers of the
package:
- FileSystem: blocking native primitives (stat, list, move, copy, ...)
- FileSystemProvider: the asynchronous, capability-declared surface that
  higher layers consume

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from diskfs.events import Emitter
    from diskfs.paths import Target
    from diskfs.types import (
        FileChange,
        FileDeleteOptions,
        FileOpenOptions,
        FileOverwriteOptions,
        FileSystemProviderCapabilities,
        FileType,
        FileWriteOptions,
        StatResult,
        WatchOptions,
    )


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for native filesystem primitives.

    Abstracts blocking OS calls so providers can be tested with doubles.
    Implementations raise OSError (with errno set) on failure.
    """

    def stat_link(self, path: str) -> tuple[os.stat_result, bool]:
        """Stat a path without being fooled by symbolic links.

        Args:
            path: Native path.

        Returns:
            Tuple of (stat record, is_symbolic_link). The record describes
            the link target when the link resolves, the link itself otherwise.

        Raises:
            FileNotFoundError: If path does not exist.
        """
        ...

    def readdir(self, path: str) -> list[str]:
        """List the names of the direct children of a directory.

        Args:
            path: Directory path.

        Returns:
            Child names in native enumeration order.
        """
        ...

    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def lexists(self, path: str) -> bool:
        """Check if an entry exists at path without following links.

        Args:
            path: Path to check.

        Returns:
            True if an entry, including a dangling link, is at path.
        """
        ...

    def read_file(self, path: str) -> bytes:
        """Read a whole file.

        Args:
            path: Path to the file.

        Returns:
            File content.
        """
        ...

    def write_file(self, path: str, content: bytes, mode: str = "wb") -> None:
        """Write a whole file.

        Args:
            path: Path to the file.
            content: Bytes to write.
            mode: Open mode, "wb" to recreate or "r+b" to update in place.
        """
        ...

    def truncate(self, path: str, length: int = 0) -> None:
        """Truncate a file.

        Args:
            path: Path to the file.
            length: New length in bytes.
        """
        ...

    def mkdir(self, path: str) -> None:
        """Create a single directory.

        Args:
            path: Path to create. Its parent must exist.
        """
        ...

    def unlink(self, path: str) -> None:
        """Remove a single entry.

        Args:
            path: Path to remove.
        """
        ...

    def rimraf(self, path: str, tmp_dir: str) -> None:
        """Remove an entry and everything below it.

        Args:
            path: Path to remove.
            tmp_dir: Directory used to stage the entry before removal.
        """
        ...

    def move(self, src: str, dst: str) -> None:
        """Move an entry.

        Args:
            src: Source path.
            dst: Destination path.
        """
        ...

    def copy(self, src: str, dst: str) -> None:
        """Copy a file or a directory tree.

        Args:
            src: Source path.
            dst: Destination path.
        """
        ...


@runtime_checkable
class FileSystemProvider(Protocol):
    """Protocol for file system providers.

    Every operation that touches storage is a coroutine and raises
    FileSystemProviderError on failure.
    """

    @property
    def capabilities(self) -> FileSystemProviderCapabilities:
        """Operation groups and path semantics supported by this provider."""
        ...

    @property
    def on_did_change_capabilities(self) -> Emitter[None]:
        """Channel notified when capabilities change."""
        ...

    @property
    def on_did_change_file(self) -> Emitter[list[FileChange]]:
        """Channel notified with batches of file changes."""
        ...

    async def stat(self, resource: Target) -> StatResult:
        """Resolve metadata of an entry.

        Args:
            resource: Target to stat.

        Returns:
            StatResult of the entry.
        """
        ...

    async def readdir(self, resource: Target) -> list[tuple[str, FileType]]:
        """List a directory.

        Args:
            resource: Directory target.

        Returns:
            List of (name, type) pairs.
        """
        ...

    async def read_file(self, resource: Target) -> bytes:
        """Read a whole file.

        Args:
            resource: File target.

        Returns:
            File content.
        """
        ...

    async def write_file(
        self, resource: Target, content: bytes, opts: FileWriteOptions
    ) -> None:
        """Write a whole file.

        Args:
            resource: File target.
            content: Bytes to write.
            opts: Overwrite/create preconditions.
        """
        ...

    async def open(self, resource: Target, opts: FileOpenOptions) -> int:
        """Open a file handle."""
        ...

    async def close(self, fd: int) -> None:
        """Close a file handle."""
        ...

    async def read(
        self, fd: int, pos: int, data: bytearray, offset: int, length: int
    ) -> int:
        """Read from a file handle into a buffer."""
        ...

    async def write(
        self, fd: int, pos: int, data: bytes, offset: int, length: int
    ) -> int:
        """Write a buffer to a file handle."""
        ...

    async def mkdir(self, resource: Target) -> None:
        """Create a directory.

        Args:
            resource: Directory target.
        """
        ...

    async def delete(self, resource: Target, opts: FileDeleteOptions) -> None:
        """Delete an entry.

        Args:
            resource: Target to delete.
            opts: Recursive flag.
        """
        ...

    async def rename(
        self, from_resource: Target, to_resource: Target, opts: FileOverwriteOptions
    ) -> None:
        """Move an entry.

        Args:
            from_resource: Source target.
            to_resource: Destination target.
            opts: Overwrite flag.
        """
        ...

    async def copy(
        self, from_resource: Target, to_resource: Target, opts: FileOverwriteOptions
    ) -> None:
        """Copy an entry.

        Args:
            from_resource: Source target.
            to_resource: Destination target.
            opts: Overwrite flag.
        """
        ...

    def watch(self, resource: Target, opts: WatchOptions) -> object:
        """Start watching a resource for changes."""
        ...
