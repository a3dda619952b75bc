"""Disk-backed file system provider."""

from __future__ import annotations

import errno
import logging
import stat

from diskfs.async_utils import retry, run_blocking
from diskfs.config import ProviderConfig
from diskfs.errors import (
    FileSystemProviderError,
    FileSystemProviderErrorCode,
    create_file_system_provider_error,
    to_file_system_provider_error,
)
from diskfs.events import Emitter
from diskfs.filesystem import RealFileSystem
from diskfs.paths import Target, is_equal, join_path, to_file_path
from diskfs.platform import HostPlatform
from diskfs.protocols import FileSystem
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

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED = "Method not implemented."


def _to_millis(seconds_ns: int) -> int:
    return seconds_ns // 1_000_000


def _is_not_found(error: BaseException) -> bool:
    if isinstance(error, FileSystemProviderError):
        return error.code is FileSystemProviderErrorCode.FILE_NOT_FOUND
    return isinstance(error, OSError) and error.errno == errno.ENOENT


class DiskFileSystemProvider:
    """File system provider for the local disk.

    Every operation resolves its target to a native path, performs the
    native calls off the event loop and funnels failures through the error
    normalizer, so callers only ever see FileSystemProviderError.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        host: HostPlatform,
        config: ProviderConfig,
    ) -> None:
        """Initialize provider with required dependencies.

        Args:
            filesystem: Native filesystem primitives (required).
            host: Host platform flags (required).
            config: Provider configuration (required).
        """
        self.fs = filesystem
        self.host = host
        self.config = config

        capabilities = (
            FileSystemProviderCapabilities.FILE_READ_WRITE
            | FileSystemProviderCapabilities.FILE_OPEN_READ_WRITE_CLOSE
            | FileSystemProviderCapabilities.FILE_FOLDER_COPY
        )
        if host.is_linux:
            capabilities |= FileSystemProviderCapabilities.PATH_CASE_SENSITIVE
        self._capabilities = capabilities

        self._on_did_change_capabilities: Emitter[None] = Emitter()
        self._on_did_change_file: Emitter[list[FileChange]] = Emitter()

    @classmethod
    def create(cls, config: ProviderConfig | None = None) -> DiskFileSystemProvider:
        """Factory method for production instantiation.

        Args:
            config: Optional configuration (defaults if not provided).

        Returns:
            Provider backed by the real disk of the current host.
        """
        return cls(
            filesystem=RealFileSystem(),
            host=HostPlatform.current(),
            config=config or ProviderConfig(),
        )

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def capabilities(self) -> FileSystemProviderCapabilities:
        """Capability flags, fixed for the lifetime of the provider.

        Returns:
            Whole-file read/write, handle access and folder copy, plus
            PATH_CASE_SENSITIVE on Linux.
        """
        return self._capabilities

    @property
    def on_did_change_capabilities(self) -> Emitter[None]:
        """Never fires: capabilities are fixed at construction."""
        return self._on_did_change_capabilities

    @property
    def is_path_case_sensitive(self) -> bool:
        return bool(self._capabilities & FileSystemProviderCapabilities.PATH_CASE_SENSITIVE)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    async def stat(self, resource: Target) -> StatResult:
        """Resolve metadata without following symbolic links for the type."""
        try:
            # a plain stat would report the link target's type
            stats, is_symbolic_link = await run_blocking(
                self.fs.stat_link, to_file_path(resource)
            )

            if is_symbolic_link:
                file_type = FileType.SYMBOLIC_LINK
            elif stat.S_ISREG(stats.st_mode):
                file_type = FileType.FILE
            elif stat.S_ISDIR(stats.st_mode):
                file_type = FileType.DIRECTORY
            else:
                file_type = FileType.UNKNOWN

            return StatResult(
                type=file_type,
                ctime=_to_millis(stats.st_ctime_ns),
                mtime=_to_millis(stats.st_mtime_ns),
                size=stats.st_size,
            )
        except Exception as e:
            raise to_file_system_provider_error(e)

    async def readdir(self, resource: Target) -> list[tuple[str, FileType]]:
        """List a directory with the type of each child.

        Children are stat'ed one after the other, in enumeration order.
        """
        try:
            dir_path = to_file_path(resource)
            children = await run_blocking(self.fs.readdir, dir_path)

            result: list[tuple[str, FileType]] = []
            for child in children:
                child_stat = await self.stat(join_path(dir_path, child))
                result.append((child, child_stat.type))

            return result
        except Exception as e:
            raise to_file_system_provider_error(e)

    # ------------------------------------------------------------------
    # Reading / writing
    # ------------------------------------------------------------------

    async def read_file(self, resource: Target) -> bytes:
        """Read a whole file.

        Args:
            resource: File target.

        Returns:
            The file content.
        """
        try:
            return await run_blocking(self.fs.read_file, to_file_path(resource))
        except Exception as e:
            raise to_file_system_provider_error(e)

    async def write_file(
        self, resource: Target, content: bytes, opts: FileWriteOptions
    ) -> None:
        """Write a whole file.

        On Windows an existing file is truncated and rewritten in place
        rather than recreated, which keeps hidden/system attributes and
        alternate data streams. If the rewrite keeps failing after the
        truncation the file is left empty; that window is not repaired here.

        Args:
            resource: File target.
            content: Bytes to write.
            opts: Overwrite/create preconditions.

        Raises:
            FileSystemProviderError: FILE_EXISTS or FILE_NOT_FOUND when a
                precondition fails, otherwise the normalized native error.
        """
        try:
            file_path = to_file_path(resource)

            exists = await run_blocking(self.fs.exists, file_path)
            if exists and not opts.overwrite:
                raise create_file_system_provider_error(
                    "File already exists", FileSystemProviderErrorCode.FILE_EXISTS
                )
            if not exists and not opts.create:
                raise create_file_system_provider_error(
                    "File does not exist", FileSystemProviderErrorCode.FILE_NOT_FOUND
                )

            if exists and self.host.is_windows:
                await self._write_file_in_place(file_path, content)
            else:
                await run_blocking(self.fs.write_file, file_path, content)
        except Exception as e:
            raise to_file_system_provider_error(e)

    async def _write_file_in_place(self, file_path: str, content: bytes) -> None:
        try:
            await run_blocking(self.fs.truncate, file_path, 0)
        except OSError as e:
            logger.debug("Truncating %s failed, writing directly: %s", file_path, e)
            await run_blocking(self.fs.write_file, file_path, content)
            return

        # watchers and virus scanners may hold the file right after the truncate
        try:
            await retry(
                lambda: run_blocking(self.fs.write_file, file_path, content, "r+b"),
                delay=self.config.write_retry_delay,
                attempts=self.config.write_retry_attempts,
            )
        except Exception:
            logger.warning(
                "Writing %s failed after %d attempts; the file may have been left truncated",
                file_path,
                self.config.write_retry_attempts,
            )
            raise

    async def open(self, resource: Target, opts: FileOpenOptions) -> int:
        raise NotImplementedError(NOT_IMPLEMENTED)

    async def close(self, fd: int) -> None:
        raise NotImplementedError(NOT_IMPLEMENTED)

    async def read(
        self, fd: int, pos: int, data: bytearray, offset: int, length: int
    ) -> int:
        raise NotImplementedError(NOT_IMPLEMENTED)

    async def write(
        self, fd: int, pos: int, data: bytes, offset: int, length: int
    ) -> int:
        raise NotImplementedError(NOT_IMPLEMENTED)

    # ------------------------------------------------------------------
    # Move / copy / delete / create folder
    # ------------------------------------------------------------------

    async def mkdir(self, resource: Target) -> None:
        """Create a single directory. The parent must already exist.

        Args:
            resource: Directory target.

        Raises:
            FileSystemProviderError: FILE_EXISTS if something is already
                there, FILE_NOT_FOUND if the parent is missing.
        """
        try:
            await run_blocking(self.fs.mkdir, to_file_path(resource))
        except Exception as e:
            raise to_file_system_provider_error(e)

    async def delete(self, resource: Target, opts: FileDeleteOptions) -> None:
        """Delete an entry. Deleting a missing entry succeeds."""
        try:
            file_path = to_file_path(resource)

            if opts.recursive:
                tmp_dir = str(self.config.resolve_temp_dir())
                await run_blocking(self.fs.rimraf, file_path, tmp_dir)
            else:
                await run_blocking(self.fs.unlink, file_path)
        except Exception as e:
            if _is_not_found(e):
                logger.debug("Nothing to delete at %s", resource)
                return

            raise to_file_system_provider_error(e)

    async def rename(
        self,
        from_resource: Target,
        to_resource: Target,
        opts: FileOverwriteOptions | None = None,
    ) -> None:
        """Move an entry.

        Args:
            from_resource: Entry to move.
            to_resource: New location.
            opts: Whether an existing entry at the target may be replaced.

        Raises:
            FileSystemProviderError: FILE_EXISTS if the target exists and
                overwrite is not set, otherwise the normalized native error.
        """
        try:
            from_path = to_file_path(from_resource)
            to_path = to_file_path(to_resource)

            await self._validate_target_deleted(
                from_path, to_path, bool(opts and opts.overwrite)
            )

            await run_blocking(self.fs.move, from_path, to_path)
        except Exception as e:
            raise to_file_system_provider_error(e)

    async def copy(
        self,
        from_resource: Target,
        to_resource: Target,
        opts: FileOverwriteOptions | None = None,
    ) -> None:
        """Copy a file, link or directory tree.

        Args:
            from_resource: Entry to copy.
            to_resource: Location of the copy.
            opts: Whether an existing entry at the target may be replaced.

        Raises:
            FileSystemProviderError: FILE_EXISTS if the target exists and
                overwrite is not set, otherwise the normalized native error.
        """
        try:
            from_path = to_file_path(from_resource)
            to_path = to_file_path(to_resource)

            await self._validate_target_deleted(
                from_path, to_path, bool(opts and opts.overwrite)
            )

            await run_blocking(self.fs.copy, from_path, to_path)
        except Exception as e:
            raise to_file_system_provider_error(e)

    async def _validate_target_deleted(
        self, from_path: str, to_path: str, overwrite: bool
    ) -> None:
        """Clear the way for a move or copy onto to_path.

        A target equal to the source, or a case-only change of it on a
        case-insensitive platform, is the very entry being renamed, so it
        must neither be rejected nor deleted. The target check does not
        follow links: a dangling link at to_path is an existing entry.
        """
        if is_equal(from_path, to_path, ignore_case=not self.is_path_case_sensitive):
            return

        if await run_blocking(self.fs.lexists, to_path):
            if not overwrite:
                raise create_file_system_provider_error(
                    "File at target already exists",
                    FileSystemProviderErrorCode.FILE_EXISTS,
                )

            await self.delete(to_path, FileDeleteOptions(recursive=True))

    # ------------------------------------------------------------------
    # Watching
    # ------------------------------------------------------------------

    @property
    def on_did_change_file(self) -> Emitter[list[FileChange]]:
        """Wired for an external watcher; nothing in this provider fires it."""
        return self._on_did_change_file

    def watch(self, resource: Target, opts: WatchOptions) -> object:
        raise NotImplementedError(NOT_IMPLEMENTED)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def dispose(self) -> None:
        self._on_did_change_capabilities.dispose()
        self._on_did_change_file.dispose()
