"""Normalized error taxonomy for file system providers.

Native OS failures are translated into a small closed set of codes so that
callers branch on what happened (missing, exists, permission) instead of on
platform specific error numbers.
"""

from __future__ import annotations

import errno
from enum import Enum

__all__ = [
    "FileSystemProviderError",
    "FileSystemProviderErrorCode",
    "create_file_system_provider_error",
    "to_file_system_provider_error",
]


class FileSystemProviderErrorCode(str, Enum):
    """Closed set of error kinds surfaced by providers."""

    FILE_EXISTS = "EntryExists"
    FILE_NOT_FOUND = "EntryNotFound"
    FILE_IS_A_DIRECTORY = "EntryIsADirectory"
    NO_PERMISSIONS = "NoPermissions"
    UNKNOWN = "Unknown"


_ERRNO_CODES: dict[int, FileSystemProviderErrorCode] = {
    errno.ENOENT: FileSystemProviderErrorCode.FILE_NOT_FOUND,
    errno.EISDIR: FileSystemProviderErrorCode.FILE_IS_A_DIRECTORY,
    errno.EEXIST: FileSystemProviderErrorCode.FILE_EXISTS,
    errno.EPERM: FileSystemProviderErrorCode.NO_PERMISSIONS,
    errno.EACCES: FileSystemProviderErrorCode.NO_PERMISSIONS,
}


class FileSystemProviderError(Exception):
    """Error raised by provider operations.

    Attributes:
        code: Normalized error kind.
        cause: The original error, if any.
    """

    def __init__(
        self,
        message: str,
        code: FileSystemProviderErrorCode = FileSystemProviderErrorCode.UNKNOWN,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause

    def __str__(self) -> str:
        return f"{super().__str__()} ({self.code.value})"


def create_file_system_provider_error(
    error: BaseException | str,
    code: FileSystemProviderErrorCode = FileSystemProviderErrorCode.UNKNOWN,
) -> FileSystemProviderError:
    """Create a provider error from a message or an underlying error.

    Args:
        error: Message, or the error being wrapped.
        code: Normalized error kind.

    Returns:
        New FileSystemProviderError. When ``error`` is an exception it is kept
        as ``cause`` and chained as ``__cause__``.
    """
    if isinstance(error, BaseException):
        provider_error = FileSystemProviderError(str(error), code, cause=error)
        provider_error.__cause__ = error
        return provider_error
    return FileSystemProviderError(error, code)


def to_file_system_provider_error(error: BaseException) -> FileSystemProviderError:
    """Normalize any error into a FileSystemProviderError.

    Already normalized errors are returned unchanged, so nested operations
    (rename calling delete) never wrap twice.

    Args:
        error: Error raised by a native call or a nested operation.

    Returns:
        The normalized error.
    """
    if isinstance(error, FileSystemProviderError):
        return error

    code = FileSystemProviderErrorCode.UNKNOWN
    if isinstance(error, OSError) and error.errno is not None:
        code = _ERRNO_CODES.get(error.errno, FileSystemProviderErrorCode.UNKNOWN)

    return create_file_system_provider_error(error, code)
