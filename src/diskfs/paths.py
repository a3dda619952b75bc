"""Translation of targets to native file system paths."""

from __future__ import annotations

import os
from typing import Union
from urllib.parse import urlparse
from urllib.request import url2pathname

__all__ = ["Target", "is_equal", "join_path", "to_file_path"]

Target = Union[str, "os.PathLike[str]"]

FILE_SCHEME = "file"


def to_file_path(resource: Target) -> str:
    """Resolve a target to a normalized native path.

    Accepts plain paths, path-like objects and ``file://`` URIs.

    Args:
        resource: Target to resolve.

    Returns:
        Absolute path with redundant separators and dot segments collapsed.

    Raises:
        ValueError: If the target is a URI with a scheme other than ``file``.
    """
    raw = os.fspath(resource)

    if "://" in raw:
        parsed = urlparse(raw)
        if parsed.scheme != FILE_SCHEME:
            raise ValueError(f"Unsupported scheme '{parsed.scheme}' in {raw}")
        raw = url2pathname(parsed.path)
        # UNC authority
        if parsed.netloc and parsed.netloc != "localhost":
            raw = f"//{parsed.netloc}{raw}"

    return os.path.normpath(os.path.abspath(raw))


def join_path(base: str, *names: str) -> str:
    return os.path.normpath(os.path.join(base, *names))


def is_equal(path_a: str, path_b: str, ignore_case: bool = False) -> bool:
    """Compare two native paths.

    Args:
        path_a: First path.
        path_b: Second path.
        ignore_case: Compare case-insensitively.

    Returns:
        True if the paths denote the same string under the chosen mode.
    """
    if path_a == path_b:
        return True
    if not ignore_case:
        return False
    return path_a.casefold() == path_b.casefold()
