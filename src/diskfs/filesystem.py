"""Native filesystem primitives.

This module provides the blocking OS calls the provider is built on. The
RealFileSystem implementation wraps os and shutil operations; tests swap in
doubles to simulate failures that are hard to provoke on a real disk.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
import sys
import unicodedata
import uuid

logger = logging.getLogger(__name__)


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def stat_link(self, path: str) -> tuple[os.stat_result, bool]:
        """Stat a path, reporting whether it is a symbolic link."""
        lstats = os.lstat(path)
        if not stat.S_ISLNK(lstats.st_mode):
            return lstats, False

        try:
            return os.stat(path), True
        except OSError:
            # target missing or unreachable
            return lstats, True

    def readdir(self, path: str) -> list[str]:
        """List directory children in enumeration order."""
        children = os.listdir(path)
        if sys.platform == "darwin":
            # HFS+ hands out decomposed names
            return [unicodedata.normalize("NFC", child) for child in children]
        return children

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def lexists(self, path: str) -> bool:
        """Check if an entry exists at path, counting dangling links."""
        return os.path.lexists(path)

    def read_file(self, path: str) -> bytes:
        """Read a whole file."""
        with open(path, "rb") as f:
            return f.read()

    def write_file(self, path: str, content: bytes, mode: str = "wb") -> None:
        """Write a whole file."""
        with open(path, mode) as f:
            f.write(content)

    def truncate(self, path: str, length: int = 0) -> None:
        """Truncate a file in place."""
        os.truncate(path, length)

    def mkdir(self, path: str) -> None:
        """Create a single directory."""
        os.mkdir(path)

    def unlink(self, path: str) -> None:
        """Remove a file, link or empty directory."""
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.unlink(path)

    def rimraf(self, path: str, tmp_dir: str) -> None:
        """Remove an entry recursively, staging it in tmp_dir first.

        Moving the entry out of the way first makes the target path free
        immediately even when the removal of the staged copy is slow or
        partially fails.
        """
        os.lstat(path)

        # Names ending in a dot cannot be moved on Windows
        if path.endswith("."):
            self._remove(path)
            return

        staged = os.path.join(tmp_dir, uuid.uuid4().hex)
        try:
            os.rename(path, staged)
        except OSError as e:
            logger.debug("Staging %s in %s failed, removing in place: %s", path, tmp_dir, e)
            self._remove(path)
            return

        try:
            self._remove(staged)
        except OSError as e:
            logger.debug("Leaving staged entry %s behind: %s", staged, e)

    def move(self, src: str, dst: str) -> None:
        """Move an entry, copying across devices when needed."""
        try:
            os.rename(src, dst)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            shutil.move(src, dst)

    def copy(self, src: str, dst: str) -> None:
        """Copy a file, link or directory tree."""
        if os.path.isdir(src) and not os.path.islink(src):
            shutil.copytree(src, dst, symlinks=True)
        else:
            shutil.copy2(src, dst, follow_symlinks=False)

    def _remove(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.unlink(path)
