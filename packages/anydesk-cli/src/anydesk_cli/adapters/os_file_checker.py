"""Filesystem checker adapter.

Implements FileCheckerPort using os.path and os.access.
"""

from __future__ import annotations

import os
from pathlib import Path


class OsFileChecker:
    """Adapter that checks candidate binaries on the local filesystem.

    A candidate qualifies when it is a regular file (following symlinks)
    and the current user has execute permission on it.
    """

    def is_executable_file(self, path: Path) -> bool:
        """Check whether path is an executable regular file.

        Args:
            path: Candidate path.

        Returns:
            True if the file exists, is not a directory, and is executable.
        """
        try:
            return path.is_file() and os.access(path, os.X_OK)
        except OSError:
            return False
