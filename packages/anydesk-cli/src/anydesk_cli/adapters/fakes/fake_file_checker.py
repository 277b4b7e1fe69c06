"""Fake file checker for testing.

Provides a test double for FileCheckerPort that answers from a
preconfigured set of paths without touching the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class FakeFileChecker:
    """Fake implementation of FileCheckerPort for testing.

    Paths are compared after normalization, so "./anydesk" and "anydesk"
    match the same entry. Every checked path is recorded.
    """

    def __init__(self, executables: Iterable[Path | str] = ()) -> None:
        """Initialize with the paths that count as executable files.

        Args:
            executables: Paths reported as executable.
        """
        self._executables = {Path(p) for p in executables}
        self._checked: list[Path] = []

    @property
    def checked(self) -> list[Path]:
        """Return a copy of the checked paths, in order."""
        return list(self._checked)

    def add(self, path: Path | str) -> None:
        """Mark a path as executable."""
        self._executables.add(Path(path))

    def is_executable_file(self, path: Path) -> bool:
        """Return True if path was configured as executable."""
        self._checked.append(path)
        return Path(path) in self._executables
