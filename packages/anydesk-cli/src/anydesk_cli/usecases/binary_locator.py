"""Binary locator use case for finding the AnyDesk executable."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Sequence

from anydesk_cli.adapters.ports import FileCheckerPort
from anydesk_cli.adapters.os_file_checker import OsFileChecker
from anydesk_cli.domain.exceptions import BinaryNotFoundError

logger = logging.getLogger(__name__)


class BinaryLocator:
    """Use case for locating the AnyDesk executable.

    Searches in order:
    1. Every entry of the PATH environment variable
    2. The platform install directories passed at construction

    An empty PATH entry stands for the current directory, as in POSIX
    shells. The first candidate that is an executable regular file wins.
    Nothing is cached; every call searches again.
    """

    def __init__(
        self,
        binary_name: str,
        search_dirs: Sequence[str] = (),
        file_checker: FileCheckerPort | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the binary locator.

        Args:
            binary_name: Logical executable name, including any platform suffix.
            search_dirs: Platform install directories searched after PATH.
            file_checker: Port for checking candidates. Defaults to OsFileChecker.
            environ: Environment to read PATH from. Defaults to os.environ,
                read at resolution time.
        """
        self._binary_name = binary_name
        self._search_dirs = tuple(search_dirs)
        self._file_checker = file_checker or OsFileChecker()
        self._environ = environ

    @property
    def binary_name(self) -> str:
        """Logical executable name searched for."""
        return self._binary_name

    def candidates(self) -> list[str]:
        """Return candidate executable paths in search order.

        Returns:
            List of paths built from PATH entries followed by search_dirs.
        """
        environ = os.environ if self._environ is None else self._environ
        path_env = environ.get("PATH", "")
        path_dirs = path_env.split(os.pathsep) if path_env else []

        result: list[str] = []
        for directory in [*path_dirs, *self._search_dirs]:
            if directory == "":
                directory = "."
            result.append(os.path.join(directory, self._binary_name))
        return result

    def resolve(self, explicit_path: str | None = None) -> str:
        """Resolve the path of the AnyDesk executable.

        Args:
            explicit_path: Path supplied by the user. When non-empty it is
                returned verbatim without checking that it exists.

        Returns:
            Path to the executable.

        Raises:
            BinaryNotFoundError: If no candidate is an executable file.
        """
        if explicit_path:
            return explicit_path

        candidates = self.candidates()
        for candidate in candidates:
            if self._file_checker.is_executable_file(Path(candidate)):
                logger.debug(f"Resolved {self._binary_name} to {candidate}")
                return candidate

        logger.debug(
            f"{self._binary_name} not found in {len(candidates)} candidate locations"
        )
        raise BinaryNotFoundError(self._binary_name, tuple(candidates))
