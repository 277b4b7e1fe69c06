"""AnyDesk settings domain entity."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from anydesk_cli.domain.binary import BinaryReference, Platform
from anydesk_cli.domain.exceptions import AnyDeskConfigError

DEFAULT_BINARY_NAME = "anydesk"
WINDOWS_EXECUTABLE_SUFFIX = ".exe"


@dataclass(frozen=True)
class AnyDeskSettings:
    """Configuration for locating and invoking the AnyDesk executable.

    Immutable value object, built once per platform and passed to the
    controller. Never mutated after construction.

    Attributes:
        binary_name: Logical executable name, including any platform suffix.
        search_dirs: Platform install directories searched after PATH, in order.
        binary_path: Explicit executable path. When set, no search is performed.
    """

    binary_name: str = DEFAULT_BINARY_NAME
    search_dirs: tuple[str, ...] = ()
    binary_path: str | None = None

    def __post_init__(self) -> None:
        """Validate settings."""
        self._validate_binary_name()
        self._validate_search_dirs()
        self._validate_binary_path()

    def _validate_binary_name(self) -> None:
        """Validate binary_name is a non-empty bare file name."""
        if not self.binary_name or not self.binary_name.strip():
            raise AnyDeskConfigError("binary_name cannot be empty")

        if "/" in self.binary_name or "\\" in self.binary_name:
            raise AnyDeskConfigError(
                f"binary_name must be a file name, not a path: {self.binary_name!r}"
            )

    def _validate_search_dirs(self) -> None:
        """Validate search_dirs is a tuple of strings."""
        if not isinstance(self.search_dirs, tuple):
            raise AnyDeskConfigError(
                f"search_dirs must be a tuple, got: {type(self.search_dirs).__name__}"
            )

        for entry in self.search_dirs:
            if not isinstance(entry, str):
                raise AnyDeskConfigError(
                    f"search_dirs entries must be strings, got: {entry!r}"
                )

    def _validate_binary_path(self) -> None:
        """Validate binary_path is not whitespace-only when provided."""
        if self.binary_path is not None and not self.binary_path.strip():
            raise AnyDeskConfigError("binary_path cannot be empty if provided")

    @property
    def binary_reference(self) -> BinaryReference:
        """Return the reference used to resolve the executable."""
        return BinaryReference(name=self.binary_name, explicit_path=self.binary_path)

    @classmethod
    def for_platform(
        cls,
        platform: Platform,
        environ: Mapping[str, str] | None = None,
        binary_path: str | None = None,
    ) -> AnyDeskSettings:
        """Build the default settings for a platform.

        On Windows the executable carries an ``.exe`` suffix and the 32-bit
        program files directory is searched after PATH. Other platforms rely
        on PATH alone.

        Args:
            platform: Target platform.
            environ: Environment to read install locations from. Defaults to
                os.environ.
            binary_path: Optional explicit executable path.

        Returns:
            AnyDeskSettings for the platform.
        """
        if environ is None:
            environ = os.environ

        if platform.is_windows:
            program_files_x86 = environ.get("PROGRAMFILES(X86)", "")
            return cls(
                binary_name=DEFAULT_BINARY_NAME + WINDOWS_EXECUTABLE_SUFFIX,
                search_dirs=(_join_windows(program_files_x86, "AnyDesk"),),
                binary_path=binary_path,
            )

        return cls(binary_name=DEFAULT_BINARY_NAME, binary_path=binary_path)


def _join_windows(directory: str, name: str) -> str:
    """Join a Windows directory and name regardless of the host OS."""
    if not directory:
        return name
    return directory.rstrip("\\/") + "\\" + name
