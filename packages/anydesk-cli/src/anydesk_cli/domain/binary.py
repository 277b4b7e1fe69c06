"""Binary-related domain value objects.

This module contains value objects describing the AnyDesk executable:
the platform it runs on and how it is referenced before resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from anydesk_cli.domain.exceptions import AnyDeskConfigError

OperatingSystem = Literal["windows", "linux", "darwin"]


@dataclass(frozen=True)
class Platform:
    """Platform value object representing the operating system.

    Attributes:
        os: Operating system, must be 'windows', 'linux' or 'darwin'.
    """

    os: OperatingSystem

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        valid_os = ("windows", "linux", "darwin")
        if self.os not in valid_os:
            raise AnyDeskConfigError(f"os must be one of {valid_os}, got: {self.os!r}")

    @property
    def is_windows(self) -> bool:
        """True on Windows."""
        return self.os == "windows"


@dataclass(frozen=True)
class BinaryReference:
    """Reference to the AnyDesk executable prior to resolution.

    Attributes:
        name: Logical executable name, including any platform suffix.
        explicit_path: User-supplied path used verbatim, or None to search.
    """

    name: str
    explicit_path: str | None = None

    def __post_init__(self) -> None:
        """Validate the logical name."""
        if not self.name or not self.name.strip():
            raise AnyDeskConfigError("binary name cannot be empty")

    @property
    def is_explicit(self) -> bool:
        """True if an explicit path was supplied."""
        return bool(self.explicit_path)
