"""Domain exceptions.

Exception hierarchy:
- AnyDeskConfigError: Base domain exception for configuration and usage errors.
  Raised for programming misuse (malformed options, invalid settings).
- BinaryNotFoundError: The AnyDesk executable could not be located. An
  expected failure of the installation, not a usage error, so it is not an
  AnyDeskConfigError.
- AnyDeskCommandError: Raised by CommandResult.unwrap() for callers that
  prefer exceptions over result values.

Expected failures of the external AnyDesk process are never raised by the
controller; they are returned as ControllerError values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from anydesk_cli.domain.errors import ControllerError


class AnyDeskConfigError(Exception):
    """Raised when AnyDesk configuration or call arguments are invalid.

    This is the base exception for all domain-level errors. It is raised by
    domain value objects (e.g., AnyDeskSettings, ConnectOptions) and use cases
    (e.g., SettingsParser) when validation fails.
    """

    pass


class BinaryNotFoundError(Exception):
    """Raised when the AnyDesk executable cannot be found.

    Attributes:
        name: Logical executable name that was searched for.
        searched: Candidate paths that were checked, in search order.
    """

    def __init__(self, name: str, searched: tuple[str, ...] = ()) -> None:
        """Initialize BinaryNotFoundError.

        Args:
            name: Logical executable name that was searched for.
            searched: Candidate paths that were checked.
        """
        super().__init__(f"exec: {name!r}: executable file not found in search path")
        self.name = name
        self.searched = searched


class AnyDeskCommandError(Exception):
    """Raised when a failed CommandResult is unwrapped.

    Attributes:
        error: The ControllerError describing the failure.
    """

    def __init__(self, error: ControllerError) -> None:
        super().__init__(error.message)
        self.error = error
