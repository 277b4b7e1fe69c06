"""Invocation-related domain value objects.

This module contains the value objects describing how the AnyDesk
executable is invoked: the command-line flags it understands, the options
accepted when connecting to a remote client, and the argument/stdin pair
handed to the process runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from anydesk_cli.domain.exceptions import AnyDeskConfigError

SET_PASSWORD_FLAG = "--set-password"
REMOVE_PASSWORD_FLAG = "--remove-password"
WITH_PASSWORD_FLAG = "--with-password"
FULLSCREEN_FLAG = "--fullscreen"
FILE_TRANSFER_FLAG = "--file-transfer"
PLAIN_FLAG = "--plain"


class InfoQuery(Enum):
    """Read-only information queries and their command-line flags."""

    ALIAS = "--get-alias"
    ID = "--get-id"
    STATUS = "--get-status"
    VERSION = "--version"

    @property
    def flag(self) -> str:
        """Return the command-line flag for this query."""
        return self.value


@dataclass(frozen=True)
class ConnectOptions:
    """Options for connecting to a remote AnyDesk client.

    Immutable value object. Every field is independent; an empty password or
    a False flag means the corresponding argument is not passed.

    Attributes:
        password: Password to authenticate with, written to stdin.
        fullscreen: Start the session in fullscreen mode.
        file_transfer: Open the file transfer view instead of the desktop.
        plain: Start the session without the main window decorations.
    """

    password: str = ""
    fullscreen: bool = False
    file_transfer: bool = False
    plain: bool = False

    def __post_init__(self) -> None:
        """Validate option types."""
        self._validate_password()
        self._validate_flags()

    def _validate_password(self) -> None:
        """Validate password is a string."""
        if not isinstance(self.password, str):
            raise AnyDeskConfigError(
                f"password must be a string, got: {type(self.password).__name__}"
            )

    def _validate_flags(self) -> None:
        """Validate boolean flags are real booleans."""
        for name in ("fullscreen", "file_transfer", "plain"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise AnyDeskConfigError(
                    f"{name} must be a bool, got: {type(value).__name__}"
                )


@dataclass(frozen=True)
class Invocation:
    """Arguments and stdin payload for one run of the AnyDesk executable.

    Attributes:
        args: Arguments passed after the executable path.
        stdin: Text written verbatim to the process's stdin, or None to
            leave stdin unattached.
    """

    args: tuple[str, ...]
    stdin: str | None = None

    def __repr__(self) -> str:
        # stdin may carry a password
        stdin = None if self.stdin is None else "***"
        return f"Invocation(args={self.args!r}, stdin={stdin!r})"
