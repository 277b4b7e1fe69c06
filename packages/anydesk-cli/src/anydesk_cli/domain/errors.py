"""Controller error value objects.

A failed controller call produces exactly one ControllerError. Successful
calls produce none.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kind of failure reported by the AnyDesk controller.

    Attributes:
        BINARY_NOT_FOUND: The executable could not be located.
        PROCESS_LAUNCH_FAILED: The executable was found but could not start.
        KNOWN_EXIT_CODE: The process exited with a documented vendor code.
        SERVICE_NOT_RUNNING: An info query reported the service is down.
        UNRECOGNIZED_FAILURE: Nonzero exit code absent from the vendor table.
    """

    BINARY_NOT_FOUND = "binary_not_found"
    PROCESS_LAUNCH_FAILED = "process_launch_failed"
    KNOWN_EXIT_CODE = "known_exit_code"
    SERVICE_NOT_RUNNING = "service_not_running"
    UNRECOGNIZED_FAILURE = "unrecognized_failure"


@dataclass(frozen=True)
class ControllerError:
    """Structured error returned by a failed controller call.

    Attributes:
        kind: The failure kind.
        message: Human-readable description.
        exit_code: Raw process exit code, when the process ran to completion.
    """

    kind: ErrorKind
    message: str
    exit_code: int | None = None

    @classmethod
    def binary_not_found(cls, name: str) -> ControllerError:
        """Create a BINARY_NOT_FOUND error naming the executable."""
        return cls(
            kind=ErrorKind.BINARY_NOT_FOUND,
            message=f"exec: {name!r}: executable file not found in search path",
        )

    @classmethod
    def process_launch_failed(cls, reason: str) -> ControllerError:
        """Create a PROCESS_LAUNCH_FAILED error."""
        return cls(kind=ErrorKind.PROCESS_LAUNCH_FAILED, message=reason)

    @classmethod
    def known_exit_code(cls, exit_code: int, description: str) -> ControllerError:
        """Create a KNOWN_EXIT_CODE error carrying the vendor description."""
        return cls(
            kind=ErrorKind.KNOWN_EXIT_CODE,
            message=description,
            exit_code=exit_code,
        )

    @classmethod
    def service_not_running(cls, exit_code: int | None = None) -> ControllerError:
        """Create a SERVICE_NOT_RUNNING error."""
        return cls(
            kind=ErrorKind.SERVICE_NOT_RUNNING,
            message="service not running",
            exit_code=exit_code,
        )

    @classmethod
    def unrecognized_failure(cls, exit_code: int) -> ControllerError:
        """Create an UNRECOGNIZED_FAILURE error for a raw exit code."""
        return cls(
            kind=ErrorKind.UNRECOGNIZED_FAILURE,
            message=f"exit status {exit_code}",
            exit_code=exit_code,
        )

    @property
    def description(self) -> str | None:
        """Vendor description for KNOWN_EXIT_CODE errors, None otherwise."""
        if self.kind is ErrorKind.KNOWN_EXIT_CODE:
            return self.message
        return None

    def __str__(self) -> str:
        return self.message
