"""Result value objects for AnyDesk invocations and controller calls."""

from __future__ import annotations

from dataclasses import dataclass

from anydesk_cli.domain.errors import ControllerError
from anydesk_cli.domain.exceptions import AnyDeskCommandError


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of running the AnyDesk executable once.

    Transient value object produced by a ProcessRunnerPort.

    Attributes:
        stdout: Captured standard output.
        exit_code: Process exit code, or None if the process never started.
        launch_error: Reason the process could not be started, or None.
    """

    stdout: bytes
    exit_code: int | None
    launch_error: str | None = None

    @classmethod
    def completed(cls, exit_code: int, stdout: bytes = b"") -> InvocationResult:
        """Create a result for a process that ran to completion."""
        return cls(stdout=stdout, exit_code=exit_code)

    @classmethod
    def launch_failed(cls, reason: str) -> InvocationResult:
        """Create a result for a process that could not be started."""
        return cls(stdout=b"", exit_code=None, launch_error=reason)

    @property
    def succeeded(self) -> bool:
        """True if the process started and exited with status 0."""
        return self.launch_error is None and self.exit_code == 0

    @property
    def text(self) -> str:
        """Captured stdout decoded as UTF-8."""
        return self.stdout.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CommandResult:
    """Result of a controller call.

    Exactly one of output/error describes the outcome: successful calls
    carry no error (output is the trimmed stdout for read-only queries and
    None for mutating operations), failed calls carry a ControllerError.

    Attributes:
        output: Trimmed stdout of a successful info query, or None.
        error: ControllerError for a failed call, or None.
    """

    output: str | None
    error: ControllerError | None

    @classmethod
    def create_success(cls, output: str | None = None) -> CommandResult:
        """Create a successful result.

        Args:
            output: Trimmed stdout for info queries, None otherwise.

        Returns:
            CommandResult with no error.
        """
        return cls(output=output, error=None)

    @classmethod
    def create_failure(cls, error: ControllerError) -> CommandResult:
        """Create a failed result.

        Args:
            error: The error describing the failure.

        Returns:
            CommandResult with the error and no output.
        """
        return cls(output=None, error=error)

    @property
    def ok(self) -> bool:
        """True if the call succeeded."""
        return self.error is None

    def unwrap(self) -> str | None:
        """Return the output, or raise if the call failed.

        Raises:
            AnyDeskCommandError: If the result carries an error.
        """
        if self.error is not None:
            raise AnyDeskCommandError(self.error)
        return self.output
