"""Port interfaces for the AnyDesk core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from anydesk_cli.domain.binary import Platform
    from anydesk_cli.domain.invocation import Invocation
    from anydesk_cli.domain.results import InvocationResult


@runtime_checkable
class FileCheckerPort(Protocol):
    """Port interface for file system checks during binary lookup.

    Contract:
        - is_executable_file(path) returns True only for an existing regular
          file the current user may execute
        - Never raises for missing or inaccessible paths
    """

    def is_executable_file(self, path: Path) -> bool:
        """Check whether path is an executable regular file.

        Args:
            path: Candidate path.

        Returns:
            True if the file exists, is a regular file and is executable.
        """
        ...


@runtime_checkable
class ProcessRunnerPort(Protocol):
    """Port interface for running the AnyDesk executable.

    Contract:
        - run() blocks until the process exits
        - Standard output is captured and returned as bytes
        - Standard error is forwarded to the caller's stderr
        - Launch failures are returned as InvocationResult.launch_failed(),
          never raised
    """

    def run(self, executable: str, invocation: Invocation) -> InvocationResult:
        """Run the executable with the invocation's arguments and stdin.

        Args:
            executable: Path or name of the executable.
            invocation: Arguments and stdin payload.

        Returns:
            InvocationResult with captured stdout and exit status.
        """
        ...


@runtime_checkable
class WindowVisibilityPort(Protocol):
    """Port interface for suppressing console windows of child processes.

    Implementations return keyword arguments merged into the subprocess
    call. Platforms without the concept return an empty mapping.
    """

    def popen_options(self) -> dict[str, Any]:
        """Return extra keyword arguments for subprocess.

        Returns:
            Mapping of subprocess keyword arguments (may be empty).
        """
        ...


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the current platform.

    Contract:
        - detect() returns the Platform the process runs on
        - May raise AnyDeskConfigError for unsupported platforms
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object.
        """
        ...
