"""Subprocess process runner adapter.

Implements ProcessRunnerPort by running the AnyDesk executable with
subprocess.run, capturing stdout and forwarding stderr.
"""

from __future__ import annotations

import logging
import subprocess
from typing import IO, Any

from anydesk_cli.adapters.ports import WindowVisibilityPort
from anydesk_cli.adapters.window_visibility import NoOpWindowVisibility
from anydesk_cli.domain.invocation import Invocation
from anydesk_cli.domain.results import InvocationResult

logger = logging.getLogger(__name__)


class SubprocessProcessRunner:
    """Adapter that runs the AnyDesk executable in a child process.

    Blocks until the child exits. There is no timeout: a hung AnyDesk
    process blocks the calling thread.

    Stdin is the invocation's payload when one is set and the null device
    otherwise, so the child never reads from the host's terminal.
    """

    def __init__(
        self,
        visibility: WindowVisibilityPort | None = None,
        stderr: IO[Any] | int | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            visibility: Window visibility capability. Defaults to no-op.
            stderr: Where the child's stderr goes. None inherits the
                parent's stderr.
        """
        self._visibility = visibility or NoOpWindowVisibility()
        self._stderr = stderr

    def run(self, executable: str, invocation: Invocation) -> InvocationResult:
        """Run the executable and wait for it to exit.

        Args:
            executable: Path or name of the executable.
            invocation: Arguments and stdin payload.

        Returns:
            InvocationResult with the captured stdout and exit code, or a
            launch failure if the process could not be started.
        """
        argv = [executable, *invocation.args]
        kwargs: dict[str, Any] = dict(self._visibility.popen_options())

        if invocation.stdin is None:
            kwargs["stdin"] = subprocess.DEVNULL
        else:
            kwargs["input"] = invocation.stdin.encode("utf-8")

        logger.debug(f"Running {argv}")

        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=self._stderr,
                check=False,
                **kwargs,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to start {executable}: {e}")
            return InvocationResult.launch_failed(str(e))

        logger.debug(f"{executable} exited with status {completed.returncode}")
        return InvocationResult.completed(
            exit_code=completed.returncode,
            stdout=completed.stdout or b"",
        )
