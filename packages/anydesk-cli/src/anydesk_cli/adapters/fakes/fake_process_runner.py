"""Fake process runner for testing.

Provides a test double for ProcessRunnerPort that returns preconfigured
results without starting processes.
"""

from __future__ import annotations

from dataclasses import dataclass

from anydesk_cli.domain.invocation import Invocation
from anydesk_cli.domain.results import InvocationResult


@dataclass(frozen=True)
class ProcessCall:
    """Record of a single run() call.

    Attributes:
        executable: Executable passed to run().
        invocation: Invocation passed to run().
    """

    executable: str
    invocation: Invocation

    @property
    def args(self) -> tuple[str, ...]:
        """Arguments of the recorded invocation."""
        return self.invocation.args

    @property
    def stdin(self) -> str | None:
        """Stdin payload of the recorded invocation."""
        return self.invocation.stdin


class FakeProcessRunner:
    """Fake implementation of ProcessRunnerPort for testing.

    Returns queued results in order; once the queue is exhausted the
    default result is returned. Records every call.

    Example:
        >>> fake = FakeProcessRunner(InvocationResult.completed(0, b"online\\n"))
        >>> fake.run("anydesk", Invocation(args=("--get-status",))).exit_code
        0
        >>> fake.calls[0].args
        ('--get-status',)
    """

    def __init__(self, default: InvocationResult | None = None) -> None:
        """Initialize with the result returned when nothing is queued.

        Args:
            default: Result returned when the queue is empty. Defaults to a
                successful run with empty stdout.
        """
        self._default = default or InvocationResult.completed(0)
        self._queue: list[InvocationResult] = []
        self._calls: list[ProcessCall] = []

    @property
    def calls(self) -> list[ProcessCall]:
        """Return a copy of the recorded calls, in order."""
        return list(self._calls)

    def set_default(self, result: InvocationResult) -> None:
        """Replace the result returned when the queue is empty."""
        self._default = result

    def queue(self, *results: InvocationResult) -> None:
        """Queue results to be returned by subsequent run() calls."""
        self._queue.extend(results)

    def complete(self, exit_code: int, stdout: bytes | str = b"") -> None:
        """Queue a completed run with the given exit code and stdout."""
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        self.queue(InvocationResult.completed(exit_code=exit_code, stdout=stdout))

    def run(self, executable: str, invocation: Invocation) -> InvocationResult:
        """Record the call and return the next queued result."""
        self._calls.append(ProcessCall(executable=executable, invocation=invocation))
        if self._queue:
            return self._queue.pop(0)
        return self._default
