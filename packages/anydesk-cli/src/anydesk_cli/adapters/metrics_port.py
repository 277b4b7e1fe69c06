"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Implementations handle metrics recording to various backends
    (Prometheus, StatsD, etc.).

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - operation is the controller operation name (e.g. "get_status")
        - kind is an ErrorKind value (e.g. "service_not_running")
        - Thread safety is implementation-defined
    """

    def record_invocation(self, operation: str) -> None:
        """Record that an operation invoked the AnyDesk executable.

        Args:
            operation: Controller operation name.
        """
        ...

    def record_failure(self, operation: str, kind: str) -> None:
        """Record that an operation failed.

        Args:
            operation: Controller operation name.
            kind: ErrorKind value of the failure.
        """
        ...


class NoOpMetricsAdapter:
    """No-op implementation of MetricsPort.

    Used as the default when metrics are disabled or not configured.
    """

    def record_invocation(self, operation: str) -> None:
        """No-op."""
        pass

    def record_failure(self, operation: str, kind: str) -> None:
        """No-op."""
        pass
