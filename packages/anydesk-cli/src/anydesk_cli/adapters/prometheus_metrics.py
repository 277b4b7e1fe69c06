"""Prometheus metrics adapter for AnyDesk.

Implements MetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    Creates and manages Prometheus counters for AnyDesk invocations.
    All counters use a configurable prefix (default 'anydesk_').

    This adapter requires prometheus-client to be installed:
        pip install anydesk-py[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(prefix="myapp_anydesk")
        >>> adapter.record_invocation("get_status")
        >>> adapter.record_failure("get_status", "service_not_running")

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "anydesk",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus counters.

        Args:
            prefix: Metric name prefix. Defaults to "anydesk".
            registry: Registry to register counters with. Defaults to the
                global prometheus_client registry.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Counter

        if registry is None:
            registry = REGISTRY

        self._invocations: Counter = Counter(
            f"{prefix}_invocations",
            "Number of AnyDesk executable invocations",
            ["operation"],
            registry=registry,
        )
        self._failures: Counter = Counter(
            f"{prefix}_failures",
            "Number of failed AnyDesk operations",
            ["operation", "kind"],
            registry=registry,
        )

    def record_invocation(self, operation: str) -> None:
        """Increment the invocation counter for an operation."""
        self._invocations.labels(operation=operation).inc()

    def record_failure(self, operation: str, kind: str) -> None:
        """Increment the failure counter for an operation and error kind."""
        self._failures.labels(operation=operation, kind=kind).inc()
