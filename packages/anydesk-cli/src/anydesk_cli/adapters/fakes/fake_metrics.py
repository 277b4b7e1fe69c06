"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        labels: Label values, in declaration order.
    """

    metric_name: str
    labels: tuple[str, ...]


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_invocation("version")
        >>> fake.calls
        [MetricCall(metric_name='invocations', labels=('version',))]
    """

    def __init__(self) -> None:
        """Initialize with no recorded calls."""
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all recorded calls, in order."""
        return list(self._calls)

    def invocation_count(self, operation: str) -> int:
        """Return how many invocations were recorded for an operation."""
        return sum(
            1
            for call in self._calls
            if call.metric_name == "invocations" and call.labels == (operation,)
        )

    def failures(self) -> list[tuple[str, str]]:
        """Return (operation, kind) pairs of recorded failures."""
        return [
            (call.labels[0], call.labels[1])
            for call in self._calls
            if call.metric_name == "failures"
        ]

    def record_invocation(self, operation: str) -> None:
        """Record an invocation."""
        self._calls.append(MetricCall(metric_name="invocations", labels=(operation,)))

    def record_failure(self, operation: str, kind: str) -> None:
        """Record a failure."""
        self._calls.append(MetricCall(metric_name="failures", labels=(operation, kind)))
