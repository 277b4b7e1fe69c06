"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from anydesk_cli.adapters.fakes.fake_file_checker import FakeFileChecker
from anydesk_cli.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall
from anydesk_cli.adapters.fakes.fake_platform_detector import FakePlatformDetector
from anydesk_cli.adapters.fakes.fake_process_runner import FakeProcessRunner, ProcessCall

__all__ = [
    "FakeFileChecker",
    "FakeMetricsAdapter",
    "MetricCall",
    "FakePlatformDetector",
    "FakeProcessRunner",
    "ProcessCall",
]
