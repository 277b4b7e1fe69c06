"""Interface adapters: filesystem lookup and subprocess execution."""

from anydesk_cli.adapters.ports import (
    FileCheckerPort,
    PlatformDetectorPort,
    ProcessRunnerPort,
    WindowVisibilityPort,
)
from anydesk_cli.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from anydesk_cli.adapters.os_file_checker import OsFileChecker
from anydesk_cli.adapters.platform_detector import OsPlatformDetector
from anydesk_cli.adapters.subprocess_runner import SubprocessProcessRunner
from anydesk_cli.adapters.window_visibility import (
    HiddenWindowVisibility,
    NoOpWindowVisibility,
)

__all__ = [
    "FileCheckerPort",
    "PlatformDetectorPort",
    "ProcessRunnerPort",
    "WindowVisibilityPort",
    "MetricsPort",
    "NoOpMetricsAdapter",
    "OsFileChecker",
    "OsPlatformDetector",
    "SubprocessProcessRunner",
    "HiddenWindowVisibility",
    "NoOpWindowVisibility",
]
