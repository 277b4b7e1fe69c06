"""Factory functions for creating AnyDesk controllers.

Wires the controller with the adapters matching the current platform:
Windows gets the .exe suffix, the program files search directory and a
hidden console window; other platforms search PATH only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from anydesk_cli.adapters.metrics_port import MetricsPort
from anydesk_cli.adapters.platform_detector import OsPlatformDetector
from anydesk_cli.adapters.ports import PlatformDetectorPort, WindowVisibilityPort
from anydesk_cli.adapters.subprocess_runner import SubprocessProcessRunner
from anydesk_cli.adapters.window_visibility import (
    HiddenWindowVisibility,
    NoOpWindowVisibility,
)
from anydesk_cli.domain.binary import Platform
from anydesk_cli.domain.settings import AnyDeskSettings
from anydesk_cli.usecases.controller import AnyDeskController
from anydesk_cli.usecases.settings_parser import SettingsParser


def create_window_visibility(platform: Platform) -> WindowVisibilityPort:
    """Return the window visibility capability for a platform."""
    if platform.is_windows:
        return HiddenWindowVisibility()
    return NoOpWindowVisibility()


def create_controller(
    binary_path: str | None = None,
    settings_file: Path | None = None,
    platform_detector: PlatformDetectorPort | None = None,
    metrics: MetricsPort | None = None,
    environ: Mapping[str, str] | None = None,
) -> AnyDeskController:
    """Create an AnyDeskController for the current platform.

    Args:
        binary_path: Explicit executable path. Overrides the settings file.
        settings_file: Optional YAML settings file (see SettingsParser).
        platform_detector: Port for platform detection. Defaults to
            OsPlatformDetector.
        metrics: Optional metrics port.
        environ: Environment for platform defaults and the PATH search.

    Returns:
        A controller wired with platform settings and a subprocess runner.

    Raises:
        AnyDeskConfigError: If the platform is unsupported or the settings
            file is invalid.

    Example:
        >>> controller = create_controller()
        >>> result = controller.get_status()
        >>> result.output if result.ok else result.error.kind
        'online'
    """
    platform = (platform_detector or OsPlatformDetector()).detect()

    if settings_file is not None:
        settings = SettingsParser(platform, environ).parse_file(settings_file)
    else:
        settings = AnyDeskSettings.for_platform(platform, environ)

    if binary_path:
        settings = AnyDeskSettings(
            binary_name=settings.binary_name,
            search_dirs=settings.search_dirs,
            binary_path=binary_path,
        )

    runner = SubprocessProcessRunner(visibility=create_window_visibility(platform))
    return AnyDeskController(
        settings=settings,
        process_runner=runner,
        metrics=metrics,
        environ=environ,
    )
