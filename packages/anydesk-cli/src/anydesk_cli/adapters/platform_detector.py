"""Platform detector adapter for detecting the current OS.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform

from anydesk_cli.domain.binary import OperatingSystem, Platform
from anydesk_cli.domain.exceptions import AnyDeskConfigError


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by querying platform.system().

    Supported platforms: windows, linux, darwin.
    """

    # Mapping from platform.system() values to our normalized OS names
    _OS_MAP: dict[str, OperatingSystem] = {
        "windows": "windows",
        "linux": "linux",
        "darwin": "darwin",
    }

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object.

        Raises:
            AnyDeskConfigError: If the current OS is not supported.
        """
        system = platform.system().lower()
        if system not in self._OS_MAP:
            raise AnyDeskConfigError(
                f"Unsupported operating system: {platform.system()!r}. "
                f"Supported: windows, linux, darwin"
            )
        return Platform(os=self._OS_MAP[system])
