"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
the actual operating system.
"""

from __future__ import annotations

from anydesk_cli.domain.binary import OperatingSystem, Platform


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector(Platform(os="linux"))
        >>> fake.detect()
        Platform(os='linux')

        >>> FakePlatformDetector.for_os("windows").detect()
        Platform(os='windows')
    """

    def __init__(self, platform: Platform) -> None:
        """Initialize with the platform to return.

        Args:
            platform: The Platform value object to return from detect().
        """
        self._platform = platform

    @classmethod
    def for_os(cls, os: OperatingSystem) -> FakePlatformDetector:
        """Create a FakePlatformDetector from an OS name."""
        return cls(Platform(os=os))

    def detect(self) -> Platform:
        """Return the configured platform."""
        return self._platform
