"""Unit tests for platform-dependent adapters."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from anydesk_cli.adapters.os_file_checker import OsFileChecker
from anydesk_cli.adapters.platform_detector import OsPlatformDetector
from anydesk_cli.adapters.ports import (
    FileCheckerPort,
    PlatformDetectorPort,
    WindowVisibilityPort,
)
from anydesk_cli.adapters.window_visibility import (
    HiddenWindowVisibility,
    NoOpWindowVisibility,
)
from anydesk_cli.domain.binary import Platform
from anydesk_cli.domain.exceptions import AnyDeskConfigError


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.OsPlatformDetector")
class TestOsPlatformDetector:
    """Test OsPlatformDetector."""

    def test_satisfies_protocol(self) -> None:
        """OsPlatformDetector satisfies PlatformDetectorPort."""
        assert isinstance(OsPlatformDetector(), PlatformDetectorPort)

    @pytest.mark.parametrize(
        "system,expected",
        [("Windows", "windows"), ("Linux", "linux"), ("Darwin", "darwin")],
    )
    def test_detects_supported_systems(self, system: str, expected: str) -> None:
        """platform.system() values are normalized."""
        with patch("anydesk_cli.adapters.platform_detector.platform.system", return_value=system):
            assert OsPlatformDetector().detect() == Platform(os=expected)  # type: ignore[arg-type]

    def test_unsupported_system(self) -> None:
        """Unsupported systems raise AnyDeskConfigError."""
        with patch("anydesk_cli.adapters.platform_detector.platform.system", return_value="SunOS"):
            with pytest.raises(AnyDeskConfigError, match="Unsupported operating system"):
                OsPlatformDetector().detect()


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.OsFileChecker")
class TestOsFileChecker:
    """Test OsFileChecker."""

    def test_satisfies_protocol(self) -> None:
        """OsFileChecker satisfies FileCheckerPort."""
        assert isinstance(OsFileChecker(), FileCheckerPort)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files are not executable."""
        assert OsFileChecker().is_executable_file(tmp_path / "missing") is False

    def test_directory(self, tmp_path: Path) -> None:
        """Directories are never executables, even with the x bit."""
        assert OsFileChecker().is_executable_file(tmp_path) is False

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    def test_executable_file(self, tmp_path: Path) -> None:
        """Files with execute permission qualify."""
        binary = tmp_path / "anydesk"
        binary.write_text("#!/bin/sh\n")
        binary.chmod(0o755)
        assert OsFileChecker().is_executable_file(binary) is True

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    def test_non_executable_file(self, tmp_path: Path) -> None:
        """Files without any execute bit do not qualify."""
        binary = tmp_path / "anydesk"
        binary.write_text("data")
        binary.chmod(0o644)
        assert OsFileChecker().is_executable_file(binary) is False


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.WindowVisibility")
class TestWindowVisibility:
    """Test window visibility capabilities."""

    def test_noop_satisfies_protocol(self) -> None:
        """NoOpWindowVisibility satisfies WindowVisibilityPort."""
        assert isinstance(NoOpWindowVisibility(), WindowVisibilityPort)

    def test_noop_returns_no_options(self) -> None:
        """The no-op capability adds nothing to subprocess calls."""
        assert NoOpWindowVisibility().popen_options() == {}

    def test_hidden_satisfies_protocol(self) -> None:
        """HiddenWindowVisibility satisfies WindowVisibilityPort."""
        assert isinstance(HiddenWindowVisibility(), WindowVisibilityPort)

    @pytest.mark.skipif(sys.platform != "win32", reason="Windows-only subprocess attributes")
    def test_hidden_sets_startupinfo(self) -> None:
        """The Windows capability hides the window."""
        options = HiddenWindowVisibility().popen_options()

        startupinfo = options["startupinfo"]
        assert startupinfo.dwFlags & subprocess.STARTF_USESHOWWINDOW
        assert startupinfo.wShowWindow == subprocess.SW_HIDE
        assert options["creationflags"] == subprocess.CREATE_NO_WINDOW
