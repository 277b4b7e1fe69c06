"""Window visibility adapters.

Implementations of WindowVisibilityPort. AnyDesk is a GUI application; on
Windows, launching it from a console-less host would otherwise flash a
console window for every CLI call.
"""

from __future__ import annotations

import subprocess
from typing import Any


class NoOpWindowVisibility:
    """WindowVisibilityPort for platforms without console windows."""

    def popen_options(self) -> dict[str, Any]:
        """Return no extra subprocess options."""
        return {}


class HiddenWindowVisibility:
    """WindowVisibilityPort that hides the child's window on Windows.

    Sets STARTF_USESHOWWINDOW with SW_HIDE on the startup info and requests
    CREATE_NO_WINDOW. Must only be used on Windows; the required subprocess
    attributes do not exist elsewhere.
    """

    def popen_options(self) -> dict[str, Any]:
        """Return startupinfo and creationflags that hide the window.

        Returns:
            Mapping with 'startupinfo' and 'creationflags'.
        """
        startupinfo = subprocess.STARTUPINFO()  # type: ignore[attr-defined]
        startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW  # type: ignore[attr-defined]
        startupinfo.wShowWindow = subprocess.SW_HIDE  # type: ignore[attr-defined]
        return {
            "startupinfo": startupinfo,
            "creationflags": subprocess.CREATE_NO_WINDOW,  # type: ignore[attr-defined]
        }
