"""Service status interpreter for AnyDesk info query output."""

from __future__ import annotations

SERVICE_NOT_RUNNING_SENTINEL = "SERVICE_NOT_RUNNING"


class ServiceStatusInterpreter:
    """Detects the "service not running" sentinel in info query output.

    Only meaningful for --get-alias, --get-id, --get-status and --version.
    When the AnyDesk service is down these print SERVICE_NOT_RUNNING and
    exit with a nonzero status.
    """

    def interpret_info_output(self, stdout: bytes) -> bool:
        """Check captured stdout for the sentinel.

        Args:
            stdout: Captured standard output of a failed info query.

        Returns:
            True if the trimmed output equals the sentinel exactly.
        """
        text = stdout.decode("utf-8", errors="replace")
        return text.strip() == SERVICE_NOT_RUNNING_SENTINEL
