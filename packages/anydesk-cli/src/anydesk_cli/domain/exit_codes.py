"""AnyDesk vendor exit codes.

See https://support.anydesk.com/Exit_Codes. Codes in the 0xAD1000 range are
reported by the installer while cleaning up an older installation; the 9xxx
range covers generic runtime failures.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

EXIT_CODE_DESCRIPTIONS: Mapping[int, str] = MappingProxyType(
    {
        1000: "AnyDesk could not run at all because ntdll was not found.",
        1001: "AnyDesk could not run because kernel32 was not found.",
        7000: "Path initialization failed. See windows event log for details.",
        7001: "Signature check failed.",
        7002: "Unrecognized command line parameter.",
        7003: "Could not start process (already started).",
        8000: "The requested operation requires elevation (start as admin).",
        9000: "Generic exception occured in application. See trace.",
        9001: "The process terminated itself because of a severe error condition. See trace.",
        9002: "The process encountered a system exception. Please contact support.",
        9004: "Error while writing the requested information to stdout.",
        9005: "Error while reading required information from stdin.",
        9006: "The password to be set is too short.",
        9007: "Error while registering licence. See trace for for information.",
        9010: "Could not perform the requested operation because the AnyDesk service was not running.",
        # Legacy installation cleanup
        0xAD1000: "Could not remove an older client's executable.",
        0xAD1001: "Could not stop an older client's service.",
        0xAD1002: "Could not terminate an older client's processes.",
        0xAD1003: "Could not install the service. May happen in case a Windows Control Panel is open.",
        0xAD1004: "An unexpected error occurred.",
        0xAD1005: "Received invalid installation parameters.",
        0xAD1006: "Could not install custom client (installation set to disallowed). ",
    }
)
