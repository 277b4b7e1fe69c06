"""Exit code interpreter use case."""

from __future__ import annotations

from typing import Mapping

from anydesk_cli.domain.exit_codes import EXIT_CODE_DESCRIPTIONS


class ExitCodeInterpreter:
    """Translates AnyDesk exit codes into vendor error descriptions.

    Lookups are pure: documented codes map to their fixed description,
    0 and undocumented codes map to None.
    """

    def __init__(self, descriptions: Mapping[int, str] = EXIT_CODE_DESCRIPTIONS) -> None:
        self._descriptions = descriptions

    def interpret(self, exit_code: int) -> str | None:
        """Return the description for an exit code.

        Args:
            exit_code: Process exit code.

        Returns:
            The vendor description, or None if the code is 0 or undocumented.
        """
        if exit_code == 0:
            return None
        return self._descriptions.get(exit_code)
