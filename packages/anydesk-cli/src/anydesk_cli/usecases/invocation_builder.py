"""Invocation builder use case.

Builds the argument vector and stdin payload for each AnyDesk CLI
operation.
"""

from __future__ import annotations

from anydesk_cli.domain.exceptions import AnyDeskConfigError
from anydesk_cli.domain.invocation import (
    FILE_TRANSFER_FLAG,
    FULLSCREEN_FLAG,
    PLAIN_FLAG,
    REMOVE_PASSWORD_FLAG,
    SET_PASSWORD_FLAG,
    WITH_PASSWORD_FLAG,
    ConnectOptions,
    InfoQuery,
    Invocation,
)


class InvocationBuilder:
    """Builds Invocations for AnyDesk CLI operations.

    Connect option flags are always appended in the same order
    (--with-password, --fullscreen, --file-transfer, --plain), which
    AnyDesk's argument parser relies on.
    """

    def set_password(self, password: str) -> Invocation:
        """Build the invocation that sets the unattended access password.

        The password is written to stdin verbatim.
        """
        return Invocation(args=(SET_PASSWORD_FLAG,), stdin=password)

    def remove_password(self) -> Invocation:
        """Build the invocation that removes the unattended access password."""
        return Invocation(args=(REMOVE_PASSWORD_FLAG,))

    def connect(self, ref: str, options: ConnectOptions | None = None) -> Invocation:
        """Build the invocation that connects to a remote client.

        Args:
            ref: Alias or numeric ID of the remote client.
            options: Connect options, or None for a plain connect.

        Returns:
            Invocation with the reference followed by option flags. Stdin
            carries the password when one is set.

        Raises:
            AnyDeskConfigError: If ref is empty or contains a NUL character.
        """
        if not ref or not ref.strip():
            raise AnyDeskConfigError("connect reference cannot be empty")

        if "\0" in ref:
            raise AnyDeskConfigError("connect reference cannot contain NUL characters")

        if options is None:
            return Invocation(args=(ref,))

        args = [ref]
        stdin = None
        if options.password:
            args.append(WITH_PASSWORD_FLAG)
            stdin = options.password
        if options.fullscreen:
            args.append(FULLSCREEN_FLAG)
        if options.file_transfer:
            args.append(FILE_TRANSFER_FLAG)
        if options.plain:
            args.append(PLAIN_FLAG)

        return Invocation(args=tuple(args), stdin=stdin)

    def info(self, query: InfoQuery) -> Invocation:
        """Build the invocation for a read-only information query."""
        return Invocation(args=(query.flag,))
