"""Chat command dispatcher for AnyDesk.

Maps keyword-prefixed chat commands (``/anydesk invite pw``) to
AnyDeskController operations and relays results to the chat host.

Commands:
    invite [id] [password|pass|pwd|pw]
        Post this client's alias (or ID) to the channel, optionally after
        setting a fresh random session password. Runs on the executor.
    unshare | uninvite | remove-password
        Remove the session password.
    version
        Print the installed AnyDesk version.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Sequence

from anydesk_chat.password_generator import PasswordGenerator
from anydesk_chat.ports import MessageSinkPort
from anydesk_cli.domain.errors import ErrorKind
from anydesk_cli.usecases.controller import AnyDeskController

logger = logging.getLogger(__name__)

COMMAND_KEYWORD = "anydesk"

INVITE_COMMANDS = frozenset(["invite"])
UNSHARE_COMMANDS = frozenset(["unshare", "uninvite", "remove-password"])
VERSION_COMMANDS = frozenset(["version"])

ID_FLAG = "id"
PASSWORD_FLAGS = frozenset(["password", "pass", "pwd", "pw"])

ONLINE_STATUS = "online"


@dataclass(frozen=True)
class InviteRequest:
    """Options of an invite command.

    Attributes:
        force_id: Share the numeric ID even if an alias is set.
        with_password: Set and share a random session password.
    """

    force_id: bool = False
    with_password: bool = False

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> InviteRequest:
        """Build a request from command tokens. Unknown tokens are ignored."""
        return cls(
            force_id=ID_FLAG in tokens,
            with_password=any(token in PASSWORD_FLAGS for token in tokens),
        )


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching a command line.

    Attributes:
        handled: Whether the command was recognized.
        task: Future of the background invite task, if one was started.
    """

    handled: bool
    task: Future[None] | None = None


class CommandDispatcher:
    """Dispatches chat commands to the AnyDesk controller.

    The invite command queries AnyDesk several times and may take seconds,
    so it is submitted to the executor and the dispatcher returns
    immediately. Within the task the order is: status check, alias/ID
    lookup, password generation, password change, channel message.
    """

    def __init__(
        self,
        controller: AnyDeskController,
        sink: MessageSinkPort,
        executor: Executor,
        password_generator: PasswordGenerator | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            controller: AnyDesk controller.
            sink: Port for messages to the chat host.
            executor: Executor running invite tasks.
            password_generator: Generator for session passwords.
        """
        self._controller = controller
        self._sink = sink
        self._executor = executor
        self._password_generator = password_generator or PasswordGenerator()

    def dispatch(self, connection_id: int, command_line: str) -> DispatchResult:
        """Dispatch a command line (without the keyword).

        Args:
            connection_id: Server connection the command was issued on.
            command_line: Command followed by space-separated flags.

        Returns:
            DispatchResult; handled is False for empty or unknown commands.
        """
        tokens = command_line.split()
        if not tokens:
            return DispatchResult(handled=False)

        command = tokens[0].lower()
        logger.debug(f"Dispatching AnyDesk command {command!r}")

        if command in INVITE_COMMANDS:
            request = InviteRequest.from_tokens(tokens)
            task = self._executor.submit(self.invite, connection_id, request)
            return DispatchResult(handled=True, task=task)

        if command in UNSHARE_COMMANDS:
            self.unshare()
            return DispatchResult(handled=True)

        if command in VERSION_COMMANDS:
            self.version(connection_id)
            return DispatchResult(handled=True)

        return DispatchResult(handled=False)

    def invite(self, connection_id: int, request: InviteRequest) -> None:
        """Share this client's AnyDesk address with the channel.

        Runs synchronously; dispatch() calls it on the executor.
        """
        self._sink.print_to_current_tab(
            "Now asking AnyDesk for information, that may take a few seconds…"
        )

        status = self._controller.get_status()
        if status.error is not None:
            if status.error.kind is ErrorKind.SERVICE_NOT_RUNNING:
                self._sink.print_to_current_tab("AnyDesk is currently not running.")
            else:
                self._sink.print_to_current_tab(
                    "AnyDesk failed while checking whether you're online. "
                    "Make sure AnyDesk is running properly. "
                    f"Error was: {status.error}"
                )
            return

        if status.output != ONLINE_STATUS:
            self._sink.print_to_current_tab(
                f"AnyDesk says you are {status.output}. "
                "Make sure AnyDesk is running properly."
            )
            return

        ref = ""
        if not request.force_id:
            alias = self._controller.get_alias()
            if alias.error is not None:
                self._report_missing_reference(connection_id, str(alias.error))
                return
            ref = alias.output or ""

        if not ref:
            client_id = self._controller.get_id()
            if client_id.error is not None:
                self._report_missing_reference(connection_id, str(client_id.error))
                return
            ref = client_id.output or ""

        invite_text = f"[B]AnyDesk:[/B]\n{ref}"

        if request.with_password:
            password = self._password_generator.generate()
            changed = self._controller.set_password(password)
            if changed.error is not None:
                self._sink.print_to_current_tab(
                    f"Could not set a password for the session, error was: {changed.error}"
                )
                return
            self._sink.print_to_current_tab(f"Your password has been changed to: {password}")
            invite_text += f"\nPassword: {password}"

        self._sink.send_channel_text(connection_id, invite_text)

    def unshare(self) -> None:
        """Remove the session password."""
        self._sink.print_to_current_tab("Removing AnyDesk password…")
        result = self._controller.remove_password()
        if result.error is not None:
            self._sink.print_to_current_tab(
                f"Could not remove AnyDesk password, error was: {result.error}"
            )
            return
        self._sink.print_to_current_tab("AnyDesk password has been removed.")

    def version(self, connection_id: int) -> None:
        """Print the installed AnyDesk version."""
        result = self._controller.version()
        if result.error is not None:
            self._sink.print_to_current_tab(
                f"Could not get the AnyDesk version, error was: {result.error}"
            )
            return
        self._sink.print_message(connection_id, result.output or "")

    def _report_missing_reference(self, connection_id: int, error: str) -> None:
        self._sink.print_message(
            connection_id,
            "Can't get an alias or ID for your client. "
            f"Make sure AnyDesk is running properly. Error was: {error}",
        )
