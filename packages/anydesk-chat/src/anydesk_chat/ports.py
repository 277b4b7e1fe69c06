"""Port interfaces for the AnyDesk chat integration.

The host chat client (e.g. a voice chat plugin API) implements these to
receive the messages produced by the link announcer and the command
dispatcher.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageSinkPort(Protocol):
    """Port interface for delivering messages to the chat host.

    Contract:
        - print_to_current_tab() shows a local-only message in the active tab
        - print_message() shows a local-only message for a server connection
        - send_channel_text() sends a message visible to the whole channel
        - Implementations must be callable from worker threads
    """

    def print_to_current_tab(self, text: str) -> None:
        """Show a local message in the currently active tab."""
        ...

    def print_message(self, connection_id: int, text: str) -> None:
        """Show a local message in a server connection's tab."""
        ...

    def send_channel_text(self, connection_id: int, text: str) -> None:
        """Send a text message to the current channel of a connection."""
        ...
