"""AnyDesk session reference extraction from chat messages."""

from __future__ import annotations

import logging
import re

from anydesk_chat.ports import MessageSinkPort

logger = logging.getLogger(__name__)

# 9-10 ASCII digit IDs, or aliases such as "name@ad" and "name@ad/namespace"
SESSION_REFERENCE_PATTERN = re.compile(
    r"\b(\d{9,10}|[a-z0-9.\-_]+@ad(/[a-z0-9/.\-_]+)?)\b",
    re.IGNORECASE | re.ASCII,
)


class LinkExtractor:
    """Finds AnyDesk IDs and aliases in free text and turns them into links."""

    def find_references(self, message: str) -> list[str]:
        """Return all session references in a message, in order of appearance."""
        return [match.group(0) for match in SESSION_REFERENCE_PATTERN.finditer(message)]

    def format_link(self, ref: str) -> str:
        """Format a reference as a BBCode link using the anydesk: URL scheme."""
        return f"[URL=anydesk:{ref}]Open {ref} in AnyDesk[/URL]"

    def links(self, message: str) -> list[str]:
        """Return a formatted link for every reference in a message."""
        return [self.format_link(ref) for ref in self.find_references(message)]


class LinkAnnouncer:
    """Chat event handler that posts a clickable link for each reference.

    Links are printed locally for the receiving user only; nothing is sent
    to the channel.
    """

    def __init__(self, sink: MessageSinkPort, extractor: LinkExtractor | None = None) -> None:
        self._sink = sink
        self._extractor = extractor or LinkExtractor()

    def on_text_message(self, connection_id: int, message: str) -> int:
        """Handle an incoming chat message.

        Args:
            connection_id: Server connection the message arrived on.
            message: Message text.

        Returns:
            Number of links printed.
        """
        links = self._extractor.links(message)
        for link in links:
            self._sink.print_message(connection_id, link)

        if links:
            logger.debug(f"Announced {len(links)} AnyDesk link(s) on connection {connection_id}")
        return len(links)
