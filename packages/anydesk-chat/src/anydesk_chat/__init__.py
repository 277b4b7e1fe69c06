"""Chat integration for AnyDesk: clickable links and invite commands."""

from anydesk_chat.command_dispatcher import (
    COMMAND_KEYWORD,
    CommandDispatcher,
    DispatchResult,
    InviteRequest,
)
from anydesk_chat.link_extractor import LinkAnnouncer, LinkExtractor
from anydesk_chat.password_generator import PasswordGenerator
from anydesk_chat.ports import MessageSinkPort

__all__ = [
    "COMMAND_KEYWORD",
    "CommandDispatcher",
    "DispatchResult",
    "InviteRequest",
    "LinkAnnouncer",
    "LinkExtractor",
    "MessageSinkPort",
    "PasswordGenerator",
]
