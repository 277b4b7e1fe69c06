"""Domain layer: Entities with zero external dependencies."""

from anydesk_cli.domain.binary import BinaryReference, Platform
from anydesk_cli.domain.errors import ControllerError, ErrorKind
from anydesk_cli.domain.exceptions import (
    AnyDeskCommandError,
    AnyDeskConfigError,
    BinaryNotFoundError,
)
from anydesk_cli.domain.exit_codes import EXIT_CODE_DESCRIPTIONS
from anydesk_cli.domain.invocation import ConnectOptions, InfoQuery, Invocation
from anydesk_cli.domain.results import CommandResult, InvocationResult
from anydesk_cli.domain.settings import AnyDeskSettings

__all__ = [
    "AnyDeskSettings",
    "AnyDeskConfigError",
    "AnyDeskCommandError",
    "BinaryNotFoundError",
    "BinaryReference",
    "Platform",
    "ControllerError",
    "ErrorKind",
    "EXIT_CODE_DESCRIPTIONS",
    "ConnectOptions",
    "InfoQuery",
    "Invocation",
    "CommandResult",
    "InvocationResult",
]
