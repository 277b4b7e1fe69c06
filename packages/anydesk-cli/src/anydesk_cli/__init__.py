"""anydesk-py: Control a local AnyDesk installation through its CLI."""

__version__ = "0.1.0"

from anydesk_cli.domain.errors import ControllerError, ErrorKind
from anydesk_cli.domain.exceptions import AnyDeskCommandError, AnyDeskConfigError
from anydesk_cli.domain.invocation import ConnectOptions
from anydesk_cli.domain.results import CommandResult
from anydesk_cli.domain.settings import AnyDeskSettings
from anydesk_cli.factories import create_controller
from anydesk_cli.usecases.controller import AnyDeskController

__all__ = [
    "AnyDeskController",
    "AnyDeskSettings",
    "AnyDeskConfigError",
    "AnyDeskCommandError",
    "CommandResult",
    "ConnectOptions",
    "ControllerError",
    "ErrorKind",
    "create_controller",
]
