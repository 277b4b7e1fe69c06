"""Use cases: Application logic layer."""

from anydesk_cli.usecases.binary_locator import BinaryLocator
from anydesk_cli.usecases.controller import AnyDeskController
from anydesk_cli.usecases.exit_code_interpreter import ExitCodeInterpreter
from anydesk_cli.usecases.invocation_builder import InvocationBuilder
from anydesk_cli.usecases.service_status_interpreter import (
    SERVICE_NOT_RUNNING_SENTINEL,
    ServiceStatusInterpreter,
)
from anydesk_cli.usecases.settings_parser import SettingsParser

__all__ = [
    "AnyDeskController",
    "BinaryLocator",
    "ExitCodeInterpreter",
    "InvocationBuilder",
    "ServiceStatusInterpreter",
    "SERVICE_NOT_RUNNING_SENTINEL",
    "SettingsParser",
]
