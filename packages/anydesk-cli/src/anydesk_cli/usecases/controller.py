"""AnyDesk controller use case.

Synchronous facade over the AnyDesk command-line interface. Each call
resolves the executable, builds one invocation, runs it to completion and
translates the outcome into a CommandResult.
"""

from __future__ import annotations

import logging
from typing import Mapping

from anydesk_cli.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from anydesk_cli.adapters.ports import FileCheckerPort, ProcessRunnerPort
from anydesk_cli.adapters.subprocess_runner import SubprocessProcessRunner
from anydesk_cli.domain.errors import ControllerError
from anydesk_cli.domain.exceptions import BinaryNotFoundError
from anydesk_cli.domain.invocation import ConnectOptions, InfoQuery, Invocation
from anydesk_cli.domain.results import CommandResult, InvocationResult
from anydesk_cli.domain.settings import AnyDeskSettings
from anydesk_cli.usecases.binary_locator import BinaryLocator
from anydesk_cli.usecases.exit_code_interpreter import ExitCodeInterpreter
from anydesk_cli.usecases.invocation_builder import InvocationBuilder
from anydesk_cli.usecases.service_status_interpreter import ServiceStatusInterpreter

logger = logging.getLogger(__name__)


class AnyDeskController:
    """Use case for controlling a locally installed AnyDesk.

    Stateless between calls: every operation is an independent
    resolve, build, run and interpret cycle, so instances may be shared
    between threads. Calls block until the AnyDesk process exits; there is
    no timeout.

    Expected failures of the external program are never raised. They are
    returned as CommandResult.error with one of the ErrorKind values:

    - BINARY_NOT_FOUND: the executable is not on PATH or in the platform
      install directories
    - PROCESS_LAUNCH_FAILED: the executable could not be started
    - KNOWN_EXIT_CODE: a documented AnyDesk exit code
    - SERVICE_NOT_RUNNING: an info query printed SERVICE_NOT_RUNNING
    - UNRECOGNIZED_FAILURE: any other nonzero exit code

    Unlike the AnyDesk integration this replaces, remove_password() applies
    the same exit code translation as set_password(), and connect() returns
    its result instead of discarding it.
    """

    def __init__(
        self,
        settings: AnyDeskSettings | None = None,
        process_runner: ProcessRunnerPort | None = None,
        file_checker: FileCheckerPort | None = None,
        metrics: MetricsPort | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            settings: Binary configuration. Defaults to AnyDeskSettings().
            process_runner: Port for running the executable. Defaults to
                SubprocessProcessRunner without window suppression.
            file_checker: Port used by the binary search.
            metrics: Metrics port. Defaults to no-op.
            environ: Environment for the PATH search. Defaults to os.environ.
        """
        self._settings = settings or AnyDeskSettings()
        self._process_runner = process_runner or SubprocessProcessRunner()
        self._metrics = metrics or NoOpMetricsAdapter()
        self._locator = BinaryLocator(
            binary_name=self._settings.binary_name,
            search_dirs=self._settings.search_dirs,
            file_checker=file_checker,
            environ=environ,
        )
        self._builder = InvocationBuilder()
        self._exit_codes = ExitCodeInterpreter()
        self._service_status = ServiceStatusInterpreter()

    @property
    def settings(self) -> AnyDeskSettings:
        """Settings this controller was built with."""
        return self._settings

    def set_password(self, password: str) -> CommandResult:
        """Set the unattended access password.

        Args:
            password: New password, written to AnyDesk's stdin.

        Returns:
            Successful CommandResult, or a failure with KNOWN_EXIT_CODE
            (e.g. 9006 for a too short password) or UNRECOGNIZED_FAILURE.
        """
        return self._run_mutation("set_password", self._builder.set_password(password))

    def remove_password(self) -> CommandResult:
        """Remove the unattended access password."""
        return self._run_mutation("remove_password", self._builder.remove_password())

    def connect(self, ref: str, options: ConnectOptions | None = None) -> CommandResult:
        """Connect to a remote AnyDesk client.

        Blocks for as long as the AnyDesk process runs.

        Args:
            ref: Alias or numeric ID of the remote client.
            options: Connect options.

        Returns:
            Successful CommandResult, or a translated failure.

        Raises:
            AnyDeskConfigError: If ref is empty.
        """
        return self._run_mutation("connect", self._builder.connect(ref, options))

    def get_alias(self) -> CommandResult:
        """Return this client's alias (e.g. ``name@ad``), possibly empty."""
        return self._run_query("get_alias", InfoQuery.ALIAS)

    def get_id(self) -> CommandResult:
        """Return this client's numeric ID."""
        return self._run_query("get_id", InfoQuery.ID)

    def get_status(self) -> CommandResult:
        """Return the client's online status (e.g. ``online``)."""
        return self._run_query("get_status", InfoQuery.STATUS)

    def version(self) -> CommandResult:
        """Return the installed AnyDesk version."""
        return self._run_query("version", InfoQuery.VERSION)

    def _run_mutation(self, operation: str, invocation: Invocation) -> CommandResult:
        """Run a state-changing operation; output is discarded."""
        outcome = self._execute(operation, invocation)
        if isinstance(outcome, ControllerError):
            return self._fail(operation, outcome)

        if not outcome.succeeded:
            return self._fail(operation, self._translate_exit_code(outcome))

        return CommandResult.create_success()

    def _run_query(self, operation: str, query: InfoQuery) -> CommandResult:
        """Run a read-only info query and return its trimmed stdout."""
        outcome = self._execute(operation, self._builder.info(query))
        if isinstance(outcome, ControllerError):
            return self._fail(operation, outcome)

        if not outcome.succeeded:
            if self._service_status.interpret_info_output(outcome.stdout):
                return self._fail(
                    operation, ControllerError.service_not_running(outcome.exit_code)
                )
            return self._fail(operation, self._translate_exit_code(outcome))

        return CommandResult.create_success(outcome.text.strip())

    def _execute(
        self, operation: str, invocation: Invocation
    ) -> InvocationResult | ControllerError:
        """Resolve the executable and run one invocation.

        Returns:
            The InvocationResult of a process that ran, or a ControllerError
            if the executable was not found or could not be started.
        """
        try:
            executable = self._locator.resolve(self._settings.binary_reference.explicit_path)
        except BinaryNotFoundError as e:
            return ControllerError.binary_not_found(e.name)

        self._metrics.record_invocation(operation)
        result = self._process_runner.run(executable, invocation)
        if result.launch_error is not None:
            return ControllerError.process_launch_failed(result.launch_error)

        return result

    def _translate_exit_code(self, result: InvocationResult) -> ControllerError:
        """Translate a nonzero exit code into KNOWN_EXIT_CODE or UNRECOGNIZED_FAILURE."""
        exit_code = result.exit_code if result.exit_code is not None else -1
        description = self._exit_codes.interpret(exit_code)
        if description is not None:
            return ControllerError.known_exit_code(exit_code, description)
        return ControllerError.unrecognized_failure(exit_code)

    def _fail(self, operation: str, error: ControllerError) -> CommandResult:
        logger.warning(f"AnyDesk {operation} failed ({error.kind.value}): {error}")
        self._metrics.record_failure(operation, error.kind.value)
        return CommandResult.create_failure(error)
