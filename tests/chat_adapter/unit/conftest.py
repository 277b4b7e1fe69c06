"""Fixtures for chat integration unit tests."""

from __future__ import annotations

import pytest

from anydesk_chat.command_dispatcher import CommandDispatcher
from anydesk_cli.adapters.fakes import FakeProcessRunner
from anydesk_cli.domain.settings import AnyDeskSettings
from anydesk_cli.usecases.controller import AnyDeskController

from .fakes import FakeMessageSink, FixedPasswordGenerator, ImmediateExecutor


@pytest.fixture
def sink() -> FakeMessageSink:
    """Provide a recording chat host."""
    return FakeMessageSink()


@pytest.fixture
def runner() -> FakeProcessRunner:
    """Provide a FakeProcessRunner; queue AnyDesk responses on it."""
    return FakeProcessRunner()


@pytest.fixture
def executor() -> ImmediateExecutor:
    """Provide an executor that runs invite tasks inline."""
    return ImmediateExecutor()


@pytest.fixture
def passwords() -> FixedPasswordGenerator:
    """Provide a password generator with a known password."""
    return FixedPasswordGenerator()


@pytest.fixture
def dispatcher(
    runner: FakeProcessRunner,
    sink: FakeMessageSink,
    executor: ImmediateExecutor,
    passwords: FixedPasswordGenerator,
) -> CommandDispatcher:
    """Provide a dispatcher wired to fakes."""
    controller = AnyDeskController(
        settings=AnyDeskSettings(binary_path="/opt/anydesk/anydesk"),
        process_runner=runner,
    )
    return CommandDispatcher(
        controller=controller,
        sink=sink,
        executor=executor,
        password_generator=passwords,  # type: ignore[arg-type]
    )
