"""Pytest configuration for AnyDesk core unit tests."""

from __future__ import annotations

import pytest

from anydesk_cli.adapters.fakes import FakeMetricsAdapter, FakeProcessRunner
from anydesk_cli.domain.settings import AnyDeskSettings
from anydesk_cli.usecases.controller import AnyDeskController

ANYDESK_PATH = "/opt/anydesk/anydesk"


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    """Provide a FakeProcessRunner that succeeds with empty stdout by default.

    Example:
        def test_status(fake_runner, controller):
            fake_runner.complete(0, "online\\n")
            assert controller.get_status().output == "online"
    """
    return FakeProcessRunner()


@pytest.fixture
def fake_metrics() -> FakeMetricsAdapter:
    """Provide a FakeMetricsAdapter recording metric calls."""
    return FakeMetricsAdapter()


@pytest.fixture
def controller(
    fake_runner: FakeProcessRunner, fake_metrics: FakeMetricsAdapter
) -> AnyDeskController:
    """Provide a controller with an explicit binary path and fake runner."""
    return AnyDeskController(
        settings=AnyDeskSettings(binary_path=ANYDESK_PATH),
        process_runner=fake_runner,
        metrics=fake_metrics,
    )
