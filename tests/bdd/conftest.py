"""Shared fixtures for BDD tests."""

import pytest

from anydesk_cli.adapters.fakes import FakeFileChecker, FakeProcessRunner


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {}


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    """Provide a FakeProcessRunner standing in for the executable."""
    return FakeProcessRunner()


@pytest.fixture
def fake_file_checker() -> FakeFileChecker:
    """Provide a FakeFileChecker with no executables."""
    return FakeFileChecker()
