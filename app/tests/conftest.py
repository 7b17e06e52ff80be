"""Shared fixtures for the lexis test suite."""

import pytest

from lexis.i18n import service
from lexis.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logging():
    """Route lexis events through structlog and silence them for the session."""
    configure_logging()


@pytest.fixture(autouse=True)
def reset_installed_dictionary():
    """Ensure every test starts without a globally installed Dictionary."""
    service.reset()
    yield
    service.reset()
