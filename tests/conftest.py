"""Test configuration."""

import os
from pathlib import Path

import pytest
from pytest import Config

# Must be set before the application creates its database engine.
os.environ["TESTING"] = "true"

from app.core.logging import configure_logging  # noqa: E402

fixture = pytest.fixture


@fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


pytest_plugins: list[str] = [
    "tests.fixtures.db",
    "tests.fixtures.api",
]


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    # Configure logging for test environment
    configure_logging(testing=True)
