"""Tests for application startup and shutdown events."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from pytest_mock import MockerFixture

from app.core import events
from app.core.config import settings
from app.core.events import (
    create_start_app_handler,
    create_stop_app_handler,
    lifespan,
)


@pytest.fixture
def startup_mocks(mocker: MockerFixture) -> dict[str, MagicMock]:
    """Replace the side effects of startup and shutdown."""
    return {
        "configure_logging": mocker.patch("app.core.events.configure_logging"),
        "init_db": mocker.patch("app.core.events.init_db", new_callable=AsyncMock),
        "dispose_db": mocker.patch("app.core.events.dispose_db", new_callable=AsyncMock),
        "seed": mocker.patch(
            "app.core.events.seed_initial_data", new_callable=AsyncMock
        ),
        "upload_dirs": mocker.patch("app.services.uploads.create_upload_dirs"),
    }


async def test_start_handler(startup_mocks: dict[str, MagicMock]) -> None:
    await create_start_app_handler(FastAPI())()

    startup_mocks["configure_logging"].assert_called_once_with(
        level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS
    )
    startup_mocks["init_db"].assert_awaited_once()
    startup_mocks["upload_dirs"].assert_called_once_with(settings.FILE_UPLOAD_DIR)
    startup_mocks["seed"].assert_awaited_once()


async def test_stop_handler(startup_mocks: dict[str, MagicMock]) -> None:
    await create_stop_app_handler(FastAPI())()
    startup_mocks["dispose_db"].assert_awaited_once()


async def test_lifespan_runs_both_handlers(startup_mocks: dict[str, MagicMock]) -> None:
    async with lifespan(FastAPI()):
        startup_mocks["init_db"].assert_awaited_once()
        startup_mocks["dispose_db"].assert_not_awaited()

    startup_mocks["dispose_db"].assert_awaited_once()


async def test_lifespan_disposes_on_error(startup_mocks: dict[str, MagicMock]) -> None:
    with pytest.raises(RuntimeError):
        async with lifespan(FastAPI()):
            raise RuntimeError("serving failed")

    startup_mocks["dispose_db"].assert_awaited_once()


async def test_seed_initial_data_uses_settings(mocker: MockerFixture) -> None:
    session = MagicMock()

    async def fake_sessions():
        yield session

    mocker.patch.object(events, "get_session", fake_sessions)
    seed_admin = mocker.patch("app.database.seed.seed_admin", new_callable=AsyncMock)
    mocker.patch.object(settings, "ADMIN_EMAIL", "root@example.com")
    mocker.patch.object(settings, "ADMIN_PASSWORD", "s3cret!")

    await events.seed_initial_data()

    seed_admin.assert_awaited_once_with(session, "root@example.com", "s3cret!")
