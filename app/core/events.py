"""Application startup and shutdown events."""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from prometheus_client import Counter, Histogram

from app.core.config import settings
from app.core.db import dispose_db, get_session, init_db
from app.core.logging import configure_logging, get_logger

# Prometheus metrics
REQUESTS_TOTAL = Counter(
    "app_http_requests_total",
    "Total number of HTTP requests",
    labelnames=["method", "path"],
)

RESPONSES_TOTAL = Counter(
    "app_http_responses_total",
    "Total number of HTTP responses",
    labelnames=["status_code"],
)

REQUEST_DURATION = Histogram(
    "app_http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=["method"],
)

logger = get_logger("app.core.events")


async def seed_initial_data() -> None:
    """Create the configured admin account when it does not exist yet."""
    from app.database.seed import seed_admin

    async for session in get_session():
        await seed_admin(session, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)


def create_start_app_handler(app: Any) -> Callable[[], Awaitable[None]]:
    """Create startup event handler.

    Args:
        app: FastAPI application instance

    Returns:
        Startup handler function
    """

    async def start_app() -> None:
        from app.services.uploads import create_upload_dirs

        configure_logging(level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

        await init_db()
        create_upload_dirs(settings.FILE_UPLOAD_DIR)
        await seed_initial_data()

        logger.info(
            "application_started",
            app_name=settings.app_name,
            default_locale=settings.DEFAULT_LOCALE,
            locales=settings.SUPPORTED_LOCALES,
            upload_dir=settings.FILE_UPLOAD_DIR,
        )

    return start_app


def create_stop_app_handler(app: Any) -> Callable[[], Awaitable[None]]:
    """Create shutdown event handler.

    Args:
        app: FastAPI application instance

    Returns:
        Shutdown handler function
    """

    async def stop_app() -> None:
        await dispose_db()
        logger.info("application_stopped")

    return stop_app


@asynccontextmanager
async def lifespan(app: Any) -> AsyncIterator[None]:
    """Run the startup handler, serve, then run the shutdown handler."""
    await create_start_app_handler(app)()
    try:
        yield
    finally:
        await create_stop_app_handler(app)()
