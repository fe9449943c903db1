"""Correlation ID middleware tests."""

from collections.abc import AsyncGenerator
from uuid import UUID

import pytest
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient
from pytest import fixture
from pytest_asyncio import fixture as asyncio_fixture
from structlog.contextvars import get_contextvars

from app.middleware.correlation import CorrelationMiddleware, resolve_correlation_id


@fixture
def correlation_app() -> FastAPI:
    """Get test application with correlation ID middleware.

    Returns:
        FastAPI application for testing
    """
    app = FastAPI()

    @app.get("/test")
    async def test_endpoint(request: Request) -> JSONResponse:
        """Echo the correlation id seen by the route and the log context."""
        return JSONResponse(
            {
                "correlation_id": request.state.correlation_id,
                "log_context": get_contextvars().get("correlation_id"),
            }
        )

    app.add_middleware(CorrelationMiddleware)
    return app


@asyncio_fixture
async def correlation_client(
    correlation_app: FastAPI,
) -> AsyncGenerator[AsyncClient, None]:
    """Get test client for correlation tests.

    Args:
        correlation_app: FastAPI application for testing

    Yields:
        Test client for making requests
    """
    async with AsyncClient(
        transport=ASGITransport(app=correlation_app), base_url="http://test"
    ) as client:
        yield client


async def test_correlation_id_generation(correlation_client: AsyncClient) -> None:
    """Test correlation ID is generated when not provided."""
    response = await correlation_client.get("/test")
    assert response.status_code == status.HTTP_200_OK

    correlation_id = response.headers["X-Request-ID"]
    assert UUID(correlation_id)
    assert response.json() == {
        "correlation_id": correlation_id,
        "log_context": correlation_id,
    }


async def test_correlation_id_propagation(correlation_client: AsyncClient) -> None:
    """Test a well-formed incoming id is reused."""
    response = await correlation_client.get(
        "/test", headers={"X-Request-ID": "frontend-42.a"}
    )
    assert response.headers["X-Request-ID"] == "frontend-42.a"
    assert response.json()["correlation_id"] == "frontend-42.a"


async def test_correlation_id_invalid(correlation_client: AsyncClient) -> None:
    """Test a new id replaces one with forbidden characters."""
    response = await correlation_client.get(
        "/test", headers={"X-Request-ID": "bad id; drop"}
    )
    correlation_id = response.headers["X-Request-ID"]
    assert correlation_id != "bad id; drop"
    assert UUID(correlation_id)


@pytest.mark.parametrize(
    ("value", "reused"),
    [("abc-123", True), ("x" * 128, True), ("x" * 129, False), ("", False), (None, False)],
)
def test_resolve_correlation_id(value: str | None, reused: bool) -> None:
    assert (resolve_correlation_id(value) == value) is reused
