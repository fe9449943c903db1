"""Tests for the security headers middleware."""

from httpx import AsyncClient

from app.middleware.security import CONTENT_SECURITY_POLICY, build_csp


async def test_security_headers_on_api_responses(client: AsyncClient) -> None:
    response = await client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "no-referrer"
    assert "max-age=31536000" in response.headers["Strict-Transport-Security"]
    assert response.headers["Content-Security-Policy"] == build_csp(
        CONTENT_SECURITY_POLICY
    )


async def test_docs_skip_content_security_policy(client: AsyncClient) -> None:
    response = await client.get("/docs")

    assert response.status_code == 200
    assert "Content-Security-Policy" not in response.headers
    assert response.headers["X-Frame-Options"] == "DENY"


def test_build_csp() -> None:
    policy = build_csp({"default-src": ["'self'"], "img-src": ["'self'", "data:"]})
    assert policy == "default-src 'self'; img-src 'self' data:"


async def test_cors_preflight(client: AsyncClient) -> None:
    response = await client.options(
        "/api/news",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"
