"""Tests for application wiring."""

from fastapi import FastAPI
from httpx import AsyncClient

from app.core.config import settings


async def test_root_redirects_to_docs(client: AsyncClient) -> None:
    response = await client.get("/", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/docs"


async def test_openapi_lists_public_and_admin_routes(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/news" in paths
    assert "/api/news/{slug}" in paths
    assert "/api/about/items" in paths
    assert "/api/admin/about-items/reorder" in paths
    assert "/api/admin/content/{content_type}" in paths
    assert "/metrics" not in paths


def test_api_prefix(test_app: FastAPI) -> None:
    prefixes = {route.path.split("/")[1] for route in test_app.routes}
    assert settings.api_prefix.strip("/") in prefixes
