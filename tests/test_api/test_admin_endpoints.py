"""Tests for the admin content management endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models import AboutItemModel, ContactRequestModel

NEWS = {
    "locale": "en",
    "slug": "new-pier",
    "title": "New pier",
    "status": "draft",
}


async def _create_news(client: AsyncClient, **overrides: Any) -> dict[str, Any]:
    response = await client.post("/api/admin/content/news", json={**NEWS, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


async def test_admin_requires_session(client: AsyncClient) -> None:
    response = await client.get("/api/admin/content/news")
    assert response.status_code == 401


async def test_editor_cannot_manage_about_items(editor_client: AsyncClient) -> None:
    response = await editor_client.get("/api/admin/about-items")
    assert response.status_code == 403
    assert response.json()["error"] == "PermissionDeniedError"


async def test_content_crud(editor_client: AsyncClient) -> None:
    created = await _create_news(editor_client)
    assert created["published_at"] is None

    item_url = f"/api/admin/content/news/{created['id']}"
    fetched = await editor_client.get(item_url)
    assert fetched.json()["slug"] == "new-pier"

    published = await editor_client.put(
        item_url, json={"status": "published", "excerpt": "Opened today"}
    )
    assert published.status_code == 200
    body = published.json()
    assert body["status"] == "published"
    assert body["published_at"] is not None
    assert body["title"] == "New pier"

    listing = await editor_client.get(
        "/api/admin/content/news", params={"status": "published"}
    )
    assert listing.json()["total"] == 1

    deleted = await editor_client.delete(item_url)
    assert deleted.json() == {"success": True}
    assert (await editor_client.get(item_url)).status_code == 404


async def test_content_publish_is_visible_publicly(
    editor_client: AsyncClient,
) -> None:
    await _create_news(editor_client, status="published")
    public = await editor_client.get("/api/news/new-pier")
    assert public.status_code == 200


async def test_null_title_is_ignored_on_update(editor_client: AsyncClient) -> None:
    created = await _create_news(editor_client)
    response = await editor_client.put(
        f"/api/admin/content/news/{created['id']}", json={"title": None, "excerpt": None}
    )
    assert response.status_code == 200
    assert response.json()["title"] == "New pier"


async def test_duplicate_slug_conflicts(editor_client: AsyncClient) -> None:
    await _create_news(editor_client)
    response = await editor_client.post("/api/admin/content/news", json=NEWS)

    assert response.status_code == 409
    assert response.json()["error"] == "ConflictError"

    other_locale = await editor_client.post(
        "/api/admin/content/news", json={**NEWS, "locale": "ru"}
    )
    assert other_locale.status_code == 201


@pytest.mark.parametrize(
    "payload",
    [
        {**NEWS, "locale": "de"},
        {**NEWS, "slug": "Not A Slug"},
        {**NEWS, "unexpected": True},
        {"locale": "en"},
    ],
)
async def test_content_validation(
    editor_client: AsyncClient, payload: dict[str, Any]
) -> None:
    response = await editor_client.post("/api/admin/content/news", json=payload)
    assert response.status_code == 422
    assert response.json()["details"][0]["loc"][0] == "body"


async def test_unknown_content_type(editor_client: AsyncClient) -> None:
    response = await editor_client.get("/api/admin/content/posts")
    assert response.status_code == 404
    assert response.json()["error"] == "UnknownContentTypeError"


async def test_about_items_crud(admin_client: AsyncClient) -> None:
    created = await admin_client.post(
        "/api/admin/about-items",
        json={"kind": "license", "title_en": "Pilotage", "order_index": 3},
    )
    assert created.status_code == 201
    item = created.json()
    assert item["missing_title_locales"] == ["ru", "kk"]

    updated = await admin_client.put(
        f"/api/admin/about-items/{item['id']}",
        json={"title_ru": "Лоцманская проводка", "is_published": None},
    )
    assert updated.status_code == 200
    assert updated.json()["missing_title_locales"] == ["kk"]
    assert updated.json()["is_published"] is True

    listing = await admin_client.get(
        "/api/admin/about-items", params={"kind": "license", "search": "pilot"}
    )
    assert listing.json()["total"] == 1

    deleted = await admin_client.delete(f"/api/admin/about-items/{item['id']}")
    assert deleted.status_code == 200
    missing = await admin_client.delete(f"/api/admin/about-items/{item['id']}")
    assert missing.status_code == 404


async def test_about_items_reorder(
    admin_client: AsyncClient, db_session: AsyncSession
) -> None:
    first = AboutItemModel(kind="distribution", title_en="One", order_index=0)
    second = AboutItemModel(kind="distribution", title_en="Two", order_index=1)
    db_session.add_all([first, second])
    await db_session.commit()

    response = await admin_client.put(
        "/api/admin/about-items/reorder",
        json={"items": [{"id": first.id, "order_index": 5}, {"id": second.id, "order_index": 0}]},
    )
    assert response.status_code == 200

    listing = (
        await admin_client.get("/api/admin/about-items", params={"kind": "distribution"})
    ).json()
    assert [entry["title_en"] for entry in listing["items"]] == ["Two", "One"]


async def test_reorder_needs_items(admin_client: AsyncClient) -> None:
    response = await admin_client.put("/api/admin/about-items/reorder", json={"items": []})
    assert response.status_code == 422


async def test_partners_and_blocks(admin_client: AsyncClient) -> None:
    partner = await admin_client.post(
        "/api/admin/partners", json={"name": "Port Authority", "order": 1}
    )
    assert partner.status_code == 201
    renamed = await admin_client.put(
        f"/api/admin/partners/{partner.json()['id']}", json={"name": "Port of Aktau"}
    )
    assert renamed.json()["name"] == "Port of Aktau"

    block = await admin_client.post(
        "/api/admin/about-blocks",
        json={"block_key": "mission", "title_en": "Mission", "status": "published"},
    )
    assert block.status_code == 201
    assert block.json()["published_at"] is not None

    duplicate = await admin_client.post(
        "/api/admin/about-blocks", json={"block_key": "mission"}
    )
    assert duplicate.status_code == 409

    general = (await admin_client.get("/api/about/general")).json()
    assert [entry["name"] for entry in general["partners"]] == ["Port of Aktau"]
    assert general["blocks"][0]["title"] == "Mission"


async def test_site_settings_upsert(admin_client: AsyncClient) -> None:
    assert (await admin_client.get("/api/admin/site-settings")).json() is None

    saved = await admin_client.post(
        "/api/admin/site-settings",
        json={"hero_title_en": "Marine", "hero_overlay_opacity": 0.5},
    )
    assert saved.status_code == 200

    again = await admin_client.post(
        "/api/admin/site-settings", json={"hero_title_ru": "Морской"}
    )
    body = again.json()
    assert body["id"] == saved.json()["id"]
    assert body["hero_title_en"] == "Marine"
    assert body["hero_title_ru"] == "Морской"

    invalid = await admin_client.post(
        "/api/admin/site-settings", json={"hero_overlay_opacity": 2}
    )
    assert invalid.status_code == 422


async def test_contact_requests_listing(
    editor_client: AsyncClient, db_session: AsyncSession
) -> None:
    db_session.add(
        ContactRequestModel(
            name="Ivan", phone="123", message="Hello", meta={"email": "i@example.com"}
        )
    )
    await db_session.commit()

    body = (await editor_client.get("/api/admin/contact-requests")).json()
    assert body["total"] == 1
    assert body["items"][0]["meta"]["email"] == "i@example.com"
