"""Tests for the about item, site settings and user repositories."""

import pytest
from pytest_mock import MockerFixture
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ContentNotFoundError
from app.database.models import AboutItemModel
from app.database.repositories import (
    AboutItemRepository,
    SiteSettingsRepository,
    UserRepository,
    clear_about_items,
)
from app.database.seed import (
    DEFAULT_SITE_SETTINGS,
    seed_admin,
    seed_site_settings,
)


async def _items(session: AsyncSession) -> list[AboutItemModel]:
    repository = AboutItemRepository(session)
    for values in (
        {"kind": "certificate", "title_en": "ISO 9001", "order_index": 2},
        {"kind": "certificate", "title_ru": "Сертификат", "order_index": 1},
        {"kind": "license", "title_en": "Pilotage", "is_published": False},
        {"kind": "distribution", "description_kk": "Дистрибьютор"},
    ):
        await repository.create(**values)
    items, _ = await repository.search()
    return list(items)


async def test_search_by_kind_and_term(db_session: AsyncSession) -> None:
    await _items(db_session)
    repository = AboutItemRepository(db_session)

    certificates, total = await repository.search(kind="certificate")
    assert total == 2
    assert [item.order_index for item in certificates] == [1, 2]

    found, total = await repository.search(search="iso")
    assert [item.title_en for item in found] == ["ISO 9001"]


async def test_published_excludes_hidden(db_session: AsyncSession) -> None:
    await _items(db_session)
    published = await AboutItemRepository(db_session).published("license")
    assert published == []


async def test_reorder_skips_unknown_ids(db_session: AsyncSession) -> None:
    items = await _items(db_session)
    repository = AboutItemRepository(db_session)

    updated = await repository.reorder([(items[0].id, 10), (9999, 1)])

    assert updated == 1
    refreshed = await repository.get_by_id(items[0].id)
    assert refreshed is not None and refreshed.order_index == 10


async def test_clear_about_items(db_session: AsyncSession) -> None:
    await _items(db_session)
    assert await clear_about_items(db_session) == 4
    assert (await AboutItemRepository(db_session).search())[1] == 0


async def test_site_settings_upsert(db_session: AsyncSession) -> None:
    repository = SiteSettingsRepository(db_session)
    assert await repository.latest() is None

    created = await repository.upsert(hero_title_en="Hello")
    updated = await repository.upsert(hero_title_ru="Привет")

    assert created.id == updated.id
    assert updated.hero_title_en == "Hello"
    assert updated.hero_title_ru == "Привет"


async def test_site_settings_upsert_row_removed_meanwhile(
    db_session: AsyncSession, mocker: MockerFixture
) -> None:
    repository = SiteSettingsRepository(db_session)
    await repository.upsert(hero_title_en="Hello")
    mocker.patch.object(repository, "update", return_value=None)

    with pytest.raises(ContentNotFoundError, match="disappeared"):
        await repository.upsert(hero_title_en="Again")


async def test_seed_site_settings_once(db_session: AsyncSession) -> None:
    created = await seed_site_settings(db_session)
    assert created is not None
    assert created.cta1_link == DEFAULT_SITE_SETTINGS["cta1_link"]
    assert await seed_site_settings(db_session) is None


async def test_seed_admin(db_session: AsyncSession) -> None:
    assert await seed_admin(db_session, None, None) is None

    admin = await seed_admin(db_session, "Owner@Example.com", "secret-pass")
    assert admin is not None
    assert admin.email == "owner@example.com"
    assert admin.role == "admin"

    assert await seed_admin(db_session, "owner@example.com", "other") is None
    user = await UserRepository(db_session).get_by_email(" OWNER@example.com ")
    assert user is not None and user.id == admin.id
