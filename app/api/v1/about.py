"""About page API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import (
    LocaleParams,
    get_locale_config,
    get_locale_params,
    get_resolver,
)
from app.content.locales import LocaleConfig
from app.content.localizer import localize_record
from app.content.query import ContentFilter
from app.content.resolver import LocaleResolver
from app.core.db import get_session
from app.core.exceptions import BadRequestError
from app.database.models import ABOUT_ITEM_KINDS
from app.database.repositories import (
    AboutBlockRepository,
    AboutItemRepository,
    PartnerRepository,
)
from app.models.about import (
    AboutGeneral,
    AboutSection,
    LocalizedAboutBlock,
    LocalizedAboutItem,
    Partner,
)
from app.models.content import AboutStory, AboutTeamMember, AboutTimeline, AboutValue
from app.models.response import Localized

router = APIRouter(prefix="/about", tags=["about"])

SECTION_PAGE_SIZE = 100


@router.get("/general", response_model=AboutGeneral)
async def get_about_general(
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
    config: LocaleConfig = Depends(get_locale_config),
    session: AsyncSession = Depends(get_session),
) -> AboutGeneral:
    """
    Story, values, timeline and team for the locale, plus partners and blocks.

    Each per-locale section falls back to the default locale on its own, so
    a partially translated page still shows every section.
    """
    sections: dict[str, AboutSection] = {}

    story = await resolver.resolve_item(
        "about_story", None, params.locale, preview=params.preview
    )
    sections["story"] = AboutSection(locale=story.locale, used_fallback=story.used_fallback)

    lists = {}
    for name, content_type in (
        ("values", "about_values"),
        ("timeline", "about_timeline"),
        ("team", "about_team"),
    ):
        result = await resolver.resolve_list(
            content_type,
            ContentFilter(page_size=SECTION_PAGE_SIZE),
            params.locale,
            preview=params.preview,
        )
        lists[name] = result.items
        sections[name] = AboutSection(
            locale=result.locale, used_fallback=result.used_fallback
        )

    partners = await PartnerRepository(session).ordered(published_only=not params.preview)
    blocks = await AboutBlockRepository(session).ordered(published_only=not params.preview)

    return AboutGeneral(
        requested_locale=params.locale,
        story=AboutStory.model_validate(story.item) if story.found else None,
        values=[AboutValue.model_validate(row) for row in lists["values"]],
        timeline=[AboutTimeline.model_validate(row) for row in lists["timeline"]],
        team=[AboutTeamMember.model_validate(row) for row in lists["team"]],
        partners=[Partner.model_validate(row) for row in partners],
        blocks=[
            LocalizedAboutBlock.model_validate(
                localize_record(block, "about_blocks", params.locale, config)
            )
            for block in blocks
        ],
        sections=sections,
    )


@router.get("/items", response_model=Localized[list[LocalizedAboutItem]])
async def list_about_items(
    kind: Optional[str] = Query(
        None, description="One of distribution, certificate, license"
    ),
    params: LocaleParams = Depends(get_locale_params),
    config: LocaleConfig = Depends(get_locale_config),
    session: AsyncSession = Depends(get_session),
) -> Localized[list[LocalizedAboutItem]]:
    """
    Published about items of one kind, each field localized on its own.

    A field missing in the requested locale is taken from the default locale,
    then from any other locale that has it.
    """
    if kind not in ABOUT_ITEM_KINDS:
        raise BadRequestError("Invalid or missing kind parameter")

    items = await AboutItemRepository(session).published(kind)
    data = [
        LocalizedAboutItem.model_validate(
            localize_record(item, "about_items", params.locale, config)
        )
        for item in items
    ]
    return Localized[list[LocalizedAboutItem]](
        data=data,
        locale=params.locale,
        requested_locale=params.locale,
        used_fallback=False,
    )
