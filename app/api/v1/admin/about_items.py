"""Admin management of multi-locale about items."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import get_locale_config, require_admin
from app.content.locales import LocaleConfig
from app.content.localizer import missing_locales
from app.core.db import get_session
from app.core.exceptions import ContentNotFoundError
from app.core.logging import get_logger
from app.database.models import AboutItemModel
from app.database.repositories import AboutItemRepository
from app.models.about import (
    AboutItem,
    AboutItemFields,
    AboutItemUpdate,
    ReorderRequest,
)
from app.models.response import ItemsPage, SuccessResponse

logger = get_logger("app.api.v1.admin.about_items")

router = APIRouter(
    prefix="/about-items", tags=["admin"], dependencies=[Depends(require_admin)]
)


def _with_gaps(item: AboutItemModel, config: LocaleConfig) -> AboutItem:
    result = AboutItem.model_validate(item)
    result.missing_title_locales = missing_locales(item, "title", config)
    return result


@router.get("", response_model=ItemsPage[AboutItem])
async def list_about_items(
    kind: Optional[Literal["distribution", "certificate", "license"]] = Query(None),
    search: Optional[str] = Query(None, description="Search titles and descriptions"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
    config: LocaleConfig = Depends(get_locale_config),
) -> ItemsPage[AboutItem]:
    """
    List about items with every locale variant.

    Each item reports the locales whose title is still empty.
    """
    items, total = await AboutItemRepository(session).search(
        kind, search, skip=(page - 1) * page_size, limit=page_size
    )
    return ItemsPage[AboutItem](
        items=[_with_gaps(item, config) for item in items],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=max(1, (total + page_size - 1) // page_size),
    )


@router.post("", response_model=AboutItem, status_code=201)
async def create_about_item(
    payload: AboutItemFields,
    session: AsyncSession = Depends(get_session),
    config: LocaleConfig = Depends(get_locale_config),
) -> AboutItem:
    item = await AboutItemRepository(session).create(**payload.model_dump())
    logger.info("about_item_created", id=item.id, kind=item.kind)
    return _with_gaps(item, config)


@router.put("/reorder", response_model=SuccessResponse)
async def reorder_about_items(
    payload: ReorderRequest,
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    """Set ``order_index`` of several items at once."""
    updated = await AboutItemRepository(session).reorder(
        [(entry.id, entry.order_index) for entry in payload.items]
    )
    logger.info("about_items_reordered", requested=len(payload.items), updated=updated)
    return SuccessResponse()


@router.put("/{item_id}", response_model=AboutItem)
async def update_about_item(
    item_id: int,
    payload: AboutItemUpdate,  # type: ignore[valid-type]
    session: AsyncSession = Depends(get_session),
    config: LocaleConfig = Depends(get_locale_config),
) -> AboutItem:
    values = payload.model_dump(exclude_unset=True)  # type: ignore[attr-defined]
    for key in ("kind", "is_published", "order_index"):
        if values.get(key, "") is None:
            values.pop(key)

    item = await AboutItemRepository(session).update(item_id, **values)
    if item is None:
        raise ContentNotFoundError(f"About item {item_id} not found")
    return _with_gaps(item, config)


@router.delete("/{item_id}", response_model=SuccessResponse)
async def delete_about_item(
    item_id: int,
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await AboutItemRepository(session).delete(item_id):
        raise ContentNotFoundError(f"About item {item_id} not found")
    logger.info("about_item_deleted", id=item_id)
    return SuccessResponse()
