"""Admin CRUD for keyed multi-locale about page blocks."""

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import require_admin
from app.core.db import get_session
from app.core.exceptions import ConflictError, ContentNotFoundError
from app.core.logging import get_logger
from app.database.models import utcnow
from app.database.repositories import AboutBlockRepository
from app.models.about import AboutBlock, AboutBlockFields, AboutBlockUpdate
from app.models.response import SuccessResponse

logger = get_logger("app.api.v1.admin.blocks")

router = APIRouter(
    prefix="/about-blocks", tags=["admin"], dependencies=[Depends(require_admin)]
)


def _publication(values: dict[str, Any]) -> dict[str, Any]:
    if values.get("status") == "published" and not values.get("published_at"):
        values["published_at"] = utcnow()
    return values


@router.get("", response_model=list[AboutBlock])
async def list_blocks(session: AsyncSession = Depends(get_session)) -> list[AboutBlock]:
    blocks = await AboutBlockRepository(session).ordered(published_only=False)
    return [AboutBlock.model_validate(block) for block in blocks]


@router.post("", response_model=AboutBlock, status_code=201)
async def create_block(
    payload: AboutBlockFields, session: AsyncSession = Depends(get_session)
) -> AboutBlock:
    """Create a block; ``block_key`` must be unique."""
    try:
        block = await AboutBlockRepository(session).create(
            **_publication(payload.model_dump())
        )
    except IntegrityError:
        await session.rollback()
        raise ConflictError(f"Block '{payload.block_key}' already exists") from None
    logger.info("about_block_created", id=block.id, block_key=block.block_key)
    return AboutBlock.model_validate(block)


@router.put("/{block_id}", response_model=AboutBlock)
async def update_block(
    block_id: str,
    payload: AboutBlockUpdate,  # type: ignore[valid-type]
    session: AsyncSession = Depends(get_session),
) -> AboutBlock:
    repository = AboutBlockRepository(session)
    current = await repository.get_by_id(block_id)
    if current is None:
        raise ContentNotFoundError(f"About block '{block_id}' not found")

    values = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()  # type: ignore[attr-defined]
        if value is not None or key not in ("block_key", "status")
    }
    if values.get("status") == "published" and current.published_at is None:
        values.setdefault("published_at", utcnow())

    try:
        block = await repository.update(block_id, **values)
    except IntegrityError:
        await session.rollback()
        raise ConflictError("Another block already uses this key") from None
    return AboutBlock.model_validate(block)


@router.delete("/{block_id}", response_model=SuccessResponse)
async def delete_block(
    block_id: str, session: AsyncSession = Depends(get_session)
) -> SuccessResponse:
    if not await AboutBlockRepository(session).delete(block_id):
        raise ContentNotFoundError(f"About block '{block_id}' not found")
    return SuccessResponse()
