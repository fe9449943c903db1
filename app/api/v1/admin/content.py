"""Admin CRUD for per-locale content types."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import require_staff
from app.api.v1.utils import validate_payload
from app.core.db import get_session
from app.core.exceptions import ConflictError, ContentNotFoundError
from app.core.logging import get_logger
from app.database.content_types import get_content_type
from app.database.models import UserModel, utcnow
from app.database.repositories import ContentRepository
from app.models.content import CONTENT_SCHEMAS, ContentSchemas, ContentStatus
from app.models.response import SuccessResponse

logger = get_logger("app.api.v1.admin.content")

router = APIRouter(prefix="/content", tags=["admin"])


def _schemas(content_type: str) -> ContentSchemas:
    get_content_type(content_type)
    return CONTENT_SCHEMAS[content_type]


def _serialize(schemas: ContentSchemas, row: Any) -> dict[str, Any]:
    return schemas.read.model_validate(row).model_dump(mode="json")


def _stamp_publication(values: dict[str, Any], current: Any = None) -> dict[str, Any]:
    """Set ``published_at`` the first time an item is published."""
    status = values.get("status", getattr(current, "status", None))
    already = values.get("published_at") or getattr(current, "published_at", None)
    if status == "published" and not already:
        values["published_at"] = utcnow()
    return values


async def _commit_or_conflict(session: AsyncSession, action: Any) -> Any:
    try:
        return await action
    except IntegrityError as e:
        await session.rollback()
        logger.warning("content_conflict", error=str(e.orig))
        raise ConflictError(
            "Conflicts with existing content (duplicate slug for this locale?)"
        ) from None


@router.get("/{content_type}")
async def list_content(
    content_type: str,
    locale: Optional[str] = Query(None),
    status: Optional[ContentStatus] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
    user: UserModel = Depends(require_staff),
) -> dict[str, Any]:
    """List items of any status, optionally restricted to one locale."""
    schemas = _schemas(content_type)
    repository = ContentRepository(session, content_type)
    filters = {
        key: value
        for key, value in {"locale": locale, "status": status}.items()
        if value
    }

    items = await repository.get_all((page - 1) * page_size, page_size, filters)
    total = await repository.count(filters)
    return {
        "items": [_serialize(schemas, item) for item in items],
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": max(1, (total + page_size - 1) // page_size),
    }


@router.post("/{content_type}", status_code=201)
async def create_content(
    content_type: str,
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_session),
    user: UserModel = Depends(require_staff),
) -> dict[str, Any]:
    schemas = _schemas(content_type)
    data = validate_payload(schemas.create, payload)
    values = _stamp_publication(data.model_dump())

    item = await _commit_or_conflict(
        session, ContentRepository(session, content_type).create(**values)
    )
    logger.info("content_created", content_type=content_type, id=item.id, user_id=user.id)
    return _serialize(schemas, item)


@router.get("/{content_type}/{item_id}")
async def get_content(
    content_type: str,
    item_id: str,
    session: AsyncSession = Depends(get_session),
    user: UserModel = Depends(require_staff),
) -> dict[str, Any]:
    schemas = _schemas(content_type)
    item = await ContentRepository(session, content_type).get_by_id(item_id)
    if item is None:
        raise ContentNotFoundError(f"{content_type} item '{item_id}' not found")
    return _serialize(schemas, item)


@router.put("/{content_type}/{item_id}")
async def update_content(
    content_type: str,
    item_id: str,
    payload: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_session),
    user: UserModel = Depends(require_staff),
) -> dict[str, Any]:
    """Partially update an item; omitted fields keep their value."""
    schemas = _schemas(content_type)
    data = validate_payload(schemas.update, payload)
    repository = ContentRepository(session, content_type)

    current = await repository.get_by_id(item_id)
    if current is None:
        raise ContentNotFoundError(f"{content_type} item '{item_id}' not found")

    # Explicit nulls are dropped for columns that cannot hold them.
    columns = repository.model.__table__.c
    values = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or columns[key].nullable
    }
    values = _stamp_publication(values, current)

    item = await _commit_or_conflict(session, repository.update(item_id, **values))
    logger.info("content_updated", content_type=content_type, id=item_id, user_id=user.id)
    return _serialize(schemas, item)


@router.delete("/{content_type}/{item_id}", response_model=SuccessResponse)
async def delete_content(
    content_type: str,
    item_id: str,
    session: AsyncSession = Depends(get_session),
    user: UserModel = Depends(require_staff),
) -> SuccessResponse:
    _schemas(content_type)
    if not await ContentRepository(session, content_type).delete(item_id):
        raise ContentNotFoundError(f"{content_type} item '{item_id}' not found")
    logger.info("content_deleted", content_type=content_type, id=item_id, user_id=user.id)
    return SuccessResponse()
