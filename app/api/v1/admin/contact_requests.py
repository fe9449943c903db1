"""Admin listing of contact form submissions."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import require_staff
from app.core.db import get_session
from app.database.repositories import ContactRequestRepository
from app.models.contact import ContactRequest
from app.models.response import ItemsPage

router = APIRouter(
    prefix="/contact-requests", tags=["admin"], dependencies=[Depends(require_staff)]
)


@router.get("", response_model=ItemsPage[ContactRequest])
async def list_contact_requests(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    session: AsyncSession = Depends(get_session),
) -> ItemsPage[ContactRequest]:
    """Submissions, newest first."""
    repository = ContactRequestRepository(session)
    rows = await repository.recent((page - 1) * page_size, page_size)
    total = await repository.count()
    return ItemsPage[ContactRequest](
        items=[ContactRequest.model_validate(row) for row in rows],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=max(1, (total + page_size - 1) // page_size),
    )
