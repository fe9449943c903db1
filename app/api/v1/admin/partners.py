"""Admin CRUD for partner logos shown on the about page."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import require_admin
from app.core.db import get_session
from app.core.exceptions import ContentNotFoundError
from app.core.logging import get_logger
from app.database.repositories import PartnerRepository
from app.models.about import Partner, PartnerFields, PartnerUpdate
from app.models.response import SuccessResponse

logger = get_logger("app.api.v1.admin.partners")

router = APIRouter(
    prefix="/partners", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("", response_model=list[Partner])
async def list_partners(session: AsyncSession = Depends(get_session)) -> list[Partner]:
    """All partners regardless of status, in display order."""
    partners = await PartnerRepository(session).ordered(published_only=False)
    return [Partner.model_validate(partner) for partner in partners]


@router.post("", response_model=Partner, status_code=201)
async def create_partner(
    payload: PartnerFields, session: AsyncSession = Depends(get_session)
) -> Partner:
    partner = await PartnerRepository(session).create(**payload.model_dump())
    logger.info("partner_created", id=partner.id)
    return Partner.model_validate(partner)


@router.put("/{partner_id}", response_model=Partner)
async def update_partner(
    partner_id: str,
    payload: PartnerUpdate,  # type: ignore[valid-type]
    session: AsyncSession = Depends(get_session),
) -> Partner:
    values = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()  # type: ignore[attr-defined]
        if value is not None or key in ("logo", "website_url")
    }
    partner = await PartnerRepository(session).update(partner_id, **values)
    if partner is None:
        raise ContentNotFoundError(f"Partner '{partner_id}' not found")
    return Partner.model_validate(partner)


@router.delete("/{partner_id}", response_model=SuccessResponse)
async def delete_partner(
    partner_id: str, session: AsyncSession = Depends(get_session)
) -> SuccessResponse:
    if not await PartnerRepository(session).delete(partner_id):
        raise ContentNotFoundError(f"Partner '{partner_id}' not found")
    logger.info("partner_deleted", id=partner_id)
    return SuccessResponse()
