"""Admin access to the home page settings row."""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import require_admin
from app.core.db import get_session
from app.core.logging import get_logger
from app.database.repositories import SiteSettingsRepository
from app.models.site import SiteSettings, SiteSettingsUpdate

logger = get_logger("app.api.v1.admin.site_settings")

router = APIRouter(
    prefix="/site-settings", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("", response_model=Optional[SiteSettings])
async def get_site_settings(
    session: AsyncSession = Depends(get_session),
) -> Optional[SiteSettings]:
    """Stored settings with every locale variant, or null before the first save."""
    row = await SiteSettingsRepository(session).latest()
    return SiteSettings.model_validate(row) if row is not None else None


@router.post("", response_model=SiteSettings)
async def save_site_settings(
    payload: SiteSettingsUpdate, session: AsyncSession = Depends(get_session)
) -> SiteSettings:
    """
    Update the settings, creating the row on first save.

    Only fields present in the payload are written.
    """
    values: dict[str, Any] = payload.model_dump(exclude_unset=True)
    if values.get("locale_default", "") is None:
        values.pop("locale_default")

    row = await SiteSettingsRepository(session).upsert(**values)
    logger.info("site_settings_saved", fields=sorted(values))
    return SiteSettings.model_validate(row)
