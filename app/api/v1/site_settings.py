"""Public site settings endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import LocaleParams, get_locale_config, get_locale_params
from app.content.locales import LocaleConfig
from app.content.localizer import localize_record
from app.core.db import get_session
from app.database.repositories import SiteSettingsRepository
from app.models.response import Localized
from app.models.site import LocalizedSiteSettings

router = APIRouter(prefix="/site-settings", tags=["site-settings"])


@router.get("", response_model=Localized[LocalizedSiteSettings])
async def get_site_settings(
    params: LocaleParams = Depends(get_locale_params),
    config: LocaleConfig = Depends(get_locale_config),
    session: AsyncSession = Depends(get_session),
) -> Localized[LocalizedSiteSettings]:
    """
    Home page hero settings for the locale.

    Empty fields fall back to the settings' own default locale, then to any
    locale that has a value. Without a stored row every text is empty.
    """
    row = await SiteSettingsRepository(session).latest()
    if row is None:
        data = LocalizedSiteSettings(locale=params.locale)
    else:
        default_locale = config.normalize(row.locale_default)
        data = LocalizedSiteSettings.model_validate(
            localize_record(row, "site_settings", params.locale, config, default_locale)
        )
    return Localized[LocalizedSiteSettings](
        data=data,
        locale=params.locale,
        requested_locale=params.locale,
        used_fallback=False,
    )
