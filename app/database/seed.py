"""Initial data: the admin account and default home page settings."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.security import hash_password

from .models import SiteSettingsModel, UserModel
from .repositories import SiteSettingsRepository, UserRepository

logger = get_logger("app.database.seed")

DEFAULT_SITE_SETTINGS: dict[str, Any] = {
    "hero_title_en": "Marine Support Services",
    "hero_title_ru": "Морские Вспомогательные Услуги",
    "hero_title_kk": "Теңіз Қолдау Қызметтері",
    "hero_subtitle_en": "Leading provider of marine and industrial services in Kazakhstan",
    "hero_subtitle_ru": "Ведущий поставщик морских и промышленных услуг в Казахстане",
    "hero_subtitle_kk": "Қазақстандағы теңіз және өнеркәсіп қызметтерінің жетекші провайдері",
    "cta1_text_en": "Our Services",
    "cta1_text_ru": "Наши Услуги",
    "cta1_text_kk": "Біздің Қызметтеріміз",
    "cta1_link": "/services",
    "cta2_text_en": "Contact Us",
    "cta2_text_ru": "Связаться с Нами",
    "cta2_text_kk": "Бізбен Байланысыңыз",
    "cta2_link": "/contacts",
    "locale_default": "en",
    "hero_overlay_opacity": 0.45,
}


async def seed_admin(
    session: AsyncSession, email: Optional[str], password: Optional[str]
) -> Optional[UserModel]:
    """Create the admin account unless it already exists.

    Returns:
        The created user, or None when nothing was created
    """
    if not email or not password:
        logger.info("admin_seed_skipped", reason="ADMIN_EMAIL and ADMIN_PASSWORD not set")
        return None

    users = UserRepository(session)
    if await users.get_by_email(email) is not None:
        logger.info("admin_seed_skipped", reason="admin exists", email=email)
        return None

    admin = await users.create(
        email=email.strip().lower(),
        password_hash=hash_password(password),
        role="admin",
    )
    logger.info("admin_created", email=admin.email)
    return admin


async def seed_site_settings(session: AsyncSession) -> Optional[SiteSettingsModel]:
    """Create the default settings row when the table is empty."""
    repository = SiteSettingsRepository(session)
    if await repository.latest() is not None:
        return None
    created = await repository.create(**DEFAULT_SITE_SETTINGS)
    logger.info("site_settings_created", id=created.id)
    return created
