"""Shared dependencies: database-backed services, locale handling and auth."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.content.locales import LocaleConfig
from app.content.resolver import LocaleResolver
from app.core.config import settings
from app.core.db import get_session
from app.core.exceptions import AuthenticationError, PermissionDeniedError
from app.core.logging import get_logger
from app.core.security import decode_session_token
from app.database.models import UserModel
from app.database.repositories import ContentStore, UserRepository

logger = get_logger("app.api.v1.deps")


def get_locale_config() -> LocaleConfig:
    return settings.locale_config()


async def get_resolver(
    session: AsyncSession = Depends(get_session),
    config: LocaleConfig = Depends(get_locale_config),
) -> LocaleResolver:
    """Locale resolver over the request's database session."""
    return LocaleResolver(ContentStore(session), config)


async def _user_from_cookie(request: Request, session: AsyncSession) -> UserModel:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise AuthenticationError("Authentication required")

    user_id = decode_session_token(token)
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise AuthenticationError("Invalid session")
    return user


async def get_current_user(
    request: Request, session: AsyncSession = Depends(get_session)
) -> UserModel:
    """The signed-in user.

    Raises:
        AuthenticationError: If the session cookie is missing or invalid
    """
    return await _user_from_cookie(request, session)


async def get_optional_user(
    request: Request, session: AsyncSession = Depends(get_session)
) -> Optional[UserModel]:
    """The signed-in user, or None for anonymous visitors."""
    try:
        return await _user_from_cookie(request, session)
    except AuthenticationError:
        return None


def require_roles(*roles: str) -> Callable[..., Awaitable[UserModel]]:
    """Dependency factory admitting only users with one of ``roles``."""

    async def dependency(user: UserModel = Depends(get_current_user)) -> UserModel:
        if user.role not in roles:
            logger.warning("permission_denied", user_id=user.id, role=user.role)
            raise PermissionDeniedError("Insufficient permissions")
        return user

    return dependency


require_admin = require_roles("admin")
require_staff = require_roles("admin", "editor")


@dataclass(frozen=True)
class LocaleParams:
    """Locale request parameters after normalization.

    Attributes:
        locale: Supported locale to resolve against
        preview: Whether unpublished content may be returned
    """

    locale: str
    preview: bool = False


async def get_locale_params(
    locale: Optional[str] = Query(
        None, description="Requested locale; unknown values fall back to the default"
    ),
    preview: bool = Query(False, description="Include drafts (staff only)"),
    user: Optional[UserModel] = Depends(get_optional_user),
    config: LocaleConfig = Depends(get_locale_config),
) -> LocaleParams:
    """Normalize ``locale`` and decide whether ``preview`` is honoured."""
    if preview and settings.PREVIEW_REQUIRES_AUTH and user is None:
        logger.debug("preview_ignored", reason="anonymous")
        preview = False
    return LocaleParams(locale=config.normalize(locale), preview=preview)
