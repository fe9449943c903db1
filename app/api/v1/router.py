"""API v1 router module."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1 import (
    about,
    auth,
    catalog,
    contacts,
    news,
    projects,
    services,
    site_settings,
    uploads,
)
from app.api.v1.admin import router as admin_router
from app.core.db import get_session
from app.core.logging import get_logger

logger = get_logger("app.api.v1.router")

router = APIRouter(default_response_class=JSONResponse)

router.include_router(news.router)
router.include_router(projects.router)
router.include_router(services.router)
router.include_router(catalog.router)
router.include_router(about.router)
router.include_router(contacts.router)
router.include_router(site_settings.router)
router.include_router(auth.router)
router.include_router(uploads.router)
router.include_router(admin_router)


@router.get("/health", tags=["health"])
async def health_check(session: AsyncSession = Depends(get_session)) -> dict[str, Any]:
    """
    Health check endpoint.

    Returns
    -------
        Dict with ``ok``, the server time and the database state
    """
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error("health_database_unreachable", error=str(e))
        database = "unavailable"

    return {
        "ok": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": database,
    }
