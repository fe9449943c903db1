"""Admin API, mounted under ``/admin``."""

from fastapi import APIRouter

from . import about_items, blocks, contact_requests, content, partners, site_settings

router = APIRouter(prefix="/admin")
router.include_router(content.router)
router.include_router(about_items.router)
router.include_router(partners.router)
router.include_router(blocks.router)
router.include_router(site_settings.router)
router.include_router(contact_requests.router)
