"""Services API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.deps import LocaleParams, get_locale_params, get_resolver
from app.api.v1.utils import build_page, localized_or_404
from app.content.query import ContentFilter
from app.content.resolver import LocaleResolver
from app.models.content import Service
from app.models.response import Localized, Page

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=Page[Service])
async def list_services(
    request: Request,
    search: Optional[str] = Query(None, description="Search in title and description"),
    page: int = Query(1, ge=1),
    page_size: int = Query(12, ge=1, le=100),
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Page[Service]:
    """List services, featured first, then in editor-defined order."""
    content_filter = ContentFilter(search=search, page=page, page_size=page_size)
    result = await resolver.resolve_list(
        "services", content_filter, params.locale, preview=params.preview
    )
    return build_page(
        request, result, Service, {"search": search, "locale": params.locale}
    )


@router.get("/{slug}", response_model=Localized[Service])
async def get_service(
    slug: str,
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Localized[Service]:
    result = await resolver.resolve_item(
        "services", slug, params.locale, preview=params.preview
    )
    return localized_or_404(result, Service, f"Service '{slug}'")
