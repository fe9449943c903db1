"""News API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.deps import LocaleParams, get_locale_params, get_resolver
from app.api.v1.utils import build_page, localized_or_404
from app.content.query import ContentFilter
from app.content.resolver import LocaleResolver
from app.models.content import News
from app.models.response import Localized, Page

router = APIRouter(prefix="/news", tags=["news"])


@router.get("", response_model=Page[News])
async def list_news(
    request: Request,
    search: Optional[str] = Query(None, description="Search in title and excerpt"),
    year: Optional[int] = Query(None, ge=1900, le=2200, description="Publication year"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(12, ge=1, le=100, description="Items per page"),
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Page[News]:
    """
    List published news, featured first, newest first.

    Falls back to the default locale when the requested one has no matching
    article.
    """
    content_filter = ContentFilter(
        search=search, year=year, page=page, page_size=page_size
    )
    result = await resolver.resolve_list(
        "news", content_filter, params.locale, preview=params.preview
    )
    return build_page(
        request, result, News, {"search": search, "year": year, "locale": params.locale}
    )


@router.get("/{slug}", response_model=Localized[News])
async def get_news(
    slug: str,
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Localized[News]:
    """Get a news article by slug."""
    result = await resolver.resolve_item(
        "news", slug, params.locale, preview=params.preview
    )
    return localized_or_404(result, News, f"News article '{slug}'")
