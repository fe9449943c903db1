"""Projects API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.deps import LocaleParams, get_locale_params, get_resolver
from app.api.v1.utils import build_page, localized_or_404
from app.content.query import ContentFilter
from app.content.resolver import LocaleResolver
from app.models.content import Project
from app.models.response import Localized, Page

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=Page[Project])
async def list_projects(
    request: Request,
    search: Optional[str] = Query(
        None, description="Search in title, description and client name"
    ),
    project_status: Optional[str] = Query(
        None, description="Exact project status; 'all' disables the filter"
    ),
    location: Optional[str] = Query(None, description="Part of the project location"),
    page: int = Query(1, ge=1),
    page_size: int = Query(12, ge=1, le=100),
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Page[Project]:
    """List projects, featured first, most recent project date first."""
    filters = {
        "project_status": None if project_status == "all" else project_status,
        "project_location": location,
    }
    content_filter = ContentFilter(
        search=search, filters=filters, page=page, page_size=page_size
    )
    result = await resolver.resolve_list(
        "projects", content_filter, params.locale, preview=params.preview
    )
    return build_page(
        request,
        result,
        Project,
        {
            "search": search,
            "project_status": project_status,
            "location": location,
            "locale": params.locale,
        },
    )


@router.get("/{slug}", response_model=Localized[Project])
async def get_project(
    slug: str,
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Localized[Project]:
    result = await resolver.resolve_item(
        "projects", slug, params.locale, preview=params.preview
    )
    return localized_or_404(result, Project, f"Project '{slug}'")
