"""Catalog API endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.deps import LocaleParams, get_locale_params, get_resolver
from app.api.v1.utils import build_page, localized_or_404
from app.content.query import ContentFilter
from app.content.resolver import LocaleResolver
from app.models.content import CatalogCategory, CatalogProduct
from app.models.response import Localized, Page

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=Page[CatalogProduct])
async def list_products(
    request: Request,
    search: Optional[str] = Query(None, description="Search in title, SKU and more"),
    category_id: Optional[str] = Query(None, description="Restrict to a category"),
    type: Optional[Literal["product", "service"]] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(8, ge=1, le=100),
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Page[CatalogProduct]:
    """List catalog products, featured first, then in catalog order."""
    content_filter = ContentFilter(
        search=search,
        category_id=category_id,
        filters={"type": type},
        page=page,
        page_size=page_size,
    )
    result = await resolver.resolve_list(
        "catalog_products", content_filter, params.locale, preview=params.preview
    )
    return build_page(
        request,
        result,
        CatalogProduct,
        {
            "search": search,
            "category_id": category_id,
            "type": type,
            "locale": params.locale,
        },
    )


@router.get("/categories", response_model=Page[CatalogCategory])
async def list_categories(
    request: Request,
    parent_id: Optional[str] = Query(None, description="Only children of a category"),
    page: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=500),
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Page[CatalogCategory]:
    content_filter = ContentFilter(
        filters={"parent_id": parent_id}, page=page, page_size=page_size
    )
    result = await resolver.resolve_list(
        "catalog_categories", content_filter, params.locale, preview=params.preview
    )
    return build_page(
        request,
        result,
        CatalogCategory,
        {"parent_id": parent_id, "locale": params.locale},
    )


@router.get("/{slug}", response_model=Localized[CatalogProduct])
async def get_product(
    slug: str,
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Localized[CatalogProduct]:
    result = await resolver.resolve_item(
        "catalog_products", slug, params.locale, preview=params.preview
    )
    return localized_or_404(result, CatalogProduct, f"Catalog item '{slug}'")
