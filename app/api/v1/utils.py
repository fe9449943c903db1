"""Utility functions for API endpoints."""

from typing import Any, Optional, TypeVar
from urllib.parse import urlencode

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from app.content.resolver import ResolvedItem, ResolvedList
from app.core.exceptions import ContentNotFoundError
from app.models.response import Localized, Page

ModelT = TypeVar("ModelT", bound=BaseModel)


def create_pagination_links(
    request: Request,
    current_page: int,
    total_pages: int,
    page_size: int,
    extra_params: Optional[dict[str, Any]] = None,
) -> dict[str, Optional[str]]:
    """
    Create pagination links for API responses.

    Args:
        request: FastAPI request object
        current_page: Current page number
        total_pages: Total number of pages
        page_size: Items per page
        extra_params: Additional query parameters to include

    Returns:
        Dictionary containing pagination links
    """
    # Remove None values from extra_params
    params_base = {k: v for k, v in (extra_params or {}).items() if v not in (None, "")}

    # Base URL without query parameters
    base_url = str(request.url).split("?")[0]

    def create_link(page: int) -> str:
        params: dict[str, Any] = {"page": page, "page_size": page_size}
        params.update(params_base)
        return f"{base_url}?{urlencode(params)}"

    return {
        "first": create_link(1),
        "last": create_link(total_pages),
        "next": create_link(current_page + 1) if current_page < total_pages else None,
        "prev": create_link(current_page - 1) if current_page > 1 else None,
    }


def build_page(
    request: Request,
    result: ResolvedList,
    model: type[ModelT],
    extra_params: Optional[dict[str, Any]] = None,
) -> Page[ModelT]:
    """Wrap a resolved list in the paginated response envelope."""
    content_filter = result.filter
    data = [model.model_validate(item) for item in result.items]
    return Page[model](  # type: ignore[valid-type]
        count=len(data),
        total=result.total,
        per_page=content_filter.page_size,
        current_page=content_filter.page,
        total_pages=result.total_pages,
        links=create_pagination_links(
            request,
            content_filter.page,
            result.total_pages,
            content_filter.page_size,
            extra_params,
        ),
        locale=result.locale,
        requested_locale=result.requested_locale,
        used_fallback=result.used_fallback,
        data=data,
    )


def localized_or_404(
    result: ResolvedItem, model: type[ModelT], what: str
) -> Localized[ModelT]:
    """Wrap a resolved item, or raise when nothing matched in either locale.

    Raises:
        ContentNotFoundError: If the lookup found nothing
    """
    if not result.found or result.locale is None:
        raise ContentNotFoundError(f"{what} not found")
    return Localized[model](  # type: ignore[valid-type]
        data=model.model_validate(result.item),
        locale=result.locale,
        requested_locale=result.requested_locale,
        used_fallback=result.used_fallback,
    )


def validate_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a request body against a schema chosen at runtime.

    Raises:
        RequestValidationError: With the schema's errors located in the body
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors = [
            {**error, "loc": ("body", *error.get("loc", ()))} for error in e.errors()
        ]
        raise RequestValidationError(errors) from None
