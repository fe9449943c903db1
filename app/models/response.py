"""Response envelopes shared by the API endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class LocaleInfo(BaseModel):
    """Which locale was asked for and which one was served."""

    locale: str = Field(
        ...,
        title="Locale",
        description="Locale of the returned content",
        examples=["en"],
    )
    requested_locale: str = Field(
        ...,
        title="Requested Locale",
        description="Locale asked for by the client, after normalization",
        examples=["kk"],
    )
    used_fallback: bool = Field(
        False,
        title="Used Fallback",
        description="True when the content was served from the default locale",
    )


class Page(LocaleInfo, Generic[T]):
    """Generic pagination model for all paginated responses."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "count": 12,
                "total": 30,
                "per_page": 12,
                "current_page": 1,
                "total_pages": 3,
                "links": {
                    "first": "/api/news?page=1&page_size=12",
                    "last": "/api/news?page=3&page_size=12",
                    "next": "/api/news?page=2&page_size=12",
                    "prev": None,
                },
                "locale": "en",
                "requested_locale": "kk",
                "used_fallback": True,
                "data": [],
            }
        },
    )

    count: int = Field(..., description="Number of items in current page", ge=0)
    total: int = Field(..., description="Total number of items across all pages", ge=0)
    per_page: int = Field(..., description="Number of items per page", ge=1)
    current_page: int = Field(..., description="Current page number", ge=1)
    total_pages: int = Field(..., description="Total number of pages", ge=1)
    links: dict[str, str | None] = Field(
        ..., description="Navigation links (first, last, next, prev)"
    )
    data: list[T] = Field(..., description="Items in the current page")


class Localized(LocaleInfo, Generic[T]):
    """Single resolved item with its locale details."""

    data: T


class ItemsPage(BaseModel, Generic[T]):
    """Admin listing with total count."""

    items: list[T]
    total: int
    page: int = 1
    page_size: int
    total_pages: int = 1


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Error type", examples=["ContentNotFoundError"])
    message: str = Field(..., description="Human readable detail")
    status_code: int = Field(..., examples=[404])
    correlation_id: str = Field(..., description="Request correlation id")
