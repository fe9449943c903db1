"""Query value objects exchanged between the resolver and the content store."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ContentFilter:
    """Filter set for list lookups.

    Attributes:
        search: Case-insensitive free-text term matched against the
            searchable columns of the content type
        category_id: Catalog category restriction
        year: Restrict to items published within this calendar year
        filters: Extra equality filters (e.g. ``project_status``); keys the
            content type does not allow are ignored by the store
        page: 1-based page number
        page_size: Items per page
    """

    search: str | None = None
    category_id: str | None = None
    year: int | None = None
    filters: Mapping[str, Any] = field(default_factory=dict)
    page: int = 1
    page_size: int = 12

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page number must be greater than 0")
        if self.page_size < 1:
            raise ValueError("Items per page must be greater than 0")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class ContentQuery:
    """A single content store query.

    ``locale=None`` means any locale; ``published_only=False`` includes drafts.
    """

    locale: str | None
    published_only: bool = True
    slug: str | None = None
    filter: ContentFilter = field(default_factory=ContentFilter)

    def with_locale(self, locale: str | None) -> "ContentQuery":
        return replace(self, locale=locale)
