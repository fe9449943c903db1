"""Registry of per-locale content types served through the content store."""

from dataclasses import dataclass
from typing import Any

from app.core.exceptions import UnknownContentTypeError

from .models import (
    AboutComplianceModel,
    AboutStoryModel,
    AboutTeamModel,
    AboutTimelineModel,
    AboutValueModel,
    CatalogCategoryModel,
    CatalogProductModel,
    ContactModel,
    NewsModel,
    ProjectModel,
    ServiceModel,
)


@dataclass(frozen=True)
class ContentType:
    """How one content table is searched, filtered and ordered.

    Attributes:
        name: Public content type name
        model: ORM model class
        search_fields: Columns matched by the free-text search term
        order_by: ``(column, direction)`` pairs, direction ``"asc"``/``"desc"``
        filter_fields: Columns accepted as extra equality filters
        contains_fields: Columns accepted as extra substring filters
    """

    name: str
    model: Any
    search_fields: tuple[str, ...] = ()
    order_by: tuple[tuple[str, str], ...] = (("created_at", "desc"),)
    filter_fields: tuple[str, ...] = ()
    contains_fields: tuple[str, ...] = ()

    @property
    def has_slug(self) -> bool:
        return hasattr(self.model, "slug")


CONTENT_TYPES: dict[str, ContentType] = {
    ct.name: ct
    for ct in (
        ContentType(
            name="news",
            model=NewsModel,
            search_fields=("title", "excerpt"),
            order_by=(
                ("is_featured", "desc"),
                ("published_at", "desc"),
                ("created_at", "desc"),
            ),
        ),
        ContentType(
            name="projects",
            model=ProjectModel,
            search_fields=("title", "description", "client_name"),
            order_by=(
                ("is_featured", "desc"),
                ("project_date", "desc"),
                ("created_at", "desc"),
            ),
            filter_fields=("project_status",),
            contains_fields=("project_location",),
        ),
        ContentType(
            name="services",
            model=ServiceModel,
            search_fields=("title", "description"),
            order_by=(
                ("is_featured", "desc"),
                ("order_index", "asc"),
                ("created_at", "desc"),
            ),
        ),
        ContentType(
            name="catalog_products",
            model=CatalogProductModel,
            search_fields=("title", "description", "sku", "manufacturer"),
            order_by=(("is_featured", "desc"), ("order", "asc"), ("created_at", "desc")),
            filter_fields=("type", "is_ctkz"),
        ),
        ContentType(
            name="catalog_categories",
            model=CatalogCategoryModel,
            search_fields=("name", "description"),
            order_by=(("order", "asc"), ("name", "asc")),
            filter_fields=("parent_id",),
        ),
        ContentType(
            name="about_story",
            model=AboutStoryModel,
            order_by=(("updated_at", "desc"),),
        ),
        ContentType(
            name="about_values",
            model=AboutValueModel,
            search_fields=("title", "description"),
            order_by=(("order", "asc"),),
        ),
        ContentType(
            name="about_timeline",
            model=AboutTimelineModel,
            search_fields=("title", "description"),
            order_by=(("year", "asc"), ("order", "asc")),
        ),
        ContentType(
            name="about_team",
            model=AboutTeamModel,
            search_fields=("name", "role"),
            order_by=(("order", "asc"),),
        ),
        ContentType(
            name="about_compliance",
            model=AboutComplianceModel,
            search_fields=("title",),
            order_by=(("order", "asc"),),
        ),
        ContentType(
            name="contacts",
            model=ContactModel,
            order_by=(("updated_at", "desc"),),
        ),
    )
}


def get_content_type(name: str) -> ContentType:
    """Look up a registered content type.

    Raises:
        UnknownContentTypeError: If the name is not registered
    """
    try:
        return CONTENT_TYPES[name]
    except KeyError:
        raise UnknownContentTypeError(f"Unknown content type '{name}'") from None
