"""Schemas for per-locale content items."""

from datetime import date, datetime
from typing import Annotated, Any, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, create_model

from app.content.locales import SUPPORTED_LOCALES

ContentStatus = Literal["draft", "published"]


def _check_locale(value: str) -> str:
    value = value.strip().lower()
    if value not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale '{value}'")
    return value


Locale = Annotated[str, AfterValidator(_check_locale)]
Slug = Annotated[
    str, Field(min_length=1, max_length=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
]


class LocalizedFields(BaseModel):
    """Fields every per-locale content row accepts."""

    model_config = ConfigDict(extra="forbid")

    locale: Locale
    status: ContentStatus = "draft"
    published_at: Optional[datetime] = None


class ContentRecord(BaseModel):
    """Database-assigned fields of a stored row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class NewsFields(LocalizedFields):
    slug: Slug
    title: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    content_rich: Optional[Any] = None
    featured_image: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    video_url: Optional[str] = None
    order: int = 0
    is_featured: bool = False


class ProjectFields(LocalizedFields):
    slug: Slug
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content_rich: Optional[Any] = None
    featured_image: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    client_name: Optional[str] = None
    project_location: Optional[str] = None
    project_status: Optional[str] = None
    project_date: Optional[date] = None
    order: int = 0
    is_featured: bool = False


class ServiceFields(LocalizedFields):
    slug: Slug
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content_rich: Optional[Any] = None
    featured_image: Optional[str] = None
    icon_key: Optional[str] = None
    order_index: int = 0
    is_featured: bool = False


class CatalogCategoryFields(LocalizedFields):
    slug: Slug
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    parent_id: Optional[str] = None
    order: int = 0
    is_featured: bool = False


class CatalogProductFields(LocalizedFields):
    slug: Slug
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content_rich: Optional[Any] = None
    category_id: Optional[str] = None
    type: Literal["product", "service"] = "product"
    sku: Optional[str] = None
    manufacturer: Optional[str] = None
    specifications: Optional[dict[str, Any]] = None
    tags: Optional[list[str]] = None
    featured_image: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    pdf_files: Optional[list[Any]] = None
    video_url: Optional[str] = None
    is_ctkz: bool = False
    order: int = 0
    is_featured: bool = False


class AboutStoryFields(LocalizedFields):
    title: str = Field(..., min_length=1)
    body_rich: Optional[Any] = None
    hero_image: Optional[str] = None


class AboutValueFields(LocalizedFields):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon_key: Optional[str] = None
    order: int = 0


class AboutTimelineFields(LocalizedFields):
    year: int = Field(..., ge=1800, le=2200)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    order: int = 0


class AboutTeamFields(LocalizedFields):
    name: str = Field(..., min_length=1)
    role: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None
    order: int = 0


class AboutComplianceFields(LocalizedFields):
    title: str = Field(..., min_length=1)
    badge_icon: Optional[str] = None
    link_url: Optional[str] = None
    order: int = 0


class ContactFields(LocalizedFields):
    company_name: str = Field(..., min_length=1)
    address: str
    phone: str
    email: str
    working_hours: str = ""
    map_link: Optional[str] = None
    additional_info: Optional[dict[str, Any]] = None


class News(NewsFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class Project(ProjectFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class Service(ServiceFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class CatalogCategory(CatalogCategoryFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class CatalogProduct(CatalogProductFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AboutStory(AboutStoryFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AboutValue(AboutValueFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AboutTimeline(AboutTimelineFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AboutTeamMember(AboutTeamFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AboutCompliance(AboutComplianceFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class Contact(ContactFields, ContentRecord):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


def partial_model(model: type[BaseModel], name: str) -> type[BaseModel]:
    """Copy of ``model`` with every field optional, for partial updates."""
    fields: dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        annotation: Any = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (Optional[annotation], None)
    return create_model(name, __config__=ConfigDict(extra="forbid"), **fields)


class ContentSchemas:
    """Create, update and read schemas of one content type."""

    def __init__(self, fields: type[BaseModel], read: type[BaseModel]):
        self.create = fields
        self.update = partial_model(fields, f"{fields.__name__}Update")
        self.read = read


CONTENT_SCHEMAS: dict[str, ContentSchemas] = {
    "news": ContentSchemas(NewsFields, News),
    "projects": ContentSchemas(ProjectFields, Project),
    "services": ContentSchemas(ServiceFields, Service),
    "catalog_products": ContentSchemas(CatalogProductFields, CatalogProduct),
    "catalog_categories": ContentSchemas(CatalogCategoryFields, CatalogCategory),
    "about_story": ContentSchemas(AboutStoryFields, AboutStory),
    "about_values": ContentSchemas(AboutValueFields, AboutValue),
    "about_timeline": ContentSchemas(AboutTimelineFields, AboutTimeline),
    "about_team": ContentSchemas(AboutTeamFields, AboutTeamMember),
    "about_compliance": ContentSchemas(AboutComplianceFields, AboutCompliance),
    "contacts": ContentSchemas(ContactFields, Contact),
}
