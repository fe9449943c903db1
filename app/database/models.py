"""SQLAlchemy models for site content."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from .base import Base

CONTENT_STATUSES = ("draft", "published")
ABOUT_ITEM_KINDS = ("distribution", "certificate", "license")
USER_ROLES = ("admin", "editor")


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the ``DateTime`` columns."""
    return datetime.now(UTC).replace(tzinfo=None)


def new_id() -> str:
    return str(uuid4())


class LocalizedContentMixin:
    """Columns shared by every per-locale content table."""

    id = Column(Text, primary_key=True, default=new_id, nullable=False)
    locale = Column(Text, nullable=False, index=True)
    status = Column(
        Enum(*CONTENT_STATUSES, name="content_status_enum"),
        nullable=False,
        default="draft",
        index=True,
    )
    published_at = Column(DateTime, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class NewsModel(LocalizedContentMixin, Base):
    """News article, one row per locale."""

    __tablename__ = "news"
    __table_args__ = (UniqueConstraint("slug", "locale", name="uq_news_slug_locale"),)

    slug = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    content_rich = Column(JSON, nullable=True)
    featured_image = Column(Text, nullable=True)
    gallery_images = Column(JSON, nullable=True)
    video_url = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)


class ProjectModel(LocalizedContentMixin, Base):
    """Completed or ongoing project, one row per locale."""

    __tablename__ = "projects"
    __table_args__ = (
        UniqueConstraint("slug", "locale", name="uq_projects_slug_locale"),
    )

    slug = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    content_rich = Column(JSON, nullable=True)
    featured_image = Column(Text, nullable=True)
    gallery_images = Column(JSON, nullable=True)
    client_name = Column(Text, nullable=True)
    project_location = Column(Text, nullable=True)
    project_status = Column(Text, nullable=True)
    project_date = Column(Date, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)


class ServiceModel(LocalizedContentMixin, Base):
    """Company service offering, one row per locale."""

    __tablename__ = "services"
    __table_args__ = (
        UniqueConstraint("slug", "locale", name="uq_services_slug_locale"),
    )

    slug = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    content_rich = Column(JSON, nullable=True)
    featured_image = Column(Text, nullable=True)
    icon_key = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)


class CatalogCategoryModel(LocalizedContentMixin, Base):
    """Catalog category; may nest under a parent category."""

    __tablename__ = "catalog_categories"
    __table_args__ = (
        UniqueConstraint("slug", "locale", name="uq_catalog_categories_slug_locale"),
    )

    slug = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    parent_id = Column(Text, ForeignKey("catalog_categories.id"), nullable=True)
    order = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)

    products = relationship("CatalogProductModel", back_populates="category")


class CatalogProductModel(LocalizedContentMixin, Base):
    """Catalog product, one row per locale."""

    __tablename__ = "catalog_products"
    __table_args__ = (
        UniqueConstraint("slug", "locale", name="uq_catalog_products_slug_locale"),
    )

    slug = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    content_rich = Column(JSON, nullable=True)
    category_id = Column(Text, ForeignKey("catalog_categories.id"), nullable=True)
    type = Column(Text, nullable=False, default="product")
    sku = Column(Text, nullable=True)
    manufacturer = Column(Text, nullable=True)
    specifications = Column(JSON, nullable=True)
    tags = Column(JSON, nullable=True)
    featured_image = Column(Text, nullable=True)
    gallery_images = Column(JSON, nullable=True)
    pdf_files = Column(JSON, nullable=True)
    video_url = Column(Text, nullable=True)
    is_ctkz = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)

    category = relationship("CatalogCategoryModel", back_populates="products")


class AboutStoryModel(LocalizedContentMixin, Base):
    __tablename__ = "about_story"

    title = Column(Text, nullable=False)
    body_rich = Column(JSON, nullable=True)
    hero_image = Column(Text, nullable=True)


class AboutValueModel(LocalizedContentMixin, Base):
    __tablename__ = "about_values"

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    icon_key = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)


class AboutTimelineModel(LocalizedContentMixin, Base):
    __tablename__ = "about_timeline"

    year = Column(Integer, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    image = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)


class AboutTeamModel(LocalizedContentMixin, Base):
    __tablename__ = "about_team"

    name = Column(Text, nullable=False)
    role = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    photo = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)


class AboutComplianceModel(LocalizedContentMixin, Base):
    __tablename__ = "about_compliance"

    title = Column(Text, nullable=False)
    badge_icon = Column(Text, nullable=True)
    link_url = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)


class ContactModel(LocalizedContentMixin, Base):
    """Published company contact details for one locale."""

    __tablename__ = "contacts"

    company_name = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    working_hours = Column(Text, nullable=False, default="")
    map_link = Column(Text, nullable=True)
    additional_info = Column(JSON, nullable=True)


class AboutPartnerModel(Base):
    """Partner logo; shown in every locale."""

    __tablename__ = "about_partners"

    id = Column(Text, primary_key=True, default=new_id, nullable=False)
    name = Column(Text, nullable=False)
    logo = Column(Text, nullable=True)
    website_url = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    status = Column(
        Enum(*CONTENT_STATUSES, name="content_status_enum"),
        nullable=False,
        default="published",
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class AboutBlockModel(Base):
    """Free-form about page block with per-locale sibling columns."""

    __tablename__ = "about_blocks"

    id = Column(Text, primary_key=True, default=new_id, nullable=False)
    block_key = Column(Text, nullable=False, unique=True)
    title_en = Column(Text, nullable=True)
    title_ru = Column(Text, nullable=True)
    title_kk = Column(Text, nullable=True)
    content_en = Column(Text, nullable=True)
    content_ru = Column(Text, nullable=True)
    content_kk = Column(Text, nullable=True)
    gallery_images = Column(JSON, nullable=True)
    status = Column(
        Enum(*CONTENT_STATUSES, name="content_status_enum"),
        nullable=False,
        default="draft",
    )
    published_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class AboutItemModel(Base):
    """Distribution, certificate or license entry holding every locale.

    Nothing requires any ``title_*`` variant to be filled in.
    """

    __tablename__ = "about_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(
        Enum(*ABOUT_ITEM_KINDS, name="about_item_kind_enum"),
        nullable=False,
        index=True,
    )
    title_en = Column(Text, nullable=True)
    title_ru = Column(Text, nullable=True)
    title_kk = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    description_ru = Column(Text, nullable=True)
    description_kk = Column(Text, nullable=True)
    issuer_en = Column(Text, nullable=True)
    issuer_ru = Column(Text, nullable=True)
    issuer_kk = Column(Text, nullable=True)
    date = Column(Date, nullable=True)
    image_url = Column(Text, nullable=True)
    pdf_url = Column(Text, nullable=True)
    is_published = Column(Boolean, nullable=False, default=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class SiteSettingsModel(Base):
    """Home page hero and call-to-action settings."""

    __tablename__ = "site_settings"

    id = Column(Text, primary_key=True, default=new_id, nullable=False)
    hero_title_en = Column(Text, nullable=True)
    hero_title_ru = Column(Text, nullable=True)
    hero_title_kk = Column(Text, nullable=True)
    hero_subtitle_en = Column(Text, nullable=True)
    hero_subtitle_ru = Column(Text, nullable=True)
    hero_subtitle_kk = Column(Text, nullable=True)
    cta1_text_en = Column(Text, nullable=True)
    cta1_text_ru = Column(Text, nullable=True)
    cta1_text_kk = Column(Text, nullable=True)
    cta1_link = Column(Text, nullable=True)
    cta2_text_en = Column(Text, nullable=True)
    cta2_text_ru = Column(Text, nullable=True)
    cta2_text_kk = Column(Text, nullable=True)
    cta2_link = Column(Text, nullable=True)
    hero_bg_url = Column(Text, nullable=True)
    hero_overlay_opacity = Column(Float, nullable=True)
    locale_default = Column(Text, nullable=False, default="en")
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class ContactRequestModel(Base):
    """Submitted contact form."""

    __tablename__ = "contact_requests"

    id = Column(Text, primary_key=True, default=new_id, nullable=False)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    meta = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class UserModel(Base):
    """CMS operator account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    role = Column(
        Enum(*USER_ROLES, name="user_role_enum"),
        nullable=False,
        default="editor",
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
