"""Schemas for the about page: multi-locale items, partners and blocks."""

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .content import (
    AboutStory,
    AboutTeamMember,
    AboutTimeline,
    AboutValue,
    ContentStatus,
    partial_model,
)

AboutItemKind = Literal["distribution", "certificate", "license"]


class AboutItemFields(BaseModel):
    """Editable fields of an about item; every locale variant is optional."""

    model_config = ConfigDict(extra="forbid")

    kind: AboutItemKind
    title_en: Optional[str] = None
    title_ru: Optional[str] = None
    title_kk: Optional[str] = None
    description_en: Optional[str] = None
    description_ru: Optional[str] = None
    description_kk: Optional[str] = None
    issuer_en: Optional[str] = None
    issuer_ru: Optional[str] = None
    issuer_kk: Optional[str] = None
    date: Optional[dt.date] = None
    image_url: Optional[str] = None
    pdf_url: Optional[str] = None
    is_published: bool = True
    order_index: int = 0


AboutItemUpdate = partial_model(AboutItemFields, "AboutItemUpdate")


class AboutItem(AboutItemFields):
    """Stored about item with all locale variants (admin view)."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int
    created_at: dt.datetime
    updated_at: dt.datetime
    missing_title_locales: list[str] = Field(
        default_factory=list,
        description="Locales without a title, for editors to fill in",
    )


class LocalizedAboutItem(BaseModel):
    """About item collapsed to a single locale."""

    id: int
    kind: AboutItemKind
    title: str
    description: str
    issuer: str
    date: Optional[dt.date] = None
    image_url: Optional[str] = None
    pdf_url: Optional[str] = None
    order_index: int
    created_at: dt.datetime
    updated_at: dt.datetime
    locale: str


class ReorderEntry(BaseModel):
    id: int
    order_index: int


class ReorderRequest(BaseModel):
    items: list[ReorderEntry] = Field(..., min_length=1)


class PartnerFields(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    logo: Optional[str] = None
    website_url: Optional[str] = None
    order: int = 0
    status: ContentStatus = "published"


PartnerUpdate = partial_model(PartnerFields, "PartnerUpdate")


class Partner(PartnerFields):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    created_at: dt.datetime
    updated_at: dt.datetime


class AboutBlockFields(BaseModel):
    model_config = ConfigDict(extra="forbid")

    block_key: str = Field(..., min_length=1, max_length=100)
    title_en: Optional[str] = None
    title_ru: Optional[str] = None
    title_kk: Optional[str] = None
    content_en: Optional[str] = None
    content_ru: Optional[str] = None
    content_kk: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    status: ContentStatus = "draft"
    published_at: Optional[dt.datetime] = None


AboutBlockUpdate = partial_model(AboutBlockFields, "AboutBlockUpdate")


class AboutBlock(AboutBlockFields):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    updated_at: dt.datetime


class LocalizedAboutBlock(BaseModel):
    id: str
    block_key: str
    title: str
    content: str
    gallery_images: Optional[list[str]] = None
    published_at: Optional[dt.datetime] = None
    updated_at: dt.datetime
    locale: str


class AboutSection(BaseModel):
    """One resolved section of the general about page."""

    locale: Optional[str] = None
    used_fallback: bool = False


class AboutGeneral(BaseModel):
    """Everything the about page shows apart from the multi-locale items."""

    requested_locale: str
    story: Optional[AboutStory] = None
    values: list[AboutValue] = Field(default_factory=list)
    timeline: list[AboutTimeline] = Field(default_factory=list)
    team: list[AboutTeamMember] = Field(default_factory=list)
    partners: list[Partner] = Field(default_factory=list)
    blocks: list[LocalizedAboutBlock] = Field(default_factory=list)
    sections: dict[str, AboutSection] = Field(
        default_factory=dict,
        description="Locale served for each per-locale section",
    )
