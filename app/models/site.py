"""Schemas for home page site settings."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .content import Locale


class SiteSettingsUpdate(BaseModel):
    """Upsert payload; omitted fields keep their stored value."""

    model_config = ConfigDict(extra="forbid")

    hero_title_en: Optional[str] = None
    hero_title_ru: Optional[str] = None
    hero_title_kk: Optional[str] = None
    hero_subtitle_en: Optional[str] = None
    hero_subtitle_ru: Optional[str] = None
    hero_subtitle_kk: Optional[str] = None
    cta1_text_en: Optional[str] = None
    cta1_text_ru: Optional[str] = None
    cta1_text_kk: Optional[str] = None
    cta1_link: Optional[str] = None
    cta2_text_en: Optional[str] = None
    cta2_text_ru: Optional[str] = None
    cta2_text_kk: Optional[str] = None
    cta2_link: Optional[str] = None
    hero_bg_url: Optional[str] = None
    hero_overlay_opacity: Optional[float] = Field(None, ge=0, le=1)
    locale_default: Optional[Locale] = None


class SiteSettings(SiteSettingsUpdate):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    created_at: datetime
    updated_at: datetime


class LocalizedSiteSettings(BaseModel):
    """Site settings collapsed to a single locale."""

    id: Optional[str] = None
    hero_title: str = ""
    hero_subtitle: str = ""
    cta1_text: str = ""
    cta1_link: Optional[str] = None
    cta2_text: str = ""
    cta2_link: Optional[str] = None
    hero_bg_url: Optional[str] = None
    hero_overlay_opacity: Optional[float] = None
    updated_at: Optional[datetime] = None
    locale: str
