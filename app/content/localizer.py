"""Per-field localization for records storing locale variants as sibling columns.

Multi-locale entities (about items, about blocks, site settings) keep one
column per locale, e.g. ``title_en``, ``title_ru``, ``title_kk``. The tables
below list which base fields of each entity are localized and which are
copied as-is, so callers never assemble column names themselves.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from app.content.locales import SUPPORTED_LOCALES, LocaleConfig

LOCALIZED_FIELDS: dict[str, tuple[str, ...]] = {
    "about_items": ("title", "description", "issuer"),
    "about_blocks": ("title", "content"),
    "site_settings": ("hero_title", "hero_subtitle", "cta1_text", "cta2_text"),
}

SHARED_FIELDS: dict[str, tuple[str, ...]] = {
    "about_items": (
        "id",
        "kind",
        "date",
        "image_url",
        "pdf_url",
        "order_index",
        "created_at",
        "updated_at",
    ),
    "about_blocks": ("id", "block_key", "gallery_images", "published_at", "updated_at"),
    "site_settings": (
        "id",
        "cta1_link",
        "cta2_link",
        "hero_bg_url",
        "hero_overlay_opacity",
        "updated_at",
    ),
}


def column_name(field: str, locale: str) -> str:
    """Name of the sibling column holding ``field`` in ``locale``."""
    return f"{field}_{locale}"


def locale_columns(field: str, locales: Iterable[str] = SUPPORTED_LOCALES) -> list[str]:
    """All sibling column names of a localized field."""
    return [column_name(field, locale) for locale in locales]


def _read(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def localize_field(
    record: Any,
    field: str,
    requested_locale: str,
    default_locale: str | None = None,
    config: LocaleConfig | None = None,
) -> str:
    """Pick the best available value of a localized field.

    Priority: requested locale, then the default locale, then every known
    locale in the configured preference order. Returns an empty string when
    no variant holds a value.

    Args:
        record: Mapping or ORM object with ``<field>_<locale>`` attributes
        field: Base field name, e.g. ``"title"``
        requested_locale: Locale asked for by the caller
        default_locale: Fallback locale; defaults to the config's
        config: Locale configuration; defaults to ``LocaleConfig()``

    Returns:
        The selected value as a string
    """
    config = config or LocaleConfig()
    for locale in config.preference_order(requested_locale, default_locale):
        value = _read(record, column_name(field, locale))
        if _present(value):
            return str(value)
    return ""


def localize_record(
    record: Any,
    entity: str,
    requested_locale: str,
    config: LocaleConfig | None = None,
    default_locale: str | None = None,
) -> dict[str, Any]:
    """Collapse a multi-locale record into a single-locale dict.

    Raises:
        KeyError: If ``entity`` has no localized field table
    """
    fields = LOCALIZED_FIELDS[entity]
    result: dict[str, Any] = {
        name: _read(record, name) for name in SHARED_FIELDS.get(entity, ())
    }
    for field in fields:
        result[field] = localize_field(
            record, field, requested_locale, default_locale, config
        )
    result["locale"] = requested_locale
    return result


def missing_locales(
    record: Any, field: str, config: LocaleConfig | None = None
) -> list[str]:
    """Locales whose variant of ``field`` is empty."""
    config = config or LocaleConfig()
    return [
        locale
        for locale in config.locales
        if not _present(_read(record, column_name(field, locale)))
    ]
