"""Locale resolution, field localization and locale-row merging."""

from .locales import LocaleConfig
from .localizer import LOCALIZED_FIELDS, localize_field, localize_record
from .merge import MergeResult, derive_merge_key, fold_locale_rows, merge_by_key
from .query import ContentFilter, ContentQuery
from .resolver import LocaleResolver, ResolvedItem, ResolvedList

__all__ = [
    "ContentFilter",
    "ContentQuery",
    "LOCALIZED_FIELDS",
    "LocaleConfig",
    "LocaleResolver",
    "MergeResult",
    "ResolvedItem",
    "ResolvedList",
    "derive_merge_key",
    "fold_locale_rows",
    "localize_field",
    "localize_record",
    "merge_by_key",
]
