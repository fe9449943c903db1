"""Fold per-locale rows of one logical entity into a single multi-locale row.

Used once, offline, when importing legacy exports where every translation of
a certificate or license was stored as its own row.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from app.content.locales import SUPPORTED_LOCALES
from app.content.localizer import column_name
from app.core.logging import get_logger

logger = get_logger("app.content.merge")

Row = Mapping[str, Any]
KeyFn = Callable[[Row], str]
MergeFn = Callable[[Sequence[Row]], dict[str, Any]]

MERGE_KEY_FIELDS: tuple[str, ...] = ("file_url", "image_url", "title")


@dataclass
class MergeFailure:
    key: str
    error: str
    row_count: int


@dataclass
class MergeResult:
    """Outcome of a merge batch."""

    merged: list[dict[str, Any]] = field(default_factory=list)
    merged_keys: list[str] = field(default_factory=list)
    failures: list[MergeFailure] = field(default_factory=list)
    source_count: int = 0
    group_count: int = 0

    @property
    def merged_count(self) -> int:
        return len(self.merged)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def derive_merge_key(row: Row) -> str:
    """Key identifying rows that describe the same entity.

    First non-blank of ``file_url``, ``image_url`` and ``title``; otherwise the
    row id, otherwise a fresh uuid so the row stays on its own. Blank strings
    are skipped so placeholder values do not glue unrelated rows together.
    """
    for name in MERGE_KEY_FIELDS:
        value = row.get(name)
        if not _blank(value):
            return str(value).strip()
    if not _blank(row.get("id")):
        return str(row["id"])
    return str(uuid4())


def group_rows(rows: Iterable[Row], key_fn: KeyFn) -> dict[str, list[Row]]:
    """Group rows by key, keeping first-appearance order."""
    groups: dict[str, list[Row]] = {}
    for row in rows:
        groups.setdefault(key_fn(row), []).append(row)
    return groups


def fold_locale_rows(
    localized_fields: Sequence[str],
    shared_fields: Sequence[str],
    locales: Sequence[str] = SUPPORTED_LOCALES,
) -> MergeFn:
    """Build a merge function for rows tagged with a ``locale`` column.

    Each localized field lands in ``<field>_<row locale>``, read from the
    row's plain ``<field>`` or, failing that, its own ``<field>_<locale>``
    column. Shared fields keep the first non-null value in group order.

    When two rows of a group carry the same locale, the first non-blank value
    of each localized field wins. A row with no locale or an unsupported one
    contributes only its shared fields.
    """

    def merge(group: Sequence[Row]) -> dict[str, Any]:
        merged: dict[str, Any] = {
            column_name(name, locale): None
            for name in localized_fields
            for locale in locales
        }
        merged.update({name: None for name in shared_fields})

        for row in group:
            locale = row.get("locale")
            if locale in locales:
                for name in localized_fields:
                    target = column_name(name, locale)
                    value = row.get(name)
                    if _blank(value):
                        value = row.get(target)
                    if merged[target] is None and not _blank(value):
                        merged[target] = value
            else:
                logger.warning(
                    "merge_row_locale_skipped", id=row.get("id"), locale=locale
                )
            for name in shared_fields:
                if merged[name] is None and row.get(name) is not None:
                    merged[name] = row[name]
        return merged

    return merge


def merge_by_key(
    rows: Iterable[Row],
    key_fn: KeyFn = derive_merge_key,
    merge_fn: MergeFn | None = None,
    label: str = "rows",
) -> MergeResult:
    """Group rows by ``key_fn`` and fold each group with ``merge_fn``.

    A group whose merge raises is logged with its key and skipped; the rest of
    the batch carries on.

    Args:
        rows: Source rows
        key_fn: Derives the grouping key of a row
        merge_fn: Folds a group into one row; defaults to folding the
            ``title`` field per locale and keeping ``file_url``/``image_url``
        label: Name used in log events

    Returns:
        MergeResult with merged rows and per-group failures
    """
    merge_fn = merge_fn or fold_locale_rows(("title",), ("file_url", "image_url"))
    source = list(rows)
    groups = group_rows(source, key_fn)
    result = MergeResult(source_count=len(source), group_count=len(groups))

    for key, group in groups.items():
        try:
            merged = merge_fn(group)
        except Exception as exc:
            logger.warning(
                "merge_group_failed",
                label=label,
                merge_key=key,
                rows=len(group),
                error=str(exc),
            )
            result.failures.append(
                MergeFailure(key=key, error=str(exc), row_count=len(group))
            )
        else:
            result.merged.append(merged)
            result.merged_keys.append(key)

    logger.info(
        "merge_completed",
        label=label,
        source_count=result.source_count,
        groups=result.group_count,
        merged=result.merged_count,
        failed=result.failed_count,
    )
    return result
