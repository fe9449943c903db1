"""Import about-page items from the legacy per-locale exports.

The legacy store kept distribution entries as multi-locale rows but stored
every translation of a certificate or license as a separate row tagged with
its locale. Distribution rows are copied one-to-one; certificate and license
rows are grouped by the file or image they describe and folded into a single
``about_items`` row.
"""

import json
import re
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.content.locales import SUPPORTED_LOCALES
from app.content.localizer import locale_columns
from app.content.merge import Row, derive_merge_key, fold_locale_rows, merge_by_key
from app.core.logging import get_logger
from app.database.models import utcnow
from app.database.repositories import AboutItemRepository, clear_about_items

logger = get_logger("app.migration.legacy")

# Export file stem -> about item kind, in migration order
LEGACY_TABLES: dict[str, str] = {
    "about_distribution": "distribution",
    "about_certificates": "certificate",
    "about_licenses": "license",
}

GROUPED_LOCALIZED_FIELDS = ("title", "description", "issuer")
GROUPED_SHARED_FIELDS = ("image_url", "file_url", "date")

_STORAGE_URL = re.compile(r"/storage/v1/object/public/([^/]+)/(.+)")


@dataclass
class TableLog:
    """Outcome of migrating one legacy table."""

    table: str
    source_count: int = 0
    migrated_count: int = 0
    errors: list[str] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    def summary(self) -> str:
        return (
            f"{self.table}: {self.migrated_count}/{self.source_count} migrated, "
            f"{len(self.errors)} errors"
        )


def convert_storage_url(url: Optional[str]) -> Optional[str]:
    """Rewrite a legacy object storage URL to its ``/uploads`` path.

    >>> convert_storage_url("https://x.co/storage/v1/object/public/docs/a/b.pdf")
    '/uploads/docs/a/b.pdf'
    """
    if not url:
        return None
    match = _STORAGE_URL.search(url)
    if match:
        bucket, path = match.groups()
        return f"/uploads/{bucket}/{path}"
    return url


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an exported timestamp into a naive UTC datetime.

    Raises:
        ValueError: If the value is not an ISO 8601 timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def load_export(export_dir: Path, table: str) -> list[dict[str, Any]]:
    """Read ``<table>.json`` from the export directory.

    A missing file counts as an empty table.

    Raises:
        ValueError: If the file does not hold a JSON array
    """
    path = export_dir / f"{table}.json"
    if not path.exists():
        logger.warning("legacy_export_missing", table=table, path=str(path))
        return []

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array")
    return data


def distribution_row(item: Row) -> dict[str, Any]:
    """Map one legacy distribution row onto an about item."""
    created_at = parse_timestamp(item.get("created_at")) or utcnow()
    values: dict[str, Any] = {
        "kind": "distribution",
        "image_url": convert_storage_url(item.get("image_url")),
        "pdf_url": convert_storage_url(item.get("file_url")),
        "is_published": item.get("status") == "published",
        "order_index": item.get("order_index") or 0,
        "created_at": created_at,
        "updated_at": parse_timestamp(item.get("updated_at")) or created_at,
    }
    for name in ("title", "description"):
        for column in locale_columns(name):
            values[column] = item.get(column)
    return values


def fold_legacy_group(kind: str, locales: Sequence[str] = SUPPORTED_LOCALES):
    """Merge function turning one group of per-locale rows into an about item."""
    fold = fold_locale_rows(GROUPED_LOCALIZED_FIELDS, GROUPED_SHARED_FIELDS, locales)
    localized = [
        column for name in GROUPED_LOCALIZED_FIELDS for column in locale_columns(name, locales)
    ]

    def merge(group: Sequence[Row]) -> dict[str, Any]:
        merged = fold(group)

        now = utcnow()
        stamps = [
            parse_timestamp(row.get("published_at") or row.get("created_at"))
            for row in group
        ]
        created_at = min([now, *(stamp for stamp in stamps if stamp is not None)])

        values = {column: merged[column] for column in localized}
        values.update(
            kind=kind,
            image_url=convert_storage_url(merged["image_url"]),
            pdf_url=convert_storage_url(merged["file_url"]),
            date=parse_date(merged["date"]),
            order_index=next((row["order"] for row in group if row.get("order")), 0),
            is_published=True,
            created_at=created_at,
            updated_at=now,
        )
        return values

    return merge


LabelledItem = tuple[str, dict[str, Any]]


def build_distribution_items(rows: Sequence[Row], log: TableLog) -> list[LabelledItem]:
    """Map distribution rows, each labelled for error reporting."""
    items = []
    for row in rows:
        label = f"Distribution {row.get('id')}"
        try:
            items.append((label, distribution_row(row)))
        except (TypeError, ValueError) as e:
            logger.warning("legacy_row_failed", table=log.table, id=row.get("id"), error=str(e))
            log.errors.append(f"{label}: {e}")
    return items


def build_grouped_items(
    kind: str,
    rows: Sequence[Row],
    log: TableLog,
    locales: Sequence[str] = SUPPORTED_LOCALES,
) -> list[LabelledItem]:
    """Fold grouped per-locale rows, labelling each item by its merge key."""
    result = merge_by_key(
        rows,
        key_fn=derive_merge_key,
        merge_fn=fold_legacy_group(kind, locales),
        label=log.table,
    )
    log.errors.extend(
        f"{kind.capitalize()} {failure.key}: {failure.error}" for failure in result.failures
    )
    return [
        (f"{kind.capitalize()} {key}", item)
        for key, item in zip(result.merged_keys, result.merged)
    ]


async def insert_items(
    session: AsyncSession, items: Sequence[LabelledItem], log: TableLog
) -> None:
    """Insert items one at a time; a failed insert is logged and skipped."""
    repository = AboutItemRepository(session)
    for label, values in items:
        try:
            await repository.create(**values)
        except SQLAlchemyError as e:
            await session.rollback()
            logger.warning(
                "legacy_item_insert_failed", table=log.table, item=label, error=str(e)
            )
            log.errors.append(f"{label}: {e}")
        else:
            log.migrated_count += 1


async def migrate_legacy_about_items(
    export_dir: Path,
    session: Optional[AsyncSession] = None,
    dry_run: bool = False,
    replace: bool = False,
    locales: Sequence[str] = SUPPORTED_LOCALES,
) -> list[TableLog]:
    """Migrate every legacy about table found in ``export_dir``.

    Args:
        export_dir: Directory holding ``<table>.json`` exports
        session: Target database session; required unless ``dry_run``
        dry_run: Build and count rows without writing them
        replace: Delete existing about items before inserting
        locales: Locales a grouped row may be tagged with

    Returns:
        One log entry per legacy table
    """
    if session is None and not dry_run:
        raise ValueError("A database session is required unless dry_run is set")

    if replace and not dry_run:
        removed = await clear_about_items(session)
        logger.info("about_items_cleared", removed=removed)

    entries = []
    for table, kind in LEGACY_TABLES.items():
        rows = load_export(export_dir, table)
        log = TableLog(table=table, source_count=len(rows))

        if kind == "distribution":
            items = build_distribution_items(rows, log)
        else:
            items = build_grouped_items(kind, rows, log, locales)

        if dry_run:
            log.migrated_count = len(items)
        else:
            await insert_items(session, items, log)

        logger.info(
            "legacy_table_migrated",
            table=table,
            source_count=log.source_count,
            migrated_count=log.migrated_count,
            errors=len(log.errors),
            dry_run=dry_run,
        )
        entries.append(log)
    return entries


def write_migration_log(entries: Sequence[TableLog], path: Path) -> None:
    """Write the migration log as a JSON array."""
    path.write_text(
        json.dumps([asdict(entry) for entry in entries], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
