"""Command-line interface for offline data maintenance."""

import asyncio
from pathlib import Path

import click

from app.core.config import settings
from app.core.db import dispose_db, get_session, init_db
from app.core.logging import configure_logging
from app.database.seed import seed_admin, seed_site_settings
from app.migration.legacy import (
    TableLog,
    migrate_legacy_about_items,
    write_migration_log,
)


async def run_legacy_migration(
    export_dir: Path, dry_run: bool, replace: bool
) -> list[TableLog]:
    if dry_run:
        return await migrate_legacy_about_items(export_dir, dry_run=True)

    await init_db()
    try:
        async for session in get_session():
            return await migrate_legacy_about_items(
                export_dir, session=session, replace=replace
            )
        return []
    finally:
        await dispose_db()


async def run_seed() -> tuple[bool, bool]:
    await init_db()
    try:
        async for session in get_session():
            admin = await seed_admin(session, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
            site_settings = await seed_site_settings(session)
            return admin is not None, site_settings is not None
        return False, False
    finally:
        await dispose_db()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Marine site data maintenance commands."""
    configure_logging(level="DEBUG" if verbose else settings.LOG_LEVEL, json_logs=False)


@cli.command("legacy-about-items")
@click.argument(
    "export_dir", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--log-file",
    default="migration-log.json",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the JSON migration log",
)
@click.option("--dry-run", is_flag=True, help="Build rows without writing them")
@click.option("--replace", is_flag=True, help="Delete existing about items first")
def legacy_about_items(export_dir: Path, log_file: Path, dry_run: bool, replace: bool):
    """Import about items from legacy JSON exports in EXPORT_DIR."""
    try:
        entries = asyncio.run(run_legacy_migration(export_dir, dry_run, replace))
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    write_migration_log(entries, log_file)
    click.echo(f"Migration {'checked' if dry_run else 'completed'}. Log saved to {log_file}")
    click.echo("Summary:")
    for entry in entries:
        click.echo(entry.summary())


@cli.command()
def seed():
    """Create the admin user and default site settings when absent."""
    admin_created, settings_created = asyncio.run(run_seed())
    click.echo(f"Admin user: {'created' if admin_created else 'unchanged'}")
    click.echo(f"Site settings: {'created' if settings_created else 'unchanged'}")