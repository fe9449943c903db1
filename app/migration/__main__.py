"""Entry point for ``python -m app.migration``."""

from app.migration.cli import cli

if __name__ == "__main__":
    cli()
