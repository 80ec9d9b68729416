"""Command-line interface for Wanderer.

This module provides the CLI commands for applying, reverting and
inspecting the collection schema migrations.
"""

import asyncio
import json
import uuid
from typing import Any, Awaitable, Callable, NoReturn, TypeVar

import click

from wanderer.core.config import get_settings
from wanderer.core.logging import bind_correlation_id, configure_logging, get_logger
from wanderer.domain.exceptions import MigrationError

T = TypeVar("T")


def _run_with_database(action: Callable[[Any], Awaitable[T]]) -> T:
    """Run an async action against the configured database.

    The system tables are created if missing and the engine is disposed
    afterwards. Migration errors are reported on stderr with exit code 1.
    """
    from wanderer.infrastructure.persistence.database import get_db_manager

    logger = get_logger(__name__)
    bind_correlation_id(f"cid_{uuid.uuid4().hex[:12]}")

    async def run() -> T:
        db = get_db_manager()
        try:
            await db.create_tables()
            return await action(db)
        finally:
            await db.disconnect()

    try:
        return asyncio.run(run())
    except MigrationError as e:
        logger.error("Command failed", error=e.message)
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="Wanderer")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides WANDERER_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """Wanderer - trail backend schema management."""
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


@cli.group()
def migrate() -> None:
    """Apply, revert and list collection migrations."""


@migrate.command("up")
def migrate_up() -> None:
    """Apply all pending migrations."""
    from wanderer.infrastructure.persistence.migration_runner import MigrationRunner
    from wanderer.migrations import build_registry

    async def action(db):
        runner = MigrationRunner(build_registry(), db.session_factory)
        return await runner.up()

    applied = _run_with_database(action)
    if not applied:
        click.echo("No new migrations to apply.")
        return
    for migration in applied:
        click.echo(f"Applied {migration.file}")


@migrate.command("down")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of migrations to revert",
)
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def migrate_down(count: int, force: bool) -> None:
    """Revert the most recently applied migrations."""
    from wanderer.infrastructure.persistence.migration_runner import MigrationRunner
    from wanderer.migrations import build_registry

    if not force:
        click.confirm(
            f"This will revert the last {count} applied migration(s). Continue?",
            abort=True,
            default=False,
        )

    async def action(db):
        runner = MigrationRunner(build_registry(), db.session_factory)
        return await runner.down(count)

    reverted = _run_with_database(action)
    if not reverted:
        click.echo("No migrations to revert.")
        return
    for migration in reverted:
        click.echo(f"Reverted {migration.file}")


@migrate.command("history")
def migrate_history() -> None:
    """List every registered migration and when it was applied."""
    from wanderer.infrastructure.persistence.migration_runner import MigrationRunner
    from wanderer.migrations import build_registry

    async def action(db):
        runner = MigrationRunner(build_registry(), db.session_factory)
        return await runner.history()

    for migration, applied_at in _run_with_database(action):
        status = applied_at.isoformat() if applied_at else "pending"
        click.echo(f"{migration.file:<40} {status}")


@cli.group()
def collections() -> None:
    """Inspect collection schemas."""


@collections.command("show")
@click.argument("name_or_id")
def collections_show(name_or_id: str) -> None:
    """Print the schema of a collection as JSON."""
    from wanderer.infrastructure.persistence.collection_dao import CollectionDao

    async def action(db):
        async with db.session() as session:
            return await CollectionDao(session).find_collection_by_name_or_id(name_or_id)

    collection = _run_with_database(action)
    click.echo(
        json.dumps(
            {
                "id": collection.id,
                "name": collection.name,
                "type": collection.type.value,
                "system": collection.system,
                "schema": collection.schema.as_list(),
            },
            indent=2,
        )
    )


@cli.command()
def info() -> None:
    """Display Wanderer configuration and database status."""
    from wanderer.infrastructure.persistence.database import get_db_manager

    settings = get_settings()

    async def check() -> bool:
        db = get_db_manager()
        try:
            return await db.check_connection()
        finally:
            await db.disconnect()

    connected = asyncio.run(check())

    click.echo(f"""
Wanderer v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}
  Connected:    {'yes' if connected else 'no'}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `wanderer` command is run
    or when using `python -m wanderer`.
    """
    cli()


if __name__ == "__main__":
    main()
