"""Runner applying and reverting registered collection migrations.

Applied migrations are tracked in the _migrations table. Each migration runs
in its own transaction together with its bookkeeping row, so a failing
migration leaves neither its changes nor its row behind.
"""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wanderer.core.logging import LoggingContext, get_logger
from wanderer.core.migrations import Migration, MigrationFunc, MigrationRegistry
from wanderer.domain.exceptions import UnknownMigrationError
from wanderer.infrastructure.persistence.repositories import MigrationRepository

logger = get_logger(__name__)


class MigrationRunner:
    """Applies pending migrations and reverts applied ones."""

    def __init__(
        self,
        registry: MigrationRegistry,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """Initialize the runner.

        Args:
            registry: The migrations known to this process.
            session_factory: Factory for the sessions handed to each migration.
        """
        self.registry = registry
        self.session_factory = session_factory

    async def applied(self) -> dict[str, datetime]:
        """Return applied migration file names mapped to their application time."""
        async with self.session_factory() as session:
            return await MigrationRepository(session).list_applied()

    async def pending(self) -> list[Migration]:
        """Return registered migrations not applied yet, in ascending order."""
        applied = await self.applied()
        return [m for m in self.registry if m.file not in applied]

    async def history(self) -> list[tuple[Migration, datetime | None]]:
        applied = await self.applied()
        return [(m, applied.get(m.file)) for m in self.registry]

    async def up(self) -> list[Migration]:
        """Apply all pending migrations in ascending identifier order.

        The run stops at the first failing migration and re-raises its error.
        Migrations applied earlier in the run stay applied.

        Returns:
            The migrations applied by this call.
        """
        done: list[Migration] = []
        for migration in await self.pending():
            await self._run(migration, migration.up, "up")
            done.append(migration)

        logger.info("Migrations applied", count=len(done))
        return done

    async def down(self, count: int = 1) -> list[Migration]:
        """Revert the last ``count`` applied migrations, newest first.

        Args:
            count: Number of migrations to revert.

        Returns:
            The migrations reverted by this call.

        Raises:
            UnknownMigrationError: If an applied migration is not registered.
        """
        if count < 1:
            raise ValueError("count must be at least 1")

        applied = await self.applied()
        newest_first = sorted(applied.items(), key=lambda item: (item[1], item[0]), reverse=True)

        done: list[Migration] = []
        for file, _ in newest_first[:count]:
            migration = self.registry.get_by_file(file)
            if migration is None:
                raise UnknownMigrationError(file)
            await self._run(migration, migration.down, "down")
            done.append(migration)

        logger.info("Migrations reverted", count=len(done))
        return done

    async def _run(self, migration: Migration, func: MigrationFunc, direction: str) -> None:
        with LoggingContext(migration=migration.file, direction=direction):
            logger.info("Running migration")
            async with self.session_factory() as session:
                try:
                    await func(session)
                    repository = MigrationRepository(session)
                    if direction == "up":
                        await repository.mark_applied(migration.file)
                    else:
                        await repository.unmark_applied(migration.file)
                    await session.commit()
                except Exception as e:
                    await session.rollback()
                    logger.error("Migration failed", error=str(e))
                    raise
            logger.info("Migration finished")
