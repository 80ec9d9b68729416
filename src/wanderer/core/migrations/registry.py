"""Migration registry - explicit registration of schema migrations.

A migration is a pair of async functions (up, down) keyed by a Unix timestamp
identifier. Registries are plain objects: nothing is registered at import time,
the project assembles its registry in ``wanderer.migrations.build_registry``.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Iterator

from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.core.logging import get_logger
from wanderer.domain.exceptions import DuplicateMigrationError

logger = get_logger(__name__)

MigrationFunc = Callable[[AsyncSession], Awaitable[None]]


@dataclass(frozen=True)
class Migration:
    """A registered, reversible schema migration.

    Attributes:
        identifier: Unix timestamp used for ordering; unique per registry.
        name: Short description, e.g. "updated_waypoints".
        up: Applies the change using the session supplied by the runner.
        down: Undoes the change using the session supplied by the runner.
    """

    identifier: int
    name: str
    up: MigrationFunc
    down: MigrationFunc

    @property
    def file(self) -> str:
        """Key under which the migration is recorded as applied."""
        return f"{self.identifier}_{self.name}.py"


class MigrationRegistry:
    """Ordered set of migrations.

    Example:
        registry = MigrationRegistry()
        registry.register(1710949270, "updated_waypoints", up, down)

        for migration in registry:  # ascending identifier order
            ...
    """

    def __init__(self) -> None:
        self._migrations: dict[int, Migration] = {}

    def register(
        self,
        identifier: int,
        name: str,
        up: MigrationFunc,
        down: MigrationFunc,
    ) -> Migration:
        """Register a migration from its parts.

        Returns:
            The registered migration.

        Raises:
            DuplicateMigrationError: If the identifier is already registered.
        """
        migration = Migration(identifier=identifier, name=name, up=up, down=down)
        self.add(migration)
        return migration

    def add(self, migration: Migration) -> None:
        """Register an already built migration.

        Raises:
            DuplicateMigrationError: If the identifier is already registered.
        """
        if migration.identifier in self._migrations:
            raise DuplicateMigrationError(migration.identifier)
        self._migrations[migration.identifier] = migration
        logger.debug("Migration registered", migration=migration.file)

    def get(self, identifier: int) -> Migration | None:
        return self._migrations.get(identifier)

    def get_by_file(self, file: str) -> Migration | None:
        for migration in self._migrations.values():
            if migration.file == file:
                return migration
        return None

    def items(self) -> list[Migration]:
        """Return all migrations in ascending identifier order."""
        return [self._migrations[k] for k in sorted(self._migrations)]

    def __iter__(self) -> Iterator[Migration]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._migrations)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._migrations
