"""Persistence repositories for database operations."""

from wanderer.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from wanderer.infrastructure.persistence.repositories.migration_repository import (
    MigrationRepository,
)

__all__ = [
    "CollectionRepository",
    "MigrationRepository",
]
