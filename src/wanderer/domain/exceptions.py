"""Exceptions raised while loading, mutating and persisting collection schemas."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wanderer.domain.services.collection_validator import CollectionValidationError


class MigrationError(Exception):
    """Base class for all migration-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CollectionNotFoundError(MigrationError):
    """Raised when no collection matches the requested id or name."""

    def __init__(self, name_or_id: str) -> None:
        self.name_or_id = name_or_id
        super().__init__(f"Collection '{name_or_id}' not found")


class SchemaDecodeError(MigrationError):
    """Raised when a stored field definition cannot be decoded."""
    pass


class CollectionPersistError(MigrationError):
    """Raised when a collection fails validation or cannot be written.

    Args:
        message: Human-readable error message.
        errors: Validation errors that rejected the save, if any.
    """

    def __init__(
        self,
        message: str,
        errors: list["CollectionValidationError"] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message)


class DuplicateMigrationError(MigrationError):
    """Raised when two migrations are registered under the same identifier."""

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"Migration {identifier} is already registered")


class UnknownMigrationError(MigrationError):
    """Raised when an applied migration is no longer registered."""

    def __init__(self, file: str) -> None:
        self.file = file
        super().__init__(f"Failed to locate migration '{file}'")
