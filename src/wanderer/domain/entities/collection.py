"""Collection entity for dynamic schema definitions.

Collections store metadata about the backend's data tables. The schema
defines the fields, types, and options for records in the collection.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from wanderer.domain.entities.schema import Schema


class CollectionType(str, Enum):
    """Kinds of collections."""

    BASE = "base"
    AUTH = "auth"
    VIEW = "view"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Collection:
    """Collection entity representing a data table schema.

    Identity is the id; the name is a mutable alias used for lookup.

    Attributes:
        id: Unique, stable identifier (15 characters for generated collections).
        name: Collection name.
        schema: Ordered field definitions.
        type: Collection kind.
        system: Whether the collection is managed by the backend itself.
        created_at: Timestamp when the collection was created.
        updated_at: Timestamp when the collection was last updated.
    """

    id: str
    name: str
    schema: Schema = field(default_factory=Schema)
    type: CollectionType = CollectionType.BASE
    system: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate collection data after initialization."""
        if not self.id:
            raise ValueError("Collection ID is required")
        if not self.name:
            raise ValueError("Collection name is required")
        if not isinstance(self.schema, Schema):
            raise ValueError("Schema must be a Schema instance")
