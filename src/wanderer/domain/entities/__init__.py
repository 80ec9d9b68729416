"""Domain entities for Wanderer.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from wanderer.domain.entities.collection import Collection, CollectionType
from wanderer.domain.entities.schema import Schema
from wanderer.domain.entities.schema_field import (
    FieldType,
    FileOptions,
    SchemaField,
    generate_field_id,
)

__all__ = [
    "Collection",
    "CollectionType",
    "FieldType",
    "FileOptions",
    "Schema",
    "SchemaField",
    "generate_field_id",
]
