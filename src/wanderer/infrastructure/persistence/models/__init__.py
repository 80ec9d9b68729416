"""SQLAlchemy models for the Wanderer system tables.

All models inherit from the Base class defined in database.py.
"""

from wanderer.infrastructure.persistence.models.collection import CollectionModel
from wanderer.infrastructure.persistence.models.migration import MigrationModel

__all__ = [
    "CollectionModel",
    "MigrationModel",
]
