"""Infrastructure layer - External dependencies and implementations.

This layer contains the database adapters (SQLAlchemy) the migrations
read collections from and persist them through.
"""

from wanderer.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    get_db_manager,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
]
