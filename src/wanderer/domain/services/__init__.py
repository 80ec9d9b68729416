"""Domain services for Wanderer.

Services contain business logic that doesn't naturally fit within a single entity.
They have no dependencies on infrastructure or external frameworks.
"""

from wanderer.domain.services.collection_validator import (
    RESERVED_FIELD_NAMES,
    CollectionValidationError,
    CollectionValidator,
)

__all__ = [
    "CollectionValidationError",
    "CollectionValidator",
    "RESERVED_FIELD_NAMES",
]
