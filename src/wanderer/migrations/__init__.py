"""Collection schema migrations of the Wanderer backend.

New migrations are added as a module exposing a ``migration`` object and listed
in MIGRATION_MODULES. The order of the list does not matter: the runner orders
by identifier.
"""

from wanderer.core.migrations import MigrationRegistry
from wanderer.migrations import (
    m1710948000_created_waypoints,
    m1710949270_updated_waypoints,
)

MIGRATION_MODULES = [
    m1710948000_created_waypoints,
    m1710949270_updated_waypoints,
]


def build_registry() -> MigrationRegistry:
    """Return a new registry holding every project migration."""
    registry = MigrationRegistry()
    for module in MIGRATION_MODULES:
        registry.add(module.migration)
    return registry


__all__ = ["MIGRATION_MODULES", "build_registry"]
