"""Migration framework core module.

Example usage:
    from wanderer.core.migrations import MigrationRegistry

    registry = MigrationRegistry()
    registry.register(1710949270, "updated_waypoints", up, down)
"""

from wanderer.core.migrations.registry import (
    Migration,
    MigrationFunc,
    MigrationRegistry,
)

__all__ = [
    "Migration",
    "MigrationFunc",
    "MigrationRegistry",
]
