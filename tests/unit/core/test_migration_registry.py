"""Unit tests for MigrationRegistry and the project registry."""

import pytest

from wanderer.core.migrations import Migration, MigrationRegistry
from wanderer.domain.exceptions import DuplicateMigrationError
from wanderer.migrations import MIGRATION_MODULES, build_registry


async def noop(session):
    return None


class TestMigrationRegistry:
    """Tests for registration and ordering."""

    def test_items_sorted_by_identifier(self):
        registry = MigrationRegistry()
        registry.register(300, "third", noop, noop)
        registry.register(100, "first", noop, noop)
        registry.register(200, "second", noop, noop)

        assert [m.name for m in registry.items()] == ["first", "second", "third"]
        assert [m.identifier for m in registry] == [100, 200, 300]
        assert len(registry) == 3

    def test_duplicate_identifier_rejected(self):
        registry = MigrationRegistry()
        registry.register(100, "first", noop, noop)

        with pytest.raises(DuplicateMigrationError) as exc_info:
            registry.register(100, "again", noop, noop)

        assert exc_info.value.identifier == 100
        assert registry.get(100).name == "first"

    def test_lookup(self):
        registry = MigrationRegistry()
        migration = registry.register(1710949270, "updated_waypoints", noop, noop)

        assert 1710949270 in registry
        assert registry.get(1710949270) is migration
        assert registry.get(1) is None
        assert registry.get_by_file("1710949270_updated_waypoints.py") is migration
        assert registry.get_by_file("missing.py") is None

    def test_migration_file_name(self):
        migration = Migration(identifier=42, name="created_things", up=noop, down=noop)

        assert migration.file == "42_created_things.py"

    def test_migration_is_immutable(self):
        migration = Migration(identifier=42, name="created_things", up=noop, down=noop)

        with pytest.raises(AttributeError):
            migration.identifier = 43


class TestBuildRegistry:
    """Tests for the project migration list."""

    def test_contains_every_module(self):
        registry = build_registry()

        assert len(registry) == len(MIGRATION_MODULES)
        assert [m.file for m in registry] == [
            "1710948000_created_waypoints.py",
            "1710949270_updated_waypoints.py",
        ]

    def test_returns_independent_registries(self):
        first = build_registry()
        second = build_registry()
        first.register(1800000000, "extra", noop, noop)

        assert 1800000000 not in second
