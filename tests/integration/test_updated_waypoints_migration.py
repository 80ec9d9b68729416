"""Integration tests for the 1710949270_updated_waypoints migration."""

import json
from unittest.mock import patch

import pytest
from sqlalchemy import func, select

from wanderer.domain.entities import FieldType, FileOptions, SchemaField
from wanderer.domain.exceptions import CollectionNotFoundError, CollectionPersistError
from wanderer.infrastructure.persistence.collection_dao import CollectionDao
from wanderer.infrastructure.persistence.models import CollectionModel
from wanderer.migrations import m1710949270_updated_waypoints as updated_waypoints

WAYPOINTS_ID = "goeo2ubp103rzp9"


async def load_waypoints(session_factory):
    async with session_factory() as session:
        return await CollectionDao(session).find_collection_by_name_or_id(WAYPOINTS_ID)


async def apply(session_factory, func_):
    async with session_factory() as session:
        await func_(session)
        await session.commit()


@pytest.mark.asyncio
async def test_upgrade_appends_photo_field(session_factory, waypoints):
    """The photo field is appended after the existing fields."""
    await apply(session_factory, updated_waypoints.upgrade)

    collection = await load_waypoints(session_factory)
    assert [f.id for f in collection.schema] == ["abc1", "tfhs3juh"]
    assert collection.schema.get_field_by_id("abc1") == SchemaField(
        id="abc1", name="title", type=FieldType.TEXT
    )


@pytest.mark.asyncio
async def test_upgrade_field_shape(session_factory, waypoints):
    """The stored photo field carries the exact file options."""
    await apply(session_factory, updated_waypoints.upgrade)

    async with session_factory() as session:
        model = await session.get(CollectionModel, WAYPOINTS_ID)
        stored = json.loads(model.schema)

    photos = [f for f in stored if f["id"] == "tfhs3juh"]
    assert len(photos) == 1
    assert photos[0] == {
        "system": False,
        "id": "tfhs3juh",
        "name": "photo",
        "type": "file",
        "required": False,
        "presentable": False,
        "unique": False,
        "options": {
            "mimeTypes": [
                "image/jpeg",
                "image/png",
                "image/vnd.mozilla.apng",
                "image/webp",
                "image/svg+xml",
            ],
            "thumbs": [],
            "maxSelect": 1,
            "maxSize": 5242880,
            "protected": False,
        },
    }


@pytest.mark.asyncio
async def test_upgrade_then_downgrade_restores_schema(session_factory, waypoints):
    """Round trip: downgrade(upgrade(C)) == C."""
    original = await load_waypoints(session_factory)

    await apply(session_factory, updated_waypoints.upgrade)
    await apply(session_factory, updated_waypoints.downgrade)

    restored = await load_waypoints(session_factory)
    assert restored.schema == original.schema
    assert [f.id for f in restored.schema] == ["abc1"]


@pytest.mark.asyncio
async def test_round_trip_preserves_larger_schema(session_factory, waypoints):
    """Round trip holds for a schema with several field types and options."""
    async with session_factory() as session:
        dao = CollectionDao(session)
        collection = await dao.find_collection_by_name_or_id(WAYPOINTS_ID)
        collection.schema.add_field(SchemaField(id="lat00001", name="lat", type=FieldType.NUMBER, required=True))
        collection.schema.add_field(
            SchemaField(
                id="img00001",
                name="banner",
                type=FieldType.FILE,
                options=FileOptions(mime_types=["image/png"], thumbs=["100x100"], max_select=3),
            )
        )
        collection.schema.add_field(
            SchemaField(id="cat00001", name="category", type=FieldType.SELECT, options={"values": ["a", "b"]})
        )
        await dao.save_collection(collection)
        await session.commit()

    original = await load_waypoints(session_factory)

    await apply(session_factory, updated_waypoints.upgrade)
    await apply(session_factory, updated_waypoints.downgrade)

    restored = await load_waypoints(session_factory)
    assert restored.schema == original.schema
    assert restored.schema.as_list() == original.schema.as_list()


@pytest.mark.asyncio
@pytest.mark.parametrize("field_name", ["_legacy", "2fa", "x" * 70])
async def test_round_trip_with_unusual_names(session_factory, field_name):
    """Short collection names and word-character field names survive the round trip."""
    async with session_factory() as session:
        session.add(
            CollectionModel(
                id=WAYPOINTS_ID,
                name="wp",
                type="base",
                system=False,
                schema=json.dumps([{"id": "abc1", "name": field_name, "type": "text"}]),
            )
        )
        await session.commit()

    original = await load_waypoints(session_factory)

    await apply(session_factory, updated_waypoints.upgrade)
    upgraded = await load_waypoints(session_factory)
    await apply(session_factory, updated_waypoints.downgrade)

    restored = await load_waypoints(session_factory)
    assert [f.id for f in upgraded.schema] == ["abc1", "tfhs3juh"]
    assert restored.name == "wp"
    assert restored.schema == original.schema


@pytest.mark.asyncio
async def test_downgrade_without_photo_field_is_noop(session_factory, waypoints):
    """Reverting when the field never existed succeeds and keeps the schema."""
    original = await load_waypoints(session_factory)

    await apply(session_factory, updated_waypoints.downgrade)

    collection = await load_waypoints(session_factory)
    assert collection.schema == original.schema


@pytest.mark.asyncio
async def test_upgrade_twice_keeps_single_photo_field(session_factory, waypoints):
    """Adding a field whose id exists replaces it instead of duplicating it."""
    await apply(session_factory, updated_waypoints.upgrade)
    await apply(session_factory, updated_waypoints.upgrade)

    collection = await load_waypoints(session_factory)
    assert [f.id for f in collection.schema].count("tfhs3juh") == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("func_", [updated_waypoints.upgrade, updated_waypoints.downgrade])
async def test_missing_collection_raises_not_found(session_factory, func_):
    """Both directions fail with CollectionNotFoundError and write nothing."""
    async with session_factory() as session:
        with pytest.raises(CollectionNotFoundError) as exc_info:
            await func_(session)
        assert exc_info.value.name_or_id == WAYPOINTS_ID

        count = await session.scalar(select(func.count()).select_from(CollectionModel))
        assert count == 0


@pytest.mark.asyncio
async def test_upgrade_rejected_by_validation(session_factory, waypoints):
    """A schema that already has a field named photo fails to save."""
    async with session_factory() as session:
        model = await session.get(CollectionModel, WAYPOINTS_ID)
        model.schema = json.dumps(
            [
                {"id": "abc1", "name": "title", "type": "text"},
                {"id": "zzz99999", "name": "photo", "type": "text"},
            ]
        )
        await session.commit()

    async with session_factory() as session:
        with pytest.raises(CollectionPersistError) as exc_info:
            await updated_waypoints.upgrade(session)
        await session.rollback()

    assert [e.code for e in exc_info.value.errors] == ["field_name_duplicate"]
    collection = await load_waypoints(session_factory)
    assert collection.schema.get_field_by_id("tfhs3juh") is None


@pytest.mark.asyncio
async def test_upgrade_propagates_storage_failure(session_factory, waypoints):
    """A failing save surfaces as CollectionPersistError and commits nothing."""
    async with session_factory() as session:
        with patch.object(
            CollectionDao,
            "save_collection",
            side_effect=CollectionPersistError("disk full"),
        ):
            with pytest.raises(CollectionPersistError, match="disk full"):
                await updated_waypoints.upgrade(session)
        await session.rollback()

    collection = await load_waypoints(session_factory)
    assert collection.schema.get_field_by_id("tfhs3juh") is None


def test_photo_field_is_fresh_each_call():
    """Each call builds an independent field definition."""
    first = updated_waypoints.photo_field()
    second = updated_waypoints.photo_field()

    assert first == second
    assert first is not second
    first.options.mime_types.append("image/gif")
    assert "image/gif" not in second.options.mime_types


def test_migration_identity():
    migration = updated_waypoints.migration
    assert migration.identifier == 1710949270
    assert migration.file == "1710949270_updated_waypoints.py"
    assert migration.up is updated_waypoints.upgrade
    assert migration.down is updated_waypoints.downgrade
