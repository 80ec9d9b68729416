"""created_waypoints

Creates the waypoints collection holding the points of interest of a trail.

Identifier: 1710948000
Revises: <base>
"""

from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.core.migrations import Migration
from wanderer.domain.entities import Collection, FieldType, Schema, SchemaField
from wanderer.infrastructure.persistence.collection_dao import CollectionDao

IDENTIFIER = 1710948000
NAME = "created_waypoints"

WAYPOINTS_COLLECTION_ID = "goeo2ubp103rzp9"


def waypoints_schema() -> Schema:
    return Schema(
        [
            SchemaField(id="ixdz9ol2", name="name", type=FieldType.TEXT, required=True, presentable=True),
            SchemaField(id="fk7tl9ja", name="description", type=FieldType.TEXT),
            SchemaField(id="xaoeylmd", name="lat", type=FieldType.NUMBER, required=True),
            SchemaField(id="qzbsgs7o", name="lon", type=FieldType.NUMBER, required=True),
            SchemaField(id="vvkpkzbv", name="icon", type=FieldType.TEXT),
        ]
    )


async def upgrade(session: AsyncSession) -> None:
    dao = CollectionDao(session)

    collection = Collection(
        id=WAYPOINTS_COLLECTION_ID,
        name="waypoints",
        schema=waypoints_schema(),
    )

    await dao.save_collection(collection)


async def downgrade(session: AsyncSession) -> None:
    dao = CollectionDao(session)

    collection = await dao.find_collection_by_name_or_id(WAYPOINTS_COLLECTION_ID)

    await dao.delete_collection(collection)


migration = Migration(identifier=IDENTIFIER, name=NAME, up=upgrade, down=downgrade)
