"""updated_waypoints

Adds the optional "photo" file field to the waypoints collection.

Identifier: 1710949270
Revises: 1710948000_created_waypoints
"""

from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.core.migrations import Migration
from wanderer.domain.entities import FieldType, FileOptions, SchemaField
from wanderer.infrastructure.persistence.collection_dao import CollectionDao

IDENTIFIER = 1710949270
NAME = "updated_waypoints"

WAYPOINTS_COLLECTION_ID = "goeo2ubp103rzp9"
PHOTO_FIELD_ID = "tfhs3juh"


def photo_field() -> SchemaField:
    """Build a fresh definition of the photo field."""
    return SchemaField(
        id=PHOTO_FIELD_ID,
        name="photo",
        type=FieldType.FILE,
        system=False,
        required=False,
        presentable=False,
        unique=False,
        options=FileOptions(
            mime_types=[
                "image/jpeg",
                "image/png",
                "image/vnd.mozilla.apng",
                "image/webp",
                "image/svg+xml",
            ],
            thumbs=[],
            max_select=1,
            max_size=5242880,
            protected=False,
        ),
    )


async def upgrade(session: AsyncSession) -> None:
    dao = CollectionDao(session)

    collection = await dao.find_collection_by_name_or_id(WAYPOINTS_COLLECTION_ID)

    # add
    collection.schema.add_field(photo_field())

    await dao.save_collection(collection)


async def downgrade(session: AsyncSession) -> None:
    dao = CollectionDao(session)

    collection = await dao.find_collection_by_name_or_id(WAYPOINTS_COLLECTION_ID)

    # remove
    collection.schema.remove_field(PHOTO_FIELD_ID)

    await dao.save_collection(collection)


migration = Migration(identifier=IDENTIFIER, name=NAME, up=upgrade, down=downgrade)
