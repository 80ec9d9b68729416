"""Data-access object for collections.

Migrations look up collections and persist schema changes exclusively through
this class. It converts between the stored rows and the domain entities and
validates every collection before writing it.
"""

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.core.logging import get_logger
from wanderer.domain.entities import Collection, CollectionType, Schema
from wanderer.domain.exceptions import (
    CollectionNotFoundError,
    CollectionPersistError,
    SchemaDecodeError,
)
from wanderer.domain.services import CollectionValidator
from wanderer.infrastructure.persistence.models import CollectionModel
from wanderer.infrastructure.persistence.repositories import CollectionRepository

logger = get_logger(__name__)


class CollectionDao:
    """Collection lookup and persistence bound to one session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the DAO.

        Args:
            session: SQLAlchemy async session owned by the caller.
        """
        self.session = session
        self.repository = CollectionRepository(session)

    async def find_collection_by_name_or_id(self, name_or_id: str) -> Collection:
        """Load a collection by its id or (case-insensitive) name.

        Args:
            name_or_id: Collection id or name.

        Returns:
            The decoded collection.

        Raises:
            CollectionNotFoundError: If no collection matches.
            SchemaDecodeError: If the stored schema or type is malformed.
        """
        model = await self.repository.get_by_name_or_id(name_or_id)
        if model is None:
            raise CollectionNotFoundError(name_or_id)
        return self._to_entity(model)

    async def find_collections(self) -> list[Collection]:
        return [self._to_entity(m) for m in await self.repository.list_all()]

    async def save_collection(self, collection: Collection) -> None:
        """Validate and persist a collection, inserting it if it is new.

        Args:
            collection: The collection to persist.

        Raises:
            CollectionPersistError: If validation fails or the write is rejected.
                Nothing is written when validation fails.
        """
        errors = CollectionValidator.validate(collection)
        if errors:
            error_messages = [f"{e.field}: {e.message}" for e in errors]
            logger.warning(
                "Collection validation failed",
                collection_id=collection.id,
                errors=error_messages,
            )
            raise CollectionPersistError(
                f"Validation failed: {'; '.join(error_messages)}", errors=errors
            )

        collection.updated_at = datetime.now(timezone.utc)

        try:
            model = await self.repository.get_by_id(collection.id)
            if model is None:
                await self.repository.create(
                    CollectionModel(
                        id=collection.id,
                        name=collection.name,
                        type=collection.type.value,
                        system=collection.system,
                        schema=collection.schema.to_json(),
                        created_at=collection.created_at,
                        updated_at=collection.updated_at,
                    )
                )
                logger.info("Collection created", collection_id=collection.id, name=collection.name)
            else:
                model.name = collection.name
                model.type = collection.type.value
                model.system = collection.system
                model.schema = collection.schema.to_json()
                model.updated_at = collection.updated_at
                await self.repository.update(model)
                logger.info("Collection updated", collection_id=collection.id, name=collection.name)
        except SQLAlchemyError as e:
            raise CollectionPersistError(
                f"Failed to save collection '{collection.name}': {e}"
            ) from e

    async def delete_collection(self, collection: Collection) -> None:
        """Delete a collection row.

        Raises:
            CollectionNotFoundError: If the collection no longer exists.
            CollectionPersistError: If the delete is rejected.
        """
        model = await self.repository.get_by_id(collection.id)
        if model is None:
            raise CollectionNotFoundError(collection.id)
        try:
            await self.repository.delete(model)
        except SQLAlchemyError as e:
            raise CollectionPersistError(
                f"Failed to delete collection '{collection.name}': {e}"
            ) from e
        logger.info("Collection deleted", collection_id=collection.id, name=collection.name)

    @staticmethod
    def _to_entity(model: CollectionModel) -> Collection:
        try:
            collection_type = CollectionType(model.type)
        except ValueError as e:
            raise SchemaDecodeError(
                f"Unknown collection type '{model.type}' for collection '{model.name}'"
            ) from e
        return Collection(
            id=model.id,
            name=model.name,
            type=collection_type,
            system=model.system,
            schema=Schema.from_json(model.schema),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
