"""Repository for collection operations.

Provides CRUD operations for the collections table.
"""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.infrastructure.persistence.models import CollectionModel


class CollectionRepository:
    """Repository for collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: CollectionModel) -> CollectionModel:
        """Create a new collection.

        Args:
            collection: The collection model to create.

        Returns:
            The created collection model.
        """
        self.session.add(collection)
        await self.session.flush()
        return collection

    async def update(self, collection: CollectionModel) -> CollectionModel:
        """Flush pending changes of an already loaded collection."""
        await self.session.flush()
        return collection

    async def delete(self, collection: CollectionModel) -> None:
        await self.session.delete(collection)
        await self.session.flush()

    async def get_by_id(self, collection_id: str) -> CollectionModel | None:
        """Get a collection by ID.

        Args:
            collection_id: The collection ID.

        Returns:
            The collection model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CollectionModel).where(CollectionModel.id == collection_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name_or_id(self, name_or_id: str) -> CollectionModel | None:
        """Get a collection whose id equals, or whose name matches, the given value.

        An exact id match wins over a name match.
        """
        result = await self.session.execute(
            select(CollectionModel).where(
                or_(
                    CollectionModel.id == name_or_id,
                    func.lower(CollectionModel.name) == name_or_id.lower(),
                )
            )
        )
        matches = list(result.scalars().all())
        for model in matches:
            if model.id == name_or_id:
                return model
        return matches[0] if matches else None

    async def list_all(self) -> list[CollectionModel]:
        result = await self.session.execute(
            select(CollectionModel).order_by(CollectionModel.name)
        )
        return list(result.scalars().all())
