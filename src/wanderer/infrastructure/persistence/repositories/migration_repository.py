"""Repository for the applied-migrations table."""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.infrastructure.persistence.models import MigrationModel


class MigrationRepository:
    """Repository for applied-migration bookkeeping."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_applied(self) -> dict[str, datetime]:
        """Return applied migration file names mapped to when they were applied."""
        result = await self.session.execute(select(MigrationModel))
        return {row.file: row.applied_at for row in result.scalars().all()}

    async def mark_applied(self, file: str) -> None:
        self.session.add(MigrationModel(file=file, applied_at=datetime.now(timezone.utc)))
        await self.session.flush()

    async def unmark_applied(self, file: str) -> None:
        await self.session.execute(delete(MigrationModel).where(MigrationModel.file == file))
        await self.session.flush()
