"""SQLAlchemy model for the applied-migrations table."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from wanderer.infrastructure.persistence.database import Base


class MigrationModel(Base):
    """One row per applied migration, keyed by the migration file name."""

    __tablename__ = "_migrations"

    file: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        comment="Migration file name, e.g. 1710949270_updated_waypoints.py",
    )
    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Migration(file={self.file})>"
