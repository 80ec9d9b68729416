"""SQLAlchemy model for the collections table.

Collections store the schema of every data table of the backend.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from wanderer.infrastructure.persistence.database import Base


class CollectionModel(Base):
    """SQLAlchemy model for the collections table.

    Attributes:
        id: Primary key (stable collection id).
        name: Collection name, unique.
        type: Collection kind (base, auth or view).
        system: Whether the collection is managed by the backend itself.
        schema: JSON array of field definitions.
        created_at: Timestamp when the collection was created.
        updated_at: Timestamp when the collection was last updated.
    """

    __tablename__ = "collections"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Collection ID",
    )
    name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Collection name (3-64 chars, alphanumeric + underscores)",
    )
    type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default="base",
    )
    system: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    schema: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="[]",
        comment="JSON array of field definitions",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name={self.name})>"
