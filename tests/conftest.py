"""Pytest configuration for all tests."""

import json
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from wanderer.infrastructure.persistence import models  # noqa: F401
from wanderer.infrastructure.persistence.database import Base
from wanderer.infrastructure.persistence.models import CollectionModel

WAYPOINTS_ID = "goeo2ubp103rzp9"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite engine with the system tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def waypoints(session_factory) -> CollectionModel:
    """Seed the waypoints collection with a single title field."""
    model = CollectionModel(
        id=WAYPOINTS_ID,
        name="waypoints",
        type="base",
        system=False,
        schema=json.dumps([{"id": "abc1", "name": "title", "type": "text"}]),
    )
    async with session_factory() as session:
        session.add(model)
        await session.commit()
    return model
