"""Unit tests for CollectionRepository."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.infrastructure.persistence.models import CollectionModel
from wanderer.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)


@pytest.fixture
def mock_session():
    """Create a mock database session."""
    session = AsyncMock(spec=AsyncSession)
    return session


@pytest.fixture
def repository(mock_session):
    """Create a CollectionRepository instance with a mock session."""
    return CollectionRepository(mock_session)


def make_model(collection_id: str = "goeo2ubp103rzp9", name: str = "waypoints") -> CollectionModel:
    return CollectionModel(
        id=collection_id,
        name=name,
        schema='[{"id": "abc1", "name": "title", "type": "text"}]',
    )


@pytest.mark.asyncio
async def test_create_collection(repository, mock_session):
    """Test creating a new collection."""
    collection = make_model()

    result = await repository.create(collection)

    mock_session.add.assert_called_once_with(collection)
    mock_session.flush.assert_called_once()
    assert result == collection


@pytest.mark.asyncio
async def test_update_flushes(repository, mock_session):
    collection = make_model()

    result = await repository.update(collection)

    mock_session.flush.assert_called_once()
    assert result is collection


@pytest.mark.asyncio
async def test_delete_collection(repository, mock_session):
    collection = make_model()

    await repository.delete(collection)

    mock_session.delete.assert_called_once_with(collection)
    mock_session.flush.assert_called_once()


@pytest.mark.asyncio
async def test_get_by_id_not_found(repository, mock_session):
    """Test getting a non-existent collection by ID."""
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = None
    mock_session.execute.return_value = mock_result

    result = await repository.get_by_id("missing")

    mock_session.execute.assert_called_once()
    assert result is None


@pytest.mark.asyncio
async def test_get_by_name_or_id_prefers_id_match(repository, mock_session):
    """An exact id match wins over a collection whose name equals the value."""
    by_name = make_model(collection_id="aaaaaaaaaaaaaaa", name="goeo2ubp103rzp9")
    by_id = make_model()

    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = [by_name, by_id]
    mock_session.execute.return_value = mock_result

    result = await repository.get_by_name_or_id("goeo2ubp103rzp9")

    assert result is by_id


@pytest.mark.asyncio
async def test_get_by_name_or_id_not_found(repository, mock_session):
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = []
    mock_session.execute.return_value = mock_result

    assert await repository.get_by_name_or_id("trails") is None
