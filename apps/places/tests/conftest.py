"""Test fixtures for places tests."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from apps.places.domain.entities import Category, Location
from apps.places.infrastructure.persistence_memory import (
    InMemoryCategoryStore,
    InMemoryDirectory,
    InMemoryLocationStore,
    InMemoryTransactionManager,
)

CREATED_AT = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def directory() -> InMemoryDirectory:
    """격리된 in-memory 디렉터리."""
    return InMemoryDirectory()


@pytest.fixture
def category_store(directory: InMemoryDirectory) -> InMemoryCategoryStore:
    return InMemoryCategoryStore(directory)


@pytest.fixture
def location_store(directory: InMemoryDirectory) -> InMemoryLocationStore:
    return InMemoryLocationStore(directory)


@pytest.fixture
def tx() -> InMemoryTransactionManager:
    return InMemoryTransactionManager()


@pytest.fixture
def mock_category_store() -> AsyncMock:
    """CategoryStore mock."""
    store = AsyncMock()
    store.get = AsyncMock(return_value=None)
    store.get_by_slug = AsyncMock(return_value=None)
    store.count_locations = AsyncMock(return_value=0)
    store.list_all = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_location_store() -> AsyncMock:
    """LocationStore mock."""
    store = AsyncMock()
    store.get = AsyncMock(return_value=None)
    store.list_all = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_tx() -> AsyncMock:
    """TransactionManager mock."""
    return AsyncMock()


@pytest.fixture
def parks() -> Category:
    """테스트용 카테고리."""
    return Category(id=1, name="Parks", slug="parks", created_at=CREATED_AT)


@pytest.fixture
def museums() -> Category:
    return Category(id=2, name="Museums", slug="museums", created_at=CREATED_AT)


def make_location(
    location_id: int,
    category: Category,
    latitude: float,
    longitude: float,
    **kwargs,
) -> Location:
    """테스트용 Location 생성 헬퍼."""
    return Location(
        id=location_id,
        name=kwargs.pop("name", f"Place {location_id}"),
        address=kwargs.pop("address", f"{location_id} Main St"),
        latitude=latitude,
        longitude=longitude,
        category=category,
        created_at=CREATED_AT,
        **kwargs,
    )


@pytest.fixture
def central_park(parks: Category) -> Location:
    """테스트용 장소 (Central Park)."""
    return make_location(
        1,
        parks,
        40.7831,
        -73.9712,
        name="Central Park",
        address="New York, NY",
        rating=4.8,
    )
