"""Application Queries 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from apps.places.application.catalog.dto import NewCategory, NewLocation
from apps.places.application.catalog.queries import (
    GetLocationQuery,
    GetLocationsByCategoryQuery,
    ListCategoriesQuery,
    ListLocationsQuery,
)
from apps.places.application.nearby import GetNearbyLocationsQuery, SearchRequest
from apps.places.domain.entities import Category, Location
from apps.places.domain.exceptions import LocationNotFoundError
from apps.places.infrastructure.persistence_memory import (
    InMemoryCategoryStore,
    InMemoryLocationStore,
)
from apps.places.tests.conftest import make_location

pytestmark = pytest.mark.asyncio


async def seed(
    category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
) -> tuple[Category, Category]:
    """Parks 2곳, Museums 1곳."""
    parks = await category_store.add(NewCategory(name="Parks", slug="parks"))
    museums = await category_store.add(NewCategory(name="Museums", slug="museums"))
    await location_store.add(
        NewLocation(
            name="Central Park",
            address="New York, NY",
            latitude=40.7831,
            longitude=-73.9712,
            category_id=parks.id,
        )
    )
    await location_store.add(
        NewLocation(
            name="The Met",
            address="1000 5th Ave",
            latitude=40.7794,
            longitude=-73.9632,
            category_id=museums.id,
        )
    )
    await location_store.add(
        NewLocation(
            name="Van Cortlandt Park",
            address="Bronx, NY",
            latitude=40.9,
            longitude=-73.8,
            category_id=parks.id,
        )
    )
    return parks, museums


class TestListQueries:
    """목록 조회 Query 테스트."""

    async def test_list_categories_ordered_by_name(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        await seed(category_store, location_store)

        result = await ListCategoriesQuery(category_store).execute()

        assert [c.name for c in result] == ["Museums", "Parks"]

    async def test_list_locations_joined_and_ordered_by_id(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        parks, museums = await seed(category_store, location_store)

        result = await ListLocationsQuery(location_store).execute()

        assert [loc.id for loc in result] == [1, 2, 3]
        assert [loc.category for loc in result] == [parks, museums, parks]

    async def test_list_empty(self, location_store: InMemoryLocationStore) -> None:
        assert await ListLocationsQuery(location_store).execute() == []


class TestGetLocationsByCategoryQuery:
    """GetLocationsByCategoryQuery 테스트."""

    async def test_filters_by_slug(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        await seed(category_store, location_store)

        result = await GetLocationsByCategoryQuery(location_store).execute("parks")

        assert [loc.name for loc in result] == ["Central Park", "Van Cortlandt Park"]
        assert all(loc.category.slug == "parks" for loc in result)

    async def test_unknown_slug_returns_empty(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        """일치하는 카테고리가 없어도 에러가 아닌 빈 목록."""
        await seed(category_store, location_store)

        assert await GetLocationsByCategoryQuery(location_store).execute("nope") == []


class TestGetLocationQuery:
    """GetLocationQuery 테스트."""

    async def test_found(self, mock_location_store: AsyncMock, central_park: Location) -> None:
        mock_location_store.get.return_value = central_park

        result = await GetLocationQuery(mock_location_store).execute(1)

        assert result == central_park
        mock_location_store.get.assert_awaited_once_with(1)

    async def test_not_found(self, mock_location_store: AsyncMock) -> None:
        with pytest.raises(LocationNotFoundError):
            await GetLocationQuery(mock_location_store).execute(1)


class TestGetNearbyLocationsQuery:
    """GetNearbyLocationsQuery 테스트."""

    async def test_radius_10_excludes_far_location(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        await seed(category_store, location_store)
        query = GetNearbyLocationsQuery(location_store)

        result = await query.execute(
            SearchRequest(latitude=40.7831, longitude=-73.9712, radius_km=10)
        )

        assert [e.location.name for e in result] == ["Central Park", "The Met"]
        assert result[0].distance_km == pytest.approx(0.0, abs=1e-9)
        assert result[0].distance_text == "0m"

    async def test_default_radius_used_when_omitted(
        self, mock_location_store: AsyncMock, parks: Category
    ) -> None:
        far = make_location(1, parks, 40.9, -73.8)
        mock_location_store.list_all.return_value = [far]

        assert await GetNearbyLocationsQuery(mock_location_store).execute(
            SearchRequest(latitude=40.7831, longitude=-73.9712)
        ) == []

        wide = GetNearbyLocationsQuery(mock_location_store, default_radius_km=25)
        result = await wide.execute(SearchRequest(latitude=40.7831, longitude=-73.9712))
        assert len(result) == 1

    async def test_category_filter_passed_to_store(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        await seed(category_store, location_store)
        query = GetNearbyLocationsQuery(location_store)

        result = await query.execute(
            SearchRequest(
                latitude=40.7831, longitude=-73.9712, radius_km=50, category_slug="museums"
            )
        )

        assert [e.location.name for e in result] == ["The Met"]

    async def test_unknown_category_slug_returns_empty(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        await seed(category_store, location_store)

        result = await GetNearbyLocationsQuery(location_store).execute(
            SearchRequest(latitude=40.7831, longitude=-73.9712, category_slug="cafes")
        )

        assert result == []

    async def test_results_sorted_and_within_radius(
        self, category_store: InMemoryCategoryStore, location_store: InMemoryLocationStore
    ) -> None:
        await seed(category_store, location_store)

        result = await GetNearbyLocationsQuery(location_store).execute(
            SearchRequest(latitude=40.8, longitude=-73.9, radius_km=30)
        )

        distances = [e.distance_km for e in result]
        assert distances == sorted(distances)
        assert all(d <= 30 for d in distances)
        assert len(result) == 3

    @pytest.mark.parametrize("radius", [0, -1.5])
    async def test_non_positive_radius_rejected(
        self, mock_location_store: AsyncMock, radius: float
    ) -> None:
        with pytest.raises(ValueError):
            await GetNearbyLocationsQuery(mock_location_store).execute(
                SearchRequest(latitude=0, longitude=0, radius_km=radius)
            )
        mock_location_store.list_all.assert_not_awaited()

    async def test_invalid_origin_rejected(self, mock_location_store: AsyncMock) -> None:
        with pytest.raises(ValueError):
            await GetNearbyLocationsQuery(mock_location_store).execute(
                SearchRequest(latitude=95, longitude=0, radius_km=1)
            )
