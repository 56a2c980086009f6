"""HTTP Controllers 테스트.

저장소 의존성을 격리된 in-memory 인스턴스로 교체해 실제 유스케이스를 거칩니다.
"""

from __future__ import annotations

from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apps.places.infrastructure.persistence_memory import (
    InMemoryCategoryStore,
    InMemoryLocationStore,
    InMemoryTransactionManager,
)
from apps.places.main import app
from apps.places.setup.config import Settings, get_settings
from apps.places.setup.dependencies import (
    get_category_store,
    get_location_query,
    get_location_store,
    get_memory_directory,
    get_transaction_manager,
)


@pytest.fixture
def client(
    category_store: InMemoryCategoryStore,
    location_store: InMemoryLocationStore,
    tx: InMemoryTransactionManager,
) -> Iterator[TestClient]:
    """in-memory 저장소가 주입된 TestClient."""
    app.dependency_overrides[get_category_store] = lambda: category_store
    app.dependency_overrides[get_location_store] = lambda: location_store
    app.dependency_overrides[get_transaction_manager] = lambda: tx
    yield TestClient(app)
    app.dependency_overrides.clear()


def create_category(client: TestClient, name: str = "Parks", slug: str = "parks") -> dict:
    response = client.post("/api/v1/categories", json={"name": name, "slug": slug})
    assert response.status_code == 201
    return response.json()


def create_location(client: TestClient, category_id: int, **overrides) -> dict:
    body = {
        "name": "Central Park",
        "address": "New York, NY",
        "latitude": 40.7831,
        "longitude": -73.9712,
        "category_id": category_id,
    }
    body.update(overrides)
    response = client.post("/api/v1/locations", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealthController:
    """HealthController 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        """헬스체크 엔드포인트."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "places-api"}

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == "pong"


class TestCategoryController:
    """CategoryController 테스트."""

    def test_create_and_list(self, client: TestClient) -> None:
        create_category(client, "Parks", "parks")
        create_category(client, "Museums", "museums")

        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        assert [c["slug"] for c in response.json()] == ["museums", "parks"]

    def test_create_response_shape(self, client: TestClient) -> None:
        data = create_category(client)

        assert data["id"] == 1
        assert data["name"] == "Parks"
        assert data["slug"] == "parks"
        assert "created_at" in data

    def test_duplicate_slug_returns_409(self, client: TestClient) -> None:
        create_category(client)

        response = client.post("/api/v1/categories", json={"name": "Other", "slug": "parks"})

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Category with slug 'parks' already exists",
            "code": "CATEGORY_SLUG_CONFLICT",
        }

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "", "slug": "parks"},
            {"name": "Parks", "slug": ""},
            {"name": "Parks"},
            {"name": "Parks", "slug": "has space"},
            {"name": "x" * 101, "slug": "parks"},
        ],
    )
    def test_invalid_create_returns_422(self, client: TestClient, body: dict) -> None:
        response = client.post("/api/v1/categories", json=body)
        assert response.status_code == 422

    def test_update_same_slug(self, client: TestClient) -> None:
        created = create_category(client, slug="same-as-before")

        response = client.patch(
            f"/api/v1/categories/{created['id']}",
            json={"name": "Renamed", "slug": "same-as-before"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"

    def test_update_conflict(self, client: TestClient) -> None:
        create_category(client, "Parks", "parks")
        museums = create_category(client, "Museums", "museums")

        response = client.patch(f"/api/v1/categories/{museums['id']}", json={"slug": "parks"})

        assert response.status_code == 409

    def test_update_missing_returns_404(self, client: TestClient) -> None:
        response = client.patch("/api/v1/categories/42", json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"

    def test_update_null_name_returns_422(self, client: TestClient) -> None:
        created = create_category(client)

        response = client.patch(f"/api/v1/categories/{created['id']}", json={"name": None})

        assert response.status_code == 422

    def test_delete(self, client: TestClient) -> None:
        created = create_category(client)

        response = client.delete(f"/api/v1/categories/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/v1/categories").json() == []

    def test_delete_in_use_returns_409(self, client: TestClient) -> None:
        created = create_category(client)
        create_location(client, created["id"])

        response = client.delete(f"/api/v1/categories/{created['id']}")

        assert response.status_code == 409
        data = response.json()
        assert data["code"] == "CATEGORY_IN_USE"
        assert data["location_count"] == 1
        assert len(client.get("/api/v1/locations").json()) == 1

    def test_delete_missing_returns_404(self, client: TestClient) -> None:
        response = client.delete("/api/v1/categories/7")

        assert response.status_code == 404
        assert response.json()["detail"] == "Category with id 7 not found"

    def test_locations_by_category(self, client: TestClient) -> None:
        parks = create_category(client, "Parks", "parks")
        museums = create_category(client, "Museums", "museums")
        create_location(client, parks["id"])
        create_location(client, museums["id"], name="The Met")

        response = client.get("/api/v1/categories/museums/locations")

        assert response.status_code == 200
        assert [loc["name"] for loc in response.json()] == ["The Met"]

    def test_locations_by_unknown_category_is_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/unknown/locations")

        assert response.status_code == 200
        assert response.json() == []


class TestLocationController:
    """LocationController 테스트."""

    def test_create_returns_joined_category(self, client: TestClient) -> None:
        parks = create_category(client)

        data = create_location(
            client,
            parks["id"],
            description="",
            phone="212-310-6600",
            website="https://www.centralparknyc.org",
            rating=4.75,
        )

        assert data["category_id"] == parks["id"]
        assert data["category"]["slug"] == "parks"
        assert data["description"] is None
        assert data["website"] == "https://www.centralparknyc.org"
        assert data["rating"] == 4.8

    def test_create_unknown_category_returns_404(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/locations",
            json={
                "name": "Nowhere",
                "address": "-",
                "latitude": 0,
                "longitude": 0,
                "category_id": 99,
            },
        )

        assert response.status_code == 404
        assert client.get("/api/v1/locations").json() == []

    @pytest.mark.parametrize(
        "overrides",
        [
            {"latitude": 90.5},
            {"longitude": -180.1},
            {"rating": 5.1},
            {"rating": -0.1},
            {"website": "not a url"},
            {"name": ""},
            {"phone": "0" * 21},
        ],
    )
    def test_invalid_create_returns_422(self, client: TestClient, overrides: dict) -> None:
        parks = create_category(client)
        body = {
            "name": "Central Park",
            "address": "New York, NY",
            "latitude": 40.7831,
            "longitude": -73.9712,
            "category_id": parks["id"],
        }
        body.update(overrides)

        response = client.post("/api/v1/locations", json=body)

        assert response.status_code == 422

    def test_get_location(self, client: TestClient) -> None:
        parks = create_category(client)
        created = create_location(client, parks["id"])

        response = client.get(f"/api/v1/locations/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_location_returns_404(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/5")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Location with id 5 not found",
            "code": "LOCATION_NOT_FOUND",
        }

    def test_patch_omitted_vs_null(self, client: TestClient) -> None:
        """생략된 필드는 유지, null은 선택 필드를 비움."""
        parks = create_category(client)
        created = create_location(client, parks["id"], phone="212-310-6600", rating=4.5)

        response = client.patch(f"/api/v1/locations/{created['id']}", json={"rating": None})

        assert response.status_code == 200
        data = response.json()
        assert data["rating"] is None
        assert data["phone"] == "212-310-6600"
        assert data["name"] == "Central Park"

    @pytest.mark.parametrize("field", ["name", "address", "latitude", "longitude", "category_id"])
    def test_patch_null_required_field_returns_422(self, client: TestClient, field: str) -> None:
        parks = create_category(client)
        created = create_location(client, parks["id"])

        response = client.patch(f"/api/v1/locations/{created['id']}", json={field: None})

        assert response.status_code == 422

    def test_patch_unknown_category_is_atomic(self, client: TestClient) -> None:
        parks = create_category(client)
        created = create_location(client, parks["id"])

        response = client.patch(
            f"/api/v1/locations/{created['id']}",
            json={"name": "Renamed", "category_id": 99},
        )

        assert response.status_code == 404
        assert client.get(f"/api/v1/locations/{created['id']}").json()["name"] == "Central Park"

    def test_patch_missing_location_returns_404(self, client: TestClient) -> None:
        response = client.patch("/api/v1/locations/3", json={"name": "X"})

        assert response.status_code == 404

    def test_delete(self, client: TestClient) -> None:
        parks = create_category(client)
        created = create_location(client, parks["id"])

        response = client.delete(f"/api/v1/locations/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get(f"/api/v1/locations/{created['id']}").status_code == 404

    def test_delete_missing_returns_404(self, client: TestClient) -> None:
        assert client.delete("/api/v1/locations/3").status_code == 404

    def test_get_location_uses_query_dependency(self, client: TestClient) -> None:
        """GetLocationQuery 의존성 교체."""
        query = AsyncMock()
        query.execute = AsyncMock(side_effect=AssertionError("should not be called"))
        app.dependency_overrides[get_location_query] = lambda: query

        response = client.get("/api/v1/locations/0")

        assert response.status_code == 422
        query.execute.assert_not_awaited()


class TestNearbyController:
    """주변 장소 검색 테스트."""

    def test_nearby_default_radius(self, client: TestClient) -> None:
        parks = create_category(client)
        create_location(client, parks["id"])
        create_location(
            client, parks["id"], name="Van Cortlandt Park", latitude=40.9, longitude=-73.8
        )

        response = client.get(
            "/api/v1/locations/nearby", params={"latitude": 40.7831, "longitude": -73.9712}
        )

        assert response.status_code == 200
        data = response.json()
        assert [d["name"] for d in data] == ["Central Park"]
        assert data[0]["distance_km"] == 0.0
        assert data[0]["distance_text"] == "0m"
        assert data[0]["category"]["slug"] == "parks"

    def test_nearby_wider_radius_sorted(self, client: TestClient) -> None:
        parks = create_category(client)
        create_location(
            client, parks["id"], name="Van Cortlandt Park", latitude=40.9, longitude=-73.8
        )
        create_location(client, parks["id"])

        response = client.get(
            "/api/v1/locations/nearby",
            params={"latitude": 40.7831, "longitude": -73.9712, "radius": 25},
        )

        assert [d["name"] for d in response.json()] == ["Central Park", "Van Cortlandt Park"]

    def test_nearby_category_filter(self, client: TestClient) -> None:
        parks = create_category(client, "Parks", "parks")
        museums = create_category(client, "Museums", "museums")
        create_location(client, parks["id"])
        create_location(client, museums["id"], name="The Met", latitude=40.7794, longitude=-73.9632)

        response = client.get(
            "/api/v1/locations/nearby",
            params={"latitude": 40.7831, "longitude": -73.9712, "category_slug": "museums"},
        )

        assert [d["name"] for d in response.json()] == ["The Met"]

    def test_nearby_blank_category_slug_means_all(self, client: TestClient) -> None:
        """빈 category_slug는 필터 없음."""
        parks = create_category(client, "Parks", "parks")
        museums = create_category(client, "Museums", "museums")
        create_location(client, parks["id"])
        create_location(client, museums["id"], name="The Met", latitude=40.7794, longitude=-73.9632)

        response = client.get(
            "/api/v1/locations/nearby",
            params={"latitude": 40.7831, "longitude": -73.9712, "category_slug": ""},
        )

        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Central Park", "The Met"]

    def test_nearby_route_not_shadowed_by_id(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/nearby", params={"latitude": 0, "longitude": 0})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize(
        "params",
        [
            {"latitude": 91, "longitude": 0},
            {"latitude": 0, "longitude": 181},
            {"latitude": 0, "longitude": 0, "radius": 0},
            {"latitude": 0, "longitude": 0, "radius": -5},
            {"longitude": 0},
        ],
    )
    def test_nearby_invalid_params_return_422(self, client: TestClient, params: dict) -> None:
        response = client.get("/api/v1/locations/nearby", params=params)
        assert response.status_code == 422


class TestMemoryStoreBackend:
    """store_backend="memory" 설정 테스트."""

    @pytest.fixture
    def memory_client(self) -> Iterator[TestClient]:
        """저장소 교체 없이 설정만 memory 백엔드로 바꾼 TestClient."""
        get_memory_directory.cache_clear()
        app.dependency_overrides[get_settings] = lambda: Settings(store_backend="memory")
        yield TestClient(app)
        app.dependency_overrides.clear()
        get_memory_directory.cache_clear()

    def test_state_shared_across_requests(self, memory_client: TestClient) -> None:
        """DB 없이 요청 간 상태가 유지됨."""
        created = create_category(memory_client)
        create_location(memory_client, created["id"])

        categories = memory_client.get("/api/v1/categories").json()
        locations = memory_client.get("/api/v1/locations").json()

        assert [c["slug"] for c in categories] == ["parks"]
        assert [loc["category"]["id"] for loc in locations] == [created["id"]]

    def test_invariants_enforced(self, memory_client: TestClient) -> None:
        created = create_category(memory_client)
        create_location(memory_client, created["id"])

        response = memory_client.delete(f"/api/v1/categories/{created['id']}")

        assert response.status_code == 409
        assert response.json()["location_count"] == 1
