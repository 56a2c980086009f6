"""Location Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from apps.places.application.catalog.commands import (
    CreateLocationInteractor,
    DeleteLocationInteractor,
    UpdateLocationInteractor,
)
from apps.places.application.catalog.queries import GetLocationQuery, ListLocationsQuery
from apps.places.application.nearby import GetNearbyLocationsQuery, SearchRequest
from apps.places.presentation.http.schemas import (
    LocationCreateRequest,
    LocationResponse,
    LocationUpdateRequest,
    NearbyLocationResponse,
    SuccessResponse,
)
from apps.places.setup.dependencies import (
    get_create_location_interactor,
    get_delete_location_interactor,
    get_list_locations_query,
    get_location_query,
    get_nearby_locations_query,
    get_update_location_interactor,
)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.post(
    "",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create location",
)
async def create_location(
    body: LocationCreateRequest,
    interactor: Annotated[CreateLocationInteractor, Depends(get_create_location_interactor)],
) -> LocationResponse:
    """장소를 생성합니다. category_id가 없으면 404."""
    location = await interactor.execute(body.to_dto())
    return LocationResponse.model_validate(location)


@router.get("", response_model=list[LocationResponse], summary="List locations")
async def list_locations(
    query: Annotated[ListLocationsQuery, Depends(get_list_locations_query)],
) -> list[LocationResponse]:
    """전체 장소를 카테고리와 함께 조회합니다."""
    locations = await query.execute()
    return [LocationResponse.model_validate(loc) for loc in locations]


@router.get(
    "/nearby",
    response_model=list[NearbyLocationResponse],
    summary="Find locations within radius",
)
async def nearby(
    query: Annotated[GetNearbyLocationsQuery, Depends(get_nearby_locations_query)],
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: float | None = Query(
        None,
        gt=0,
        description="검색 반경 (km). 생략 시 기본 반경",
    ),
    category_slug: str | None = Query(None, description="빈 값이면 전체 카테고리"),
) -> list[NearbyLocationResponse]:
    """반경 내 장소를 가까운 순으로 조회합니다."""
    request = SearchRequest(
        latitude=latitude,
        longitude=longitude,
        radius_km=radius,
        category_slug=(category_slug or "").strip() or None,
    )
    entries = await query.execute(request)
    return [NearbyLocationResponse.from_dto(e) for e in entries]


@router.get("/{location_id}", response_model=LocationResponse, summary="Get location")
async def get_location(
    query: Annotated[GetLocationQuery, Depends(get_location_query)],
    location_id: int = Path(..., gt=0),
) -> LocationResponse:
    """장소 상세를 조회합니다."""
    location = await query.execute(location_id)
    return LocationResponse.model_validate(location)


@router.patch("/{location_id}", response_model=LocationResponse, summary="Update location")
async def update_location(
    body: LocationUpdateRequest,
    interactor: Annotated[UpdateLocationInteractor, Depends(get_update_location_interactor)],
    location_id: int = Path(..., gt=0),
) -> LocationResponse:
    """장소를 부분 수정합니다. 생략된 필드는 유지, null은 선택 필드를 비웁니다."""
    location = await interactor.execute(location_id, body.to_patch())
    return LocationResponse.model_validate(location)


@router.delete("/{location_id}", response_model=SuccessResponse, summary="Delete location")
async def delete_location(
    interactor: Annotated[DeleteLocationInteractor, Depends(get_delete_location_interactor)],
    location_id: int = Path(..., gt=0),
) -> SuccessResponse:
    """장소를 삭제합니다."""
    await interactor.execute(location_id)
    return SuccessResponse()
