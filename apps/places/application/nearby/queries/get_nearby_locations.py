"""Get Nearby Locations Query.

반경 내 장소를 가까운 순으로 조회하는 Query입니다.
Port로 후보를 읽고, 거리 계산과 정렬은 Service에 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.application.nearby.dto import NearbyLocationDTO, SearchRequest
from apps.places.application.nearby.services import ProximityRanker
from apps.places.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import LocationStore

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 10.0


class GetNearbyLocationsQuery:
    """주변 장소 조회 Query.

    Workflow:
        1. 후보 조회 (Port, category_slug 지정 시 해당 카테고리만)
        2. haversine 거리 계산 및 반경 필터 (Service)
        3. 거리, id 순 정렬 (Service)
    """

    def __init__(
        self,
        location_store: "LocationStore",
        default_radius_km: float = DEFAULT_RADIUS_KM,
    ) -> None:
        """Initialize.

        Args:
            location_store: 장소 저장소 Port
            default_radius_km: radius 미지정 시 사용할 반경 (km)
        """
        self._locations = location_store
        self._default_radius_km = default_radius_km

    async def execute(self, request: SearchRequest) -> list[NearbyLocationDTO]:
        """주변 장소를 조회합니다.

        Args:
            request: 검색 요청 DTO

        Returns:
            가까운 순 목록. 일치하는 장소가 없으면 빈 목록
        """
        radius_km = request.radius_km if request.radius_km is not None else self._default_radius_km
        if radius_km <= 0:
            raise ValueError(f"radius must be positive, got {radius_km}")
        origin = Coordinates(latitude=request.latitude, longitude=request.longitude)

        logger.info(
            "Nearby search started",
            extra={
                "lat": request.latitude,
                "lon": request.longitude,
                "radius_km": radius_km,
                "category_slug": request.category_slug,
            },
        )

        candidates = await self._locations.list_all(category_slug=request.category_slug)
        entries = ProximityRanker.rank(origin, candidates, radius_km)

        logger.info(
            "Nearby search completed",
            extra={"candidates_count": len(candidates), "results_count": len(entries)},
        )
        return entries
