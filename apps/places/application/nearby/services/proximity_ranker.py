"""Proximity Ranker Service.

기준 좌표로부터의 거리로 장소를 거르고 정렬합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from typing import Iterable

from apps.places.application.nearby.dto import NearbyLocationDTO
from apps.places.domain.entities import Location
from apps.places.domain.value_objects import Coordinates


class ProximityRanker:
    """반경 필터 + 거리순 정렬 서비스."""

    @classmethod
    def rank(
        cls,
        origin: Coordinates,
        locations: Iterable[Location],
        radius_km: float,
    ) -> list[NearbyLocationDTO]:
        """반경 이내(경계 포함) 장소를 가까운 순으로 반환합니다.

        거리가 같으면 id 오름차순입니다.
        """
        within: list[tuple[float, Location]] = []
        for location in locations:
            distance = origin.distance_to(location.coordinates())
            if distance <= radius_km:
                within.append((distance, location))

        within.sort(key=lambda pair: (pair[0], pair[1].id))
        return [
            NearbyLocationDTO(
                location=location,
                distance_km=distance,
                distance_text=cls.format_distance(distance),
            )
            for distance, location in within
        ]

    @staticmethod
    def format_distance(distance_km: float) -> str:
        meters = distance_km * 1000
        if meters < 1000:
            return f"{int(meters)}m"
        return f"{distance_km:.1f}km"
