"""Coordinates Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.places.domain.services.distance import haversine_km


@dataclass(frozen=True)
class Coordinates:
    """위도/경도 좌표 (degrees)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")

    def distance_to(self, other: Coordinates) -> float:
        """다른 좌표까지의 대원 거리(km)를 반환합니다."""
        return haversine_km(self, other)
