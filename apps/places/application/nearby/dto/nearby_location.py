"""Nearby Location DTO."""

from __future__ import annotations

from dataclasses import dataclass

from apps.places.domain.entities import Location


@dataclass
class NearbyLocationDTO:
    """거리 정보가 붙은 장소."""

    location: Location
    distance_km: float
    distance_text: str
