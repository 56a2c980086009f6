"""Nearby Location Application Layer."""

from apps.places.application.nearby.dto import NearbyLocationDTO, SearchRequest
from apps.places.application.nearby.queries import GetNearbyLocationsQuery
from apps.places.application.nearby.services import ProximityRanker

__all__ = [
    "SearchRequest",
    "NearbyLocationDTO",
    "GetNearbyLocationsQuery",
    "ProximityRanker",
]
