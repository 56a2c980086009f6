"""Nearby DTOs."""

from apps.places.application.nearby.dto.nearby_location import NearbyLocationDTO
from apps.places.application.nearby.dto.search_request import SearchRequest

__all__ = ["NearbyLocationDTO", "SearchRequest"]
