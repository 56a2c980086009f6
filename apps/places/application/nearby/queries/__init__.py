"""Nearby Queries."""

from apps.places.application.nearby.queries.get_nearby_locations import GetNearbyLocationsQuery

__all__ = ["GetNearbyLocationsQuery"]
