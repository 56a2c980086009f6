"""Places Application Layer."""

from apps.places.application.catalog import (
    CategoryPatch,
    CategoryStore,
    LocationPatch,
    LocationStore,
    NewCategory,
    NewLocation,
)
from apps.places.application.nearby import (
    GetNearbyLocationsQuery,
    NearbyLocationDTO,
    ProximityRanker,
    SearchRequest,
)

__all__ = [
    "NewCategory",
    "CategoryPatch",
    "NewLocation",
    "LocationPatch",
    "CategoryStore",
    "LocationStore",
    "SearchRequest",
    "NearbyLocationDTO",
    "ProximityRanker",
    "GetNearbyLocationsQuery",
]
