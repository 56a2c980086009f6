"""HTTP Schemas."""

from apps.places.presentation.http.schemas.category import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from apps.places.presentation.http.schemas.common import SuccessResponse
from apps.places.presentation.http.schemas.location import (
    LocationCreateRequest,
    LocationResponse,
    LocationUpdateRequest,
    NearbyLocationResponse,
)

__all__ = [
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "CategoryResponse",
    "LocationCreateRequest",
    "LocationUpdateRequest",
    "LocationResponse",
    "NearbyLocationResponse",
    "SuccessResponse",
]
