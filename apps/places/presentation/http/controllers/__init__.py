"""HTTP Controllers."""

from apps.places.presentation.http.controllers.categories import router as category_router
from apps.places.presentation.http.controllers.health import router as health_router
from apps.places.presentation.http.controllers.locations import router as location_router

__all__ = ["health_router", "category_router", "location_router"]
