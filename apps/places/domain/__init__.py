"""Places Domain Layer."""

from apps.places.domain.entities import Category, Location
from apps.places.domain.services import haversine_km
from apps.places.domain.value_objects import Coordinates

__all__ = ["Category", "Location", "Coordinates", "haversine_km"]
