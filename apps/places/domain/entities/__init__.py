"""Domain Entities."""

from apps.places.domain.entities.category import Category
from apps.places.domain.entities.location import Location

__all__ = ["Category", "Location"]
