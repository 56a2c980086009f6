"""Catalog DTOs."""

from apps.places.application.catalog.dto.category import CategoryPatch, NewCategory
from apps.places.application.catalog.dto.location import LocationPatch, NewLocation
from apps.places.application.catalog.dto.patch import UNSET, Unset

__all__ = ["UNSET", "Unset", "NewCategory", "CategoryPatch", "NewLocation", "LocationPatch"]
