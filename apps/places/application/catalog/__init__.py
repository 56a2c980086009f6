"""Catalog (category/location management) Application Layer."""

from apps.places.application.catalog.dto import (
    UNSET,
    CategoryPatch,
    LocationPatch,
    NewCategory,
    NewLocation,
    Unset,
)
from apps.places.application.catalog.ports import CategoryStore, LocationStore

__all__ = [
    "UNSET",
    "Unset",
    "NewCategory",
    "CategoryPatch",
    "NewLocation",
    "LocationPatch",
    "CategoryStore",
    "LocationStore",
]
