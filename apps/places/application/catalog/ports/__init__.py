"""Catalog Ports."""

from apps.places.application.catalog.ports.category_store import CategoryStore
from apps.places.application.catalog.ports.location_store import LocationStore

__all__ = ["CategoryStore", "LocationStore"]
