"""Catalog Queries."""

from apps.places.application.catalog.queries.get_location import GetLocationQuery
from apps.places.application.catalog.queries.get_locations_by_category import (
    GetLocationsByCategoryQuery,
)
from apps.places.application.catalog.queries.list_categories import ListCategoriesQuery
from apps.places.application.catalog.queries.list_locations import ListLocationsQuery

__all__ = [
    "ListCategoriesQuery",
    "ListLocationsQuery",
    "GetLocationsByCategoryQuery",
    "GetLocationQuery",
]
