"""Catalog Commands."""

from apps.places.application.catalog.commands.create_category import CreateCategoryInteractor
from apps.places.application.catalog.commands.create_location import CreateLocationInteractor
from apps.places.application.catalog.commands.delete_category import DeleteCategoryInteractor
from apps.places.application.catalog.commands.delete_location import DeleteLocationInteractor
from apps.places.application.catalog.commands.update_category import UpdateCategoryInteractor
from apps.places.application.catalog.commands.update_location import UpdateLocationInteractor

__all__ = [
    "CreateCategoryInteractor",
    "UpdateCategoryInteractor",
    "DeleteCategoryInteractor",
    "CreateLocationInteractor",
    "UpdateLocationInteractor",
    "DeleteLocationInteractor",
]
