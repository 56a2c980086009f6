"""Places Infrastructure Layer."""

from apps.places.infrastructure.persistence_postgres import (
    Base,
    CategoryModel,
    LocationModel,
    SqlaCategoryStore,
    SqlaLocationStore,
    SqlaTransactionManager,
)

__all__ = [
    "Base",
    "CategoryModel",
    "LocationModel",
    "SqlaCategoryStore",
    "SqlaLocationStore",
    "SqlaTransactionManager",
]
