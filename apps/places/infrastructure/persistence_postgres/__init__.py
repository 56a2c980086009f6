"""PostgreSQL Infrastructure."""

from apps.places.infrastructure.persistence_postgres.category_store_sqla import (
    SqlaCategoryStore,
)
from apps.places.infrastructure.persistence_postgres.location_store_sqla import (
    SqlaLocationStore,
)
from apps.places.infrastructure.persistence_postgres.models import (
    Base,
    CategoryModel,
    LocationModel,
)
from apps.places.infrastructure.persistence_postgres.transaction_manager_sqla import (
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
