"""도메인 예외."""

from apps.places.domain.exceptions.base import ConflictError, DomainError, NotFoundError
from apps.places.domain.exceptions.category import (
    CategoryInUseError,
    CategoryNotFoundError,
    CategorySlugConflictError,
)
from apps.places.domain.exceptions.location import LocationNotFoundError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "CategoryNotFoundError",
    "CategorySlugConflictError",
    "CategoryInUseError",
    "LocationNotFoundError",
]
