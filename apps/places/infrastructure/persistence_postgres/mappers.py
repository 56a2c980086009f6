"""ORM to Domain Mappers."""

from apps.places.domain.entities import Category, Location
from apps.places.infrastructure.persistence_postgres.models import CategoryModel, LocationModel


def category_model_to_entity(model: CategoryModel) -> Category:
    """CategoryModel을 Category 엔티티로 변환합니다."""
    return Category(
        id=model.id,
        name=model.name,
        slug=model.slug,
        created_at=model.created_at,
    )


def location_model_to_entity(model: LocationModel) -> Location:
    """LocationModel을 Category가 결합된 Location 엔티티로 변환합니다."""
    return Location(
        id=model.id,
        name=model.name,
        description=model.description,
        address=model.address,
        latitude=float(model.latitude),
        longitude=float(model.longitude),
        category=category_model_to_entity(model.category),
        phone=model.phone,
        website=model.website,
        rating=float(model.rating) if model.rating is not None else None,
        created_at=model.created_at,
    )
