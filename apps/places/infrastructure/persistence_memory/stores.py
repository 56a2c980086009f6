"""In-memory store implementations."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Sequence

from apps.places.application.catalog.dto import (
    CategoryPatch,
    LocationPatch,
    NewCategory,
    NewLocation,
)
from apps.places.application.catalog.ports import CategoryStore, LocationStore
from apps.places.domain.constants import quantize_coordinate, quantize_rating
from apps.places.domain.entities import Category, Location
from apps.places.domain.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    CategorySlugConflictError,
    LocationNotFoundError,
)
from apps.places.infrastructure.persistence_memory.directory import (
    InMemoryDirectory,
    LocationRecord,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCategoryStore(CategoryStore):
    """InMemoryDirectory 기반 카테고리 저장소."""

    def __init__(self, directory: InMemoryDirectory) -> None:
        self._directory = directory

    async def add(self, category: NewCategory) -> Category:
        async with self._directory.lock:
            if self._directory.category_by_slug(category.slug) is not None:
                raise CategorySlugConflictError(category.slug)
            created = Category(
                id=self._directory.next_category_id(),
                name=category.name,
                slug=category.slug,
                created_at=_now(),
            )
            self._directory.categories[created.id] = created
            return created

    async def get(self, category_id: int) -> Category | None:
        return self._directory.categories.get(category_id)

    async def get_by_slug(self, slug: str) -> Category | None:
        return self._directory.category_by_slug(slug)

    async def update(self, category_id: int, patch: CategoryPatch) -> Category:
        async with self._directory.lock:
            current = self._directory.categories.get(category_id)
            if current is None:
                raise CategoryNotFoundError(category_id)
            changes = patch.changes()
            if "slug" in changes:
                owner = self._directory.category_by_slug(changes["slug"])
                if owner is not None and owner.id != category_id:
                    raise CategorySlugConflictError(changes["slug"])
            updated = replace(current, **changes)
            self._directory.categories[category_id] = updated
            return updated

    async def delete(self, category_id: int) -> None:
        async with self._directory.lock:
            if category_id not in self._directory.categories:
                raise CategoryNotFoundError(category_id)
            location_count = self._directory.count_references(category_id)
            if location_count > 0:
                raise CategoryInUseError(category_id, location_count)
            del self._directory.categories[category_id]

    async def list_all(self) -> Sequence[Category]:
        return sorted(self._directory.categories.values(), key=lambda c: (c.name, c.id))

    async def count_locations(self, category_id: int) -> int:
        return self._directory.count_references(category_id)


class InMemoryLocationStore(LocationStore):
    """InMemoryDirectory 기반 장소 저장소."""

    def __init__(self, directory: InMemoryDirectory) -> None:
        self._directory = directory

    async def add(self, location: NewLocation) -> Location:
        async with self._directory.lock:
            if location.category_id not in self._directory.categories:
                raise CategoryNotFoundError(location.category_id)
            record = LocationRecord(
                id=self._directory.next_location_id(),
                name=location.name,
                description=location.description,
                address=location.address,
                latitude=quantize_coordinate(location.latitude),
                longitude=quantize_coordinate(location.longitude),
                category_id=location.category_id,
                phone=location.phone,
                website=location.website,
                rating=quantize_rating(location.rating),
                created_at=_now(),
            )
            self._directory.locations[record.id] = record
            return self._directory.join(record)

    async def get(self, location_id: int) -> Location | None:
        record = self._directory.locations.get(location_id)
        if record is None:
            return None
        return self._directory.join(record)

    async def update(self, location_id: int, patch: LocationPatch) -> Location:
        async with self._directory.lock:
            current = self._directory.locations.get(location_id)
            if current is None:
                raise LocationNotFoundError(location_id)
            changes = patch.changes()
            category_id = changes.get("category_id")
            if category_id is not None and category_id not in self._directory.categories:
                raise CategoryNotFoundError(category_id)
            for key in ("latitude", "longitude"):
                if key in changes:
                    changes[key] = quantize_coordinate(changes[key])
            if "rating" in changes:
                changes["rating"] = quantize_rating(changes["rating"])
            updated = replace(current, **changes)
            self._directory.locations[location_id] = updated
            return self._directory.join(updated)

    async def delete(self, location_id: int) -> None:
        async with self._directory.lock:
            if self._directory.locations.pop(location_id, None) is None:
                raise LocationNotFoundError(location_id)

    async def list_all(self, category_slug: str | None = None) -> Sequence[Location]:
        records = sorted(self._directory.locations.values(), key=lambda r: r.id)
        if category_slug is not None:
            category = self._directory.category_by_slug(category_slug)
            if category is None:
                return []
            records = [r for r in records if r.category_id == category.id]
        return [self._directory.join(record) for record in records]


class InMemoryTransactionManager:
    """쓰기가 즉시 반영되므로 commit/rollback은 아무 것도 하지 않습니다."""

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None
