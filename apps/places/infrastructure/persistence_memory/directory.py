"""In-memory directory state."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import Iterator

from apps.places.domain.entities import Category, Location


@dataclass
class LocationRecord:
    """저장된 장소 행. Category는 category_id로만 참조합니다."""

    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    category_id: int
    created_at: datetime
    description: str | None = None
    phone: str | None = None
    website: str | None = None
    rating: float | None = None


@dataclass
class InMemoryDirectory:
    """카테고리/장소 테이블 한 쌍.

    모든 제약 검사와 쓰기는 lock 안에서 한 번에 수행되므로
    사전 검사와 쓰기 사이의 경합이 생기지 않습니다.
    """

    categories: dict[int, Category] = field(default_factory=dict)
    locations: dict[int, LocationRecord] = field(default_factory=dict)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _category_ids: Iterator[int] = field(default_factory=lambda: count(1))
    _location_ids: Iterator[int] = field(default_factory=lambda: count(1))

    def next_category_id(self) -> int:
        return next(self._category_ids)

    def next_location_id(self) -> int:
        return next(self._location_ids)

    def category_by_slug(self, slug: str) -> Category | None:
        for category in self.categories.values():
            if category.slug == slug:
                return category
        return None

    def count_references(self, category_id: int) -> int:
        return sum(1 for record in self.locations.values() if record.category_id == category_id)

    def join(self, record: LocationRecord) -> Location:
        """현재 category_id로 Category를 결합합니다."""
        return Location(
            id=record.id,
            name=record.name,
            description=record.description,
            address=record.address,
            latitude=record.latitude,
            longitude=record.longitude,
            category=self.categories[record.category_id],
            phone=record.phone,
            website=record.website,
            rating=record.rating,
            created_at=record.created_at,
        )
