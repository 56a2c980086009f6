"""Location Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from apps.places.domain.entities.category import Category
from apps.places.domain.value_objects import Coordinates


@dataclass(frozen=True)
class Location:
    """카테고리가 결합된 장소 엔티티.

    Location은 항상 현재 소속 Category와 함께 조회됩니다.
    category_id는 결합된 Category에서 파생되므로 둘이 어긋날 수 없습니다.
    """

    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    category: Category
    created_at: datetime
    description: str | None = None
    phone: str | None = None
    website: str | None = None
    rating: float | None = None

    @property
    def category_id(self) -> int:
        return self.category.id

    def coordinates(self) -> Coordinates:
        """좌표 Value Object를 반환합니다."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
