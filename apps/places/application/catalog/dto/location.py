"""Location DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apps.places.application.catalog.dto.patch import UNSET, Unset, supplied_fields


@dataclass(frozen=True)
class NewLocation:
    """장소 생성 요청."""

    name: str
    address: str
    latitude: float
    longitude: float
    category_id: int
    description: str | None = None
    phone: str | None = None
    website: str | None = None
    rating: float | None = None


@dataclass(frozen=True)
class LocationPatch:
    """장소 부분 수정 요청.

    필수 속성(name, address, latitude, longitude, category_id)은 None을 받지 않습니다.
    선택 속성(description, phone, website, rating)은 None으로 비울 수 있습니다.
    """

    name: str | Unset = UNSET
    address: str | Unset = UNSET
    latitude: float | Unset = UNSET
    longitude: float | Unset = UNSET
    category_id: int | Unset = UNSET
    description: str | None | Unset = UNSET
    phone: str | None | Unset = UNSET
    website: str | None | Unset = UNSET
    rating: float | None | Unset = UNSET

    REQUIRED_FIELDS = ("name", "address", "latitude", "longitude", "category_id")

    def __post_init__(self) -> None:
        for name in self.REQUIRED_FIELDS:
            if getattr(self, name) is None:
                raise ValueError(f"'{name}' cannot be null")

    def changes(self) -> dict[str, Any]:
        return supplied_fields(self)

    def has_changes(self) -> bool:
        return bool(self.changes())
