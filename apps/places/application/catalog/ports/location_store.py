"""Location Store Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from apps.places.application.catalog.dto import LocationPatch, NewLocation
from apps.places.domain.entities import Location


class LocationStore(ABC):
    """장소 저장소 포트.

    반환되는 Location은 항상 현재 category_id 기준으로 Category가 결합되어 있습니다.
    """

    @abstractmethod
    async def add(self, location: NewLocation) -> Location:
        """장소를 생성합니다.

        Raises:
            CategoryNotFoundError: category_id가 존재하지 않음
        """
        ...

    @abstractmethod
    async def get(self, location_id: int) -> Location | None:
        """ID로 장소를 조회합니다."""
        ...

    @abstractmethod
    async def update(self, location_id: int, patch: LocationPatch) -> Location:
        """전달된 필드만 수정합니다. 실패 시 아무 필드도 바뀌지 않습니다.

        Raises:
            LocationNotFoundError: 장소 없음
            CategoryNotFoundError: 새 category_id가 존재하지 않음
        """
        ...

    @abstractmethod
    async def delete(self, location_id: int) -> None:
        """장소를 삭제합니다.

        Raises:
            LocationNotFoundError: 장소 없음
        """
        ...

    @abstractmethod
    async def list_all(self, category_slug: str | None = None) -> Sequence[Location]:
        """장소 목록을 id 오름차순으로 반환합니다.

        Args:
            category_slug: 지정 시 해당 slug의 카테고리에 속한 장소만.
                일치하는 카테고리가 없으면 빈 목록.
        """
        ...
