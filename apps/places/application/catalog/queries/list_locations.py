"""List locations query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.places.domain.entities import Location

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import LocationStore


class ListLocationsQuery:
    """카테고리가 결합된 전체 장소 목록 조회."""

    def __init__(self, location_store: "LocationStore") -> None:
        self._locations = location_store

    async def execute(self) -> list[Location]:
        return list(await self._locations.list_all())
