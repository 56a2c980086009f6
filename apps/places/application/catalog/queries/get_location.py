"""Get location query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.places.domain.entities import Location
from apps.places.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import LocationStore


class GetLocationQuery:
    """단일 장소 조회."""

    def __init__(self, location_store: "LocationStore") -> None:
        self._locations = location_store

    async def execute(self, location_id: int) -> Location:
        location = await self._locations.get(location_id)
        if location is None:
            raise LocationNotFoundError(location_id)
        return location
