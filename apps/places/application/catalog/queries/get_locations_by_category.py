"""Get locations by category query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.domain.entities import Location

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import LocationStore

logger = logging.getLogger(__name__)


class GetLocationsByCategoryQuery:
    """카테고리 slug로 장소를 조회합니다.

    slug가 어떤 카테고리와도 일치하지 않으면 에러가 아닌 빈 목록입니다.
    """

    def __init__(self, location_store: "LocationStore") -> None:
        self._locations = location_store

    async def execute(self, category_slug: str) -> list[Location]:
        locations = list(await self._locations.list_all(category_slug=category_slug))
        logger.debug(
            "Locations by category",
            extra={"category_slug": category_slug, "results_count": len(locations)},
        )
        return locations
