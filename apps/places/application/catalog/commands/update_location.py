"""Update location command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.application.catalog.dto import UNSET, LocationPatch
from apps.places.domain.entities import Location
from apps.places.domain.exceptions import CategoryNotFoundError, LocationNotFoundError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import CategoryStore, LocationStore
    from apps.places.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class UpdateLocationInteractor:
    """장소 부분 수정 유스케이스.

    전달된 필드는 모두 적용되거나 하나도 적용되지 않습니다.
    """

    def __init__(
        self,
        category_store: "CategoryStore",
        location_store: "LocationStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._categories = category_store
        self._locations = location_store
        self._tx = transaction_manager

    async def execute(self, location_id: int, patch: LocationPatch) -> Location:
        """장소를 수정합니다.

        Raises:
            LocationNotFoundError: 장소 없음
            CategoryNotFoundError: 새 category_id가 존재하지 않음
        """
        logger.info(
            "Location update requested",
            extra={"location_id": location_id, "fields": sorted(patch.changes())},
        )

        current = await self._locations.get(location_id)
        if current is None:
            raise LocationNotFoundError(location_id)

        if patch.category_id is not UNSET:
            if await self._categories.get(patch.category_id) is None:
                raise CategoryNotFoundError(patch.category_id)

        if not patch.has_changes():
            return current

        location = await self._locations.update(location_id, patch)
        await self._tx.commit()
        return location
