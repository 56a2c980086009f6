"""Create location command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.application.catalog.dto import NewLocation
from apps.places.domain.entities import Location
from apps.places.domain.exceptions import CategoryNotFoundError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import CategoryStore, LocationStore
    from apps.places.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateLocationInteractor:
    """장소 생성 유스케이스."""

    def __init__(
        self,
        category_store: "CategoryStore",
        location_store: "LocationStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._categories = category_store
        self._locations = location_store
        self._tx = transaction_manager

    async def execute(self, request: NewLocation) -> Location:
        """장소를 생성합니다.

        category_id는 insert 전에 확인하며, 실패하면 아무 것도 기록되지 않습니다.

        Raises:
            CategoryNotFoundError: category_id가 존재하지 않음
        """
        if await self._categories.get(request.category_id) is None:
            raise CategoryNotFoundError(request.category_id)

        location = await self._locations.add(request)
        await self._tx.commit()

        logger.info(
            "Location created",
            extra={"location_id": location.id, "category_id": location.category_id},
        )
        return location
