"""Delete location command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import LocationStore
    from apps.places.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class DeleteLocationInteractor:
    """장소 삭제 유스케이스."""

    def __init__(
        self,
        location_store: "LocationStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._locations = location_store
        self._tx = transaction_manager

    async def execute(self, location_id: int) -> None:
        """장소를 삭제합니다.

        Raises:
            LocationNotFoundError: 장소 없음
        """
        if await self._locations.get(location_id) is None:
            raise LocationNotFoundError(location_id)

        await self._locations.delete(location_id)
        await self._tx.commit()

        logger.info("Location deleted", extra={"location_id": location_id})
