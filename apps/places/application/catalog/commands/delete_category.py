"""Delete category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.domain.exceptions import CategoryInUseError, CategoryNotFoundError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import CategoryStore
    from apps.places.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class DeleteCategoryInteractor:
    """카테고리 삭제 유스케이스.

    Note:
        참조 중인 장소가 있으면 삭제를 거부합니다. 장소를 연쇄 삭제하지 않습니다.
    """

    def __init__(
        self,
        category_store: "CategoryStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._categories = category_store
        self._tx = transaction_manager

    async def execute(self, category_id: int) -> None:
        """카테고리를 삭제합니다.

        Raises:
            CategoryNotFoundError: 카테고리 없음
            CategoryInUseError: 참조 중인 장소 수와 함께
        """
        if await self._categories.get(category_id) is None:
            raise CategoryNotFoundError(category_id)

        location_count = await self._categories.count_locations(category_id)
        if location_count > 0:
            logger.info(
                "Category deletion rejected",
                extra={"category_id": category_id, "location_count": location_count},
            )
            raise CategoryInUseError(category_id, location_count)

        await self._categories.delete(category_id)
        await self._tx.commit()

        logger.info("Category deleted", extra={"category_id": category_id})
