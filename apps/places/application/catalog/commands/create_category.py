"""Create category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.application.catalog.dto import NewCategory
from apps.places.domain.entities import Category
from apps.places.domain.exceptions import CategorySlugConflictError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import CategoryStore
    from apps.places.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateCategoryInteractor:
    """카테고리 생성 유스케이스."""

    def __init__(
        self,
        category_store: "CategoryStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._categories = category_store
        self._tx = transaction_manager

    async def execute(self, request: NewCategory) -> Category:
        """카테고리를 생성합니다.

        Raises:
            CategorySlugConflictError: slug 중복 (사전 검사 또는 저장소 제약)
        """
        if await self._categories.get_by_slug(request.slug) is not None:
            raise CategorySlugConflictError(request.slug)

        category = await self._categories.add(request)
        await self._tx.commit()

        logger.info(
            "Category created",
            extra={"category_id": category.id, "slug": category.slug},
        )
        return category
