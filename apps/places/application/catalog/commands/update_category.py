"""Update category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.places.application.catalog.dto import UNSET, CategoryPatch
from apps.places.domain.entities import Category
from apps.places.domain.exceptions import CategoryNotFoundError, CategorySlugConflictError

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import CategoryStore
    from apps.places.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class UpdateCategoryInteractor:
    """카테고리 부분 수정 유스케이스."""

    def __init__(
        self,
        category_store: "CategoryStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._categories = category_store
        self._tx = transaction_manager

    async def execute(self, category_id: int, patch: CategoryPatch) -> Category:
        """카테고리를 수정합니다.

        자기 자신의 현재 slug를 다시 지정하는 것은 충돌이 아닙니다.

        Raises:
            CategoryNotFoundError: 카테고리 없음
            CategorySlugConflictError: 다른 카테고리가 같은 slug 사용 중
        """
        logger.info(
            "Category update requested",
            extra={"category_id": category_id, "fields": sorted(patch.changes())},
        )

        current = await self._categories.get(category_id)
        if current is None:
            raise CategoryNotFoundError(category_id)

        if patch.slug is not UNSET and patch.slug != current.slug:
            owner = await self._categories.get_by_slug(patch.slug)
            if owner is not None and owner.id != category_id:
                raise CategorySlugConflictError(patch.slug)

        if not patch.has_changes():
            return current

        category = await self._categories.update(category_id, patch)
        await self._tx.commit()
        return category
