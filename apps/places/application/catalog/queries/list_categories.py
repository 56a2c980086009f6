"""List categories query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.places.domain.entities import Category

if TYPE_CHECKING:
    from apps.places.application.catalog.ports import CategoryStore


class ListCategoriesQuery:
    """카테고리 목록 조회 (name, id 오름차순)."""

    def __init__(self, category_store: "CategoryStore") -> None:
        self._categories = category_store

    async def execute(self) -> list[Category]:
        return list(await self._categories.list_all())
