"""SQLAlchemy Category Store Implementation."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.places.application.catalog.dto import CategoryPatch, NewCategory
from apps.places.application.catalog.ports import CategoryStore
from apps.places.domain.entities import Category
from apps.places.domain.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    CategorySlugConflictError,
)
from apps.places.infrastructure.persistence_postgres.mappers import category_model_to_entity
from apps.places.infrastructure.persistence_postgres.models import CategoryModel, LocationModel

logger = logging.getLogger(__name__)


class SqlaCategoryStore(CategoryStore):
    """SQLAlchemy 기반 카테고리 저장소.

    slug UNIQUE, locations.category_id FK(RESTRICT) 제약 위반은
    사전 검사와 같은 도메인 예외로 변환합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def add(self, category: NewCategory) -> Category:
        model = CategoryModel(name=category.name, slug=category.slug)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # UniqueConstraint 위반 - 동시 요청이 먼저 같은 slug를 기록함
            await self._session.rollback()
            logger.info("Category slug taken (concurrent request)", extra={"slug": category.slug})
            raise CategorySlugConflictError(category.slug) from exc
        return category_model_to_entity(model)

    async def get(self, category_id: int) -> Category | None:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            return None
        return category_model_to_entity(model)

    async def get_by_slug(self, slug: str) -> Category | None:
        result = await self._session.execute(
            select(CategoryModel).where(CategoryModel.slug == slug)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return category_model_to_entity(model)

    async def update(self, category_id: int, patch: CategoryPatch) -> Category:
        changes = patch.changes()
        if changes:
            try:
                result = await self._session.execute(
                    update(CategoryModel).where(CategoryModel.id == category_id).values(**changes)
                )
            except IntegrityError as exc:
                await self._session.rollback()
                raise CategorySlugConflictError(str(changes.get("slug"))) from exc
            if result.rowcount == 0:
                raise CategoryNotFoundError(category_id)

        model = await self._fetch(category_id)
        if model is None:
            raise CategoryNotFoundError(category_id)
        return category_model_to_entity(model)

    async def delete(self, category_id: int) -> None:
        try:
            result = await self._session.execute(
                delete(CategoryModel).where(CategoryModel.id == category_id)
            )
        except IntegrityError as exc:
            # FK RESTRICT 위반 - 사전 검사 이후 장소가 추가됨
            await self._session.rollback()
            location_count = await self.count_locations(category_id)
            raise CategoryInUseError(category_id, location_count) from exc
        if result.rowcount == 0:
            raise CategoryNotFoundError(category_id)

    async def list_all(self) -> Sequence[Category]:
        result = await self._session.execute(
            select(CategoryModel).order_by(CategoryModel.name.asc(), CategoryModel.id.asc())
        )
        return [category_model_to_entity(model) for model in result.scalars().all()]

    async def count_locations(self, category_id: int) -> int:
        result = await self._session.execute(
            select(func.count())
            .select_from(LocationModel)
            .where(LocationModel.category_id == category_id)
        )
        return int(result.scalar_one())

    async def _fetch(self, category_id: int) -> CategoryModel | None:
        result = await self._session.execute(
            select(CategoryModel)
            .where(CategoryModel.id == category_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
