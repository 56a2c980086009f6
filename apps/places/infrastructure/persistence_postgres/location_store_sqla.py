"""SQLAlchemy Location Store Implementation."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from apps.places.application.catalog.dto import LocationPatch, NewLocation
from apps.places.application.catalog.ports import LocationStore
from apps.places.domain.constants import quantize_coordinate, quantize_rating
from apps.places.domain.entities import Location
from apps.places.domain.exceptions import CategoryNotFoundError, LocationNotFoundError
from apps.places.infrastructure.persistence_postgres.mappers import location_model_to_entity
from apps.places.infrastructure.persistence_postgres.models import CategoryModel, LocationModel

logger = logging.getLogger(__name__)


class SqlaLocationStore(LocationStore):
    """SQLAlchemy 기반 장소 저장소.

    모든 조회는 locations.category_id 기준으로 categories와 INNER JOIN 합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def add(self, location: NewLocation) -> Location:
        model = LocationModel(
            name=location.name,
            description=location.description,
            address=location.address,
            latitude=quantize_coordinate(location.latitude),
            longitude=quantize_coordinate(location.longitude),
            category_id=location.category_id,
            phone=location.phone,
            website=location.website,
            rating=quantize_rating(location.rating),
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # FK 위반 - 사전 검사 이후 카테고리가 삭제됨
            await self._session.rollback()
            logger.info(
                "Location insert rejected by category FK",
                extra={"category_id": location.category_id},
            )
            raise CategoryNotFoundError(location.category_id) from exc
        return await self._get_required(model.id)

    async def get(self, location_id: int) -> Location | None:
        model = await self._fetch(location_id)
        if model is None:
            return None
        return location_model_to_entity(model)

    async def update(self, location_id: int, patch: LocationPatch) -> Location:
        values = self._storage_values(patch.changes())
        if values:
            # 단일 UPDATE 문 - 전달된 필드는 모두 반영되거나 하나도 반영되지 않음
            try:
                result = await self._session.execute(
                    update(LocationModel).where(LocationModel.id == location_id).values(**values)
                )
            except IntegrityError as exc:
                await self._session.rollback()
                raise CategoryNotFoundError(values.get("category_id")) from exc
            if result.rowcount == 0:
                raise LocationNotFoundError(location_id)
        return await self._get_required(location_id)

    async def delete(self, location_id: int) -> None:
        result = await self._session.execute(
            delete(LocationModel).where(LocationModel.id == location_id)
        )
        if result.rowcount == 0:
            raise LocationNotFoundError(location_id)

    async def list_all(self, category_slug: str | None = None) -> Sequence[Location]:
        query = (
            select(LocationModel)
            .join(LocationModel.category)
            .options(contains_eager(LocationModel.category))
            .order_by(LocationModel.id.asc())
            .execution_options(populate_existing=True)
        )
        if category_slug is not None:
            query = query.where(CategoryModel.slug == category_slug)
        result = await self._session.execute(query)
        return [location_model_to_entity(model) for model in result.scalars().all()]

    async def _fetch(self, location_id: int) -> LocationModel | None:
        result = await self._session.execute(
            select(LocationModel)
            .join(LocationModel.category)
            .options(contains_eager(LocationModel.category))
            .where(LocationModel.id == location_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _get_required(self, location_id: int) -> Location:
        model = await self._fetch(location_id)
        if model is None:
            raise LocationNotFoundError(location_id)
        return location_model_to_entity(model)

    @staticmethod
    def _storage_values(changes: dict[str, Any]) -> dict[str, Any]:
        """저장 정밀도에 맞게 값을 변환합니다."""
        values = dict(changes)
        for key in ("latitude", "longitude"):
            if key in values:
                values[key] = quantize_coordinate(values[key])
        if "rating" in values:
            values["rating"] = quantize_rating(values["rating"])
        return values
