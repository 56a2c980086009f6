"""Dependency Injection for FastAPI.

요청마다 하나의 세션을 열고, 같은 세션 위에 저장소와 트랜잭션 관리자를 구성합니다.
store_backend="memory"이면 세션 없이 프로세스 공용 in-memory 저장소를 사용합니다.
테스트는 get_category_store / get_location_store / get_transaction_manager를
dependency_overrides로 교체해 격리된 저장소를 주입합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.places.application.catalog.commands import (
    CreateCategoryInteractor,
    CreateLocationInteractor,
    DeleteCategoryInteractor,
    DeleteLocationInteractor,
    UpdateCategoryInteractor,
    UpdateLocationInteractor,
)
from apps.places.application.catalog.ports import CategoryStore, LocationStore
from apps.places.application.catalog.queries import (
    GetLocationQuery,
    GetLocationsByCategoryQuery,
    ListCategoriesQuery,
    ListLocationsQuery,
)
from apps.places.application.common.ports import TransactionManager
from apps.places.application.nearby import GetNearbyLocationsQuery
from apps.places.infrastructure.persistence_memory import (
    InMemoryCategoryStore,
    InMemoryDirectory,
    InMemoryLocationStore,
    InMemoryTransactionManager,
)
from apps.places.infrastructure.persistence_postgres import (
    SqlaCategoryStore,
    SqlaLocationStore,
    SqlaTransactionManager,
)
from apps.places.setup.config import Settings, get_settings
from apps.places.setup.database import get_session_factory

SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def get_memory_directory() -> InMemoryDirectory:
    """memory 백엔드가 공유하는 디렉터리 (프로세스당 하나)."""
    return InMemoryDirectory()


async def get_db_session(settings: SettingsDep) -> AsyncIterator[AsyncSession | None]:
    """DB 세션을 주입합니다. memory 백엔드에서는 세션을 열지 않습니다."""
    if settings.store_backend == "memory":
        yield None
        return
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()


SessionDep = Annotated[AsyncSession | None, Depends(get_db_session)]


async def get_category_store(session: SessionDep) -> CategoryStore:
    """Category Store를 주입합니다."""
    if session is None:
        return InMemoryCategoryStore(get_memory_directory())
    return SqlaCategoryStore(session)


async def get_location_store(session: SessionDep) -> LocationStore:
    """Location Store를 주입합니다."""
    if session is None:
        return InMemoryLocationStore(get_memory_directory())
    return SqlaLocationStore(session)


async def get_transaction_manager(session: SessionDep) -> TransactionManager:
    """Transaction Manager를 주입합니다."""
    if session is None:
        return InMemoryTransactionManager()
    return SqlaTransactionManager(session)


CategoryStoreDep = Annotated[CategoryStore, Depends(get_category_store)]
LocationStoreDep = Annotated[LocationStore, Depends(get_location_store)]
TransactionManagerDep = Annotated[TransactionManager, Depends(get_transaction_manager)]


# Commands


async def get_create_category_interactor(
    categories: CategoryStoreDep,
    tx: TransactionManagerDep,
) -> CreateCategoryInteractor:
    return CreateCategoryInteractor(categories, tx)


async def get_update_category_interactor(
    categories: CategoryStoreDep,
    tx: TransactionManagerDep,
) -> UpdateCategoryInteractor:
    return UpdateCategoryInteractor(categories, tx)


async def get_delete_category_interactor(
    categories: CategoryStoreDep,
    tx: TransactionManagerDep,
) -> DeleteCategoryInteractor:
    return DeleteCategoryInteractor(categories, tx)


async def get_create_location_interactor(
    categories: CategoryStoreDep,
    locations: LocationStoreDep,
    tx: TransactionManagerDep,
) -> CreateLocationInteractor:
    return CreateLocationInteractor(categories, locations, tx)


async def get_update_location_interactor(
    categories: CategoryStoreDep,
    locations: LocationStoreDep,
    tx: TransactionManagerDep,
) -> UpdateLocationInteractor:
    return UpdateLocationInteractor(categories, locations, tx)


async def get_delete_location_interactor(
    locations: LocationStoreDep,
    tx: TransactionManagerDep,
) -> DeleteLocationInteractor:
    return DeleteLocationInteractor(locations, tx)


# Queries


async def get_list_categories_query(categories: CategoryStoreDep) -> ListCategoriesQuery:
    return ListCategoriesQuery(categories)


async def get_list_locations_query(locations: LocationStoreDep) -> ListLocationsQuery:
    return ListLocationsQuery(locations)


async def get_locations_by_category_query(
    locations: LocationStoreDep,
) -> GetLocationsByCategoryQuery:
    return GetLocationsByCategoryQuery(locations)


async def get_location_query(locations: LocationStoreDep) -> GetLocationQuery:
    return GetLocationQuery(locations)


async def get_nearby_locations_query(
    locations: LocationStoreDep,
    settings: SettingsDep,
) -> GetNearbyLocationsQuery:
    """GetNearbyLocationsQuery를 주입합니다."""
    return GetNearbyLocationsQuery(locations, default_radius_km=settings.default_radius_km)
