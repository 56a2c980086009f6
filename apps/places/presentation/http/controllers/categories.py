"""Category Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from apps.places.application.catalog.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from apps.places.application.catalog.queries import (
    GetLocationsByCategoryQuery,
    ListCategoriesQuery,
)
from apps.places.presentation.http.schemas import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    LocationResponse,
    SuccessResponse,
)
from apps.places.setup.dependencies import (
    get_create_category_interactor,
    get_delete_category_interactor,
    get_list_categories_query,
    get_locations_by_category_query,
    get_update_category_interactor,
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    body: CategoryCreateRequest,
    interactor: Annotated[CreateCategoryInteractor, Depends(get_create_category_interactor)],
) -> CategoryResponse:
    """카테고리를 생성합니다. slug가 이미 있으면 409."""
    category = await interactor.execute(body.to_dto())
    return CategoryResponse.model_validate(category)


@router.get("", response_model=list[CategoryResponse], summary="List categories")
async def list_categories(
    query: Annotated[ListCategoriesQuery, Depends(get_list_categories_query)],
) -> list[CategoryResponse]:
    """카테고리 목록을 이름순으로 조회합니다."""
    categories = await query.execute()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.patch("/{category_id}", response_model=CategoryResponse, summary="Update category")
async def update_category(
    body: CategoryUpdateRequest,
    interactor: Annotated[UpdateCategoryInteractor, Depends(get_update_category_interactor)],
    category_id: int = Path(..., gt=0),
) -> CategoryResponse:
    """카테고리를 부분 수정합니다."""
    category = await interactor.execute(category_id, body.to_patch())
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=SuccessResponse, summary="Delete category")
async def delete_category(
    interactor: Annotated[DeleteCategoryInteractor, Depends(get_delete_category_interactor)],
    category_id: int = Path(..., gt=0),
) -> SuccessResponse:
    """카테고리를 삭제합니다. 참조 중인 장소가 있으면 409."""
    await interactor.execute(category_id)
    return SuccessResponse()


@router.get(
    "/{slug}/locations",
    response_model=list[LocationResponse],
    summary="List locations in category",
)
async def locations_by_category(
    query: Annotated[GetLocationsByCategoryQuery, Depends(get_locations_by_category_query)],
    slug: str = Path(..., min_length=1),
) -> list[LocationResponse]:
    """카테고리 slug로 장소를 조회합니다. 일치하는 카테고리가 없으면 빈 목록."""
    locations = await query.execute(slug)
    return [LocationResponse.model_validate(loc) for loc in locations]
