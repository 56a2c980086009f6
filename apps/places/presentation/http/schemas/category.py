"""Category HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from apps.places.application.catalog.dto import CategoryPatch, NewCategory
from apps.places.domain.constants import CATEGORY_NAME_MAX_LENGTH, CATEGORY_SLUG_MAX_LENGTH
from apps.places.presentation.http.schemas.common import reject_explicit_null

# RFC 3986 unreserved characters
SLUG_PATTERN = r"^[A-Za-z0-9._~-]+$"


class CategoryCreateRequest(BaseModel):
    """카테고리 생성 요청 스키마."""

    name: str = Field(..., min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    slug: str = Field(
        ...,
        min_length=1,
        max_length=CATEGORY_SLUG_MAX_LENGTH,
        pattern=SLUG_PATTERN,
    )

    def to_dto(self) -> NewCategory:
        return NewCategory(name=self.name, slug=self.slug)


class CategoryUpdateRequest(BaseModel):
    """카테고리 부분 수정 요청 스키마.

    생략된 필드는 변경하지 않습니다. name/slug에 null은 허용되지 않습니다.
    """

    name: str | None = Field(None, min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    slug: str | None = Field(
        None,
        min_length=1,
        max_length=CATEGORY_SLUG_MAX_LENGTH,
        pattern=SLUG_PATTERN,
    )

    @model_validator(mode="after")
    def _required_not_null(self) -> "CategoryUpdateRequest":
        reject_explicit_null(self, ("name", "slug"))
        return self

    def to_patch(self) -> CategoryPatch:
        return CategoryPatch(**{name: getattr(self, name) for name in self.model_fields_set})


class CategoryResponse(BaseModel):
    """카테고리 응답 스키마."""

    id: int
    name: str
    slug: str
    created_at: datetime

    model_config = {"from_attributes": True}
