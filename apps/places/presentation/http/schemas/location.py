"""Location HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from apps.places.application.catalog.dto import LocationPatch, NewLocation
from apps.places.application.nearby import NearbyLocationDTO
from apps.places.domain.constants import (
    LOCATION_NAME_MAX_LENGTH,
    MAX_RATING,
    MIN_RATING,
    PHONE_MAX_LENGTH,
)
from apps.places.presentation.http.schemas.category import CategoryResponse
from apps.places.presentation.http.schemas.common import (
    blank_to_none,
    reject_explicit_null,
    validate_url,
)

OPTIONAL_TEXT_FIELDS = ("description", "phone", "website")
REQUIRED_FIELDS = ("name", "address", "latitude", "longitude", "category_id")


class _LocationFields(BaseModel):
    """생성/수정 요청이 공유하는 검증 규칙."""

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before", check_fields=False)
    @classmethod
    def _blank_optional_text(cls, value):
        return blank_to_none(value)

    @field_validator("website", check_fields=False)
    @classmethod
    def _website_is_url(cls, value: str | None) -> str | None:
        return validate_url(value)


class LocationCreateRequest(_LocationFields):
    """장소 생성 요청 스키마."""

    name: str = Field(..., min_length=1, max_length=LOCATION_NAME_MAX_LENGTH)
    description: str | None = None
    address: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    category_id: int = Field(..., gt=0)
    phone: str | None = Field(None, max_length=PHONE_MAX_LENGTH)
    website: str | None = None
    rating: float | None = Field(None, ge=MIN_RATING, le=MAX_RATING)

    def to_dto(self) -> NewLocation:
        return NewLocation(**self.model_dump())


class LocationUpdateRequest(_LocationFields):
    """장소 부분 수정 요청 스키마.

    - 생략: 변경 없음
    - null: description/phone/website/rating을 비움
    - 필수 필드의 null은 422
    """

    name: str | None = Field(None, min_length=1, max_length=LOCATION_NAME_MAX_LENGTH)
    description: str | None = None
    address: str | None = Field(None, min_length=1)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    category_id: int | None = Field(None, gt=0)
    phone: str | None = Field(None, max_length=PHONE_MAX_LENGTH)
    website: str | None = None
    rating: float | None = Field(None, ge=MIN_RATING, le=MAX_RATING)

    @model_validator(mode="after")
    def _required_not_null(self) -> "LocationUpdateRequest":
        reject_explicit_null(self, REQUIRED_FIELDS)
        return self

    def to_patch(self) -> LocationPatch:
        return LocationPatch(**{name: getattr(self, name) for name in self.model_fields_set})


class LocationResponse(BaseModel):
    """장소 응답 스키마 (카테고리 포함)."""

    id: int
    name: str
    description: str | None
    address: str
    latitude: float
    longitude: float
    category_id: int
    category: CategoryResponse
    phone: str | None
    website: str | None
    rating: float | None
    created_at: datetime

    model_config = {"from_attributes": True}


class NearbyLocationResponse(LocationResponse):
    """거리 정보가 붙은 장소 응답 스키마."""

    distance_km: float
    distance_text: str

    @classmethod
    def from_dto(cls, entry: NearbyLocationDTO) -> "NearbyLocationResponse":
        base = LocationResponse.model_validate(entry.location)
        return cls(
            **base.model_dump(),
            distance_km=round(entry.distance_km, 3),
            distance_text=entry.distance_text,
        )
