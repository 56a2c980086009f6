"""Category DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apps.places.application.catalog.dto.patch import UNSET, Unset, supplied_fields


@dataclass(frozen=True)
class NewCategory:
    """카테고리 생성 요청."""

    name: str
    slug: str


@dataclass(frozen=True)
class CategoryPatch:
    """카테고리 부분 수정 요청."""

    name: str | Unset = UNSET
    slug: str | Unset = UNSET

    def changes(self) -> dict[str, Any]:
        return supplied_fields(self)

    def has_changes(self) -> bool:
        return bool(self.changes())
