"""Category 도메인 예외."""

from __future__ import annotations

from apps.places.domain.exceptions.base import ConflictError, NotFoundError


class CategoryNotFoundError(NotFoundError):
    """카테고리를 찾을 수 없음."""

    def __init__(self, category_id: int | None = None, *, slug: str | None = None) -> None:
        self.category_id = category_id
        self.slug = slug
        if slug is not None:
            super().__init__(f"Category with slug '{slug}' not found")
        else:
            super().__init__(f"Category with id {category_id} not found")


class CategorySlugConflictError(ConflictError):
    """이미 사용 중인 slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Category with slug '{slug}' already exists")


class CategoryInUseError(ConflictError):
    """장소가 참조 중인 카테고리는 삭제할 수 없음."""

    def __init__(self, category_id: int, location_count: int) -> None:
        self.category_id = category_id
        self.location_count = location_count
        super().__init__(
            f"Cannot delete category with id {category_id} because it has "
            f"{location_count} associated locations"
        )
