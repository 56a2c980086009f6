"""Category Store Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from apps.places.application.catalog.dto import CategoryPatch, NewCategory
from apps.places.domain.entities import Category


class CategoryStore(ABC):
    """카테고리 저장소 포트.

    구현체는 쓰기 시점에 제약을 스스로 검사해야 합니다.
    Interactor의 사전 검사는 에러 메시지를 위한 fast path일 뿐이며,
    동시 요청 사이의 경합은 저장소가 막습니다.
    """

    @abstractmethod
    async def add(self, category: NewCategory) -> Category:
        """카테고리를 생성합니다.

        Raises:
            CategorySlugConflictError: slug 중복
        """
        ...

    @abstractmethod
    async def get(self, category_id: int) -> Category | None:
        """ID로 카테고리를 조회합니다."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Category | None:
        """slug로 카테고리를 조회합니다."""
        ...

    @abstractmethod
    async def update(self, category_id: int, patch: CategoryPatch) -> Category:
        """전달된 필드만 수정합니다.

        Raises:
            CategoryNotFoundError: 카테고리 없음
            CategorySlugConflictError: 다른 카테고리가 같은 slug 사용 중
        """
        ...

    @abstractmethod
    async def delete(self, category_id: int) -> None:
        """카테고리를 삭제합니다. 연쇄 삭제하지 않습니다.

        Raises:
            CategoryNotFoundError: 카테고리 없음
            CategoryInUseError: 참조 중인 장소가 있음
        """
        ...

    @abstractmethod
    async def list_all(self) -> Sequence[Category]:
        """name 오름차순, 동일 name은 id 오름차순으로 반환합니다."""
        ...

    @abstractmethod
    async def count_locations(self, category_id: int) -> int:
        """카테고리를 참조하는 장소 수를 반환합니다."""
        ...
