"""In-memory Infrastructure.

격리된 테스트 인스턴스와 로컬 실행을 위한 저장소 구현입니다.
"""

from apps.places.infrastructure.persistence_memory.directory import InMemoryDirectory
from apps.places.infrastructure.persistence_memory.stores import (
    InMemoryCategoryStore,
    InMemoryLocationStore,
    InMemoryTransactionManager,
)

__all__ = [
    "InMemoryDirectory",
    "InMemoryCategoryStore",
    "InMemoryLocationStore",
    "InMemoryTransactionManager",
]
