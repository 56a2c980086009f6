"""Category Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Category:
    """장소 카테고리.

    slug는 전체 카테고리에서 유일합니다.
    """

    id: int
    name: str
    slug: str
    created_at: datetime
