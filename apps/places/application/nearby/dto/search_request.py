"""Search Request DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SearchRequest:
    """반경 검색 요청 DTO.

    radius_km가 None이면 기본 반경을 사용합니다.
    """

    latitude: float
    longitude: float
    radius_km: float | None = None
    category_slug: str | None = None
