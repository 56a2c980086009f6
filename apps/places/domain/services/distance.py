"""Great-circle distance.

Haversine formula on a sphere of radius 6371 km:

    a = sin²(Δlat/2) + cos(lat1)·cos(lat2)·sin²(Δlng/2)
    d = 2·R·atan2(√a, √(1-a))
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.places.domain.value_objects import Coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: "Coordinates", target: "Coordinates") -> float:
    """두 좌표 사이의 대원 거리(km)를 계산합니다.

    Args:
        origin: 기준 좌표
        target: 대상 좌표

    Returns:
        거리 (km). 같은 좌표면 0.0
    """
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lat = lat2 - lat1
    d_lng = math.radians(target.longitude - origin.longitude)

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    # 부동소수점 오차로 a가 [0, 1]을 벗어나는 경우 보정
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))
