"""Storage precision constants.

locations.latitude  NUMERIC(10, 8)
locations.longitude NUMERIC(11, 8)
locations.rating    NUMERIC(2, 1)
"""

COORDINATE_SCALE = 8
RATING_SCALE = 1

CATEGORY_NAME_MAX_LENGTH = 100
CATEGORY_SLUG_MAX_LENGTH = 100
LOCATION_NAME_MAX_LENGTH = 200
PHONE_MAX_LENGTH = 20

MIN_RATING = 0.0
MAX_RATING = 5.0


def quantize_coordinate(value: float) -> float:
    """좌표를 저장 정밀도로 반올림합니다."""
    return round(float(value), COORDINATE_SCALE)


def quantize_rating(value: float | None) -> float | None:
    """평점을 저장 정밀도로 반올림합니다."""
    if value is None:
        return None
    return round(float(value), RATING_SCALE)
