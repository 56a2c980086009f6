"""Location 도메인 예외."""

from apps.places.domain.exceptions.base import NotFoundError


class LocationNotFoundError(NotFoundError):
    """장소를 찾을 수 없음."""

    def __init__(self, location_id: int) -> None:
        self.location_id = location_id
        super().__init__(f"Location with id {location_id} not found")
