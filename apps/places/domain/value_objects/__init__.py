"""Value Objects."""

from apps.places.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]
