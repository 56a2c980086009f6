"""Nearby Services."""

from apps.places.application.nearby.services.proximity_ranker import ProximityRanker

__all__ = ["ProximityRanker"]
