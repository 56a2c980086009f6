"""Setup Module."""

from apps.places.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
