"""HTTP Error Handlers."""

from apps.places.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
