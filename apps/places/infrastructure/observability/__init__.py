"""Observability - OpenTelemetry Tracing."""

from apps.places.infrastructure.observability.tracing import (
    instrument_fastapi,
    setup_tracing,
    shutdown_tracing,
)

__all__ = ["setup_tracing", "instrument_fastapi", "shutdown_tracing"]
