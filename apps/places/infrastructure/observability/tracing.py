"""OpenTelemetry Tracing - Places Service."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from apps.places.setup.config import Settings

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def setup_tracing(settings: Settings) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        설정 여부 (otel_enabled=False면 False)
    """
    global _tracer_provider  # noqa: PLW0603
    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled")
        return False

    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint, insecure=True),
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service_name": settings.service_name,
            "endpoint": settings.otel_exporter_otlp_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI, settings: Settings) -> None:
    """FastAPI 자동 계측."""
    if not settings.otel_enabled:
        return
    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    logger.info("FastAPI instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
