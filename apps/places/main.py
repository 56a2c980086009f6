"""Places API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.places.infrastructure.observability import (
    instrument_fastapi,
    setup_tracing,
    shutdown_tracing,
)
from apps.places.presentation.http.controllers import (
    category_router,
    health_router,
    location_router,
)
from apps.places.presentation.http.errors import register_exception_handlers
from apps.places.setup.config import Settings, get_settings
from apps.places.setup.database import dispose_engine
from apps.places.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings)
    logger.info(f"Starting {app_settings.service_name}")

    setup_tracing(app_settings)

    yield

    logger.info(f"Shutting down {app_settings.service_name}")
    await dispose_engine()
    shutdown_tracing()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app_settings = app_settings or settings
    app = FastAPI(
        title="Places API",
        description="Category and location directory with radius search",
        version=app_settings.service_version,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        redoc_url="/api/v1/redoc",
        lifespan=lifespan,
    )

    # CORS 미들웨어 추가
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings
    instrument_fastapi(app, app_settings)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(category_router, prefix="/api/v1")
    app.include_router(location_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.places.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
