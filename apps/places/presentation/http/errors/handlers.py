"""Exception Handlers.

도메인 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.places.domain.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    CategorySlugConflictError,
    ConflictError,
    DomainError,
    LocationNotFoundError,
    NotFoundError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(CategoryNotFoundError)
    async def category_not_found_handler(request: Request, exc: CategoryNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "CATEGORY_NOT_FOUND"},
        )

    @app.exception_handler(LocationNotFoundError)
    async def location_not_found_handler(request: Request, exc: LocationNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "LOCATION_NOT_FOUND"},
        )

    @app.exception_handler(CategorySlugConflictError)
    async def slug_conflict_handler(request: Request, exc: CategorySlugConflictError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "CATEGORY_SLUG_CONFLICT"},
        )

    @app.exception_handler(CategoryInUseError)
    async def category_in_use_handler(request: Request, exc: CategoryInUseError):
        return JSONResponse(
            status_code=409,
            content={
                "detail": exc.message,
                "code": "CATEGORY_IN_USE",
                "location_count": exc.location_count,
            },
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "NOT_FOUND"},
        )

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "CONFLICT"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )
