"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from lawncare.config import configure_logging, get_settings
from lawncare.domain.common.exceptions import BusinessRuleViolationError, DomainError
from lawncare.exceptions import LawnCareError
from lawncare.infrastructure.common.schemas import ErrorResponse
from lawncare.infrastructure.finance.routers import expenses, inventory
from lawncare.infrastructure.journal.routers import media_logs
from lawncare.infrastructure.profile.routers import settings as settings_router
from lawncare.infrastructure.schedule.routers import tasks

settings = get_settings()

configure_logging(settings.ENVIRONMENT)
logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(detail=message).model_dump())


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers and error handlers."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LawnCareError)
    async def lawn_care_error_handler(request: Request, exc: LawnCareError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(BusinessRuleViolationError)
    async def business_rule_handler(
        request: Request, exc: BusinessRuleViolationError
    ) -> JSONResponse:
        logger.info(f"Business rule '{exc.rule}' rejected {request.method} {request.url.path}")
        return _error_response(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    for router in (
        settings_router.router,
        tasks.router,
        inventory.router,
        expenses.router,
        media_logs.router,
    ):
        app.include_router(router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": "Welcome to lawncare API"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    async def api_root() -> dict[str, str]:
        """API v1 root endpoint."""
        return {
            "message": "lawncare API v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()
