"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from diet_tracker.api.ai import router as ai_router
from diet_tracker.api.auth import router as auth_router
from diet_tracker.api.dashboard import router as dashboard_router
from diet_tracker.api.logs import router as logs_router
from diet_tracker.api.products import router as products_router
from diet_tracker.api.profile import router as profile_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.config import parse_cors_origins
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import (
    AnalysisError,
    AuthenticationError,
    ConflictError,
    DietTrackerError,
    NotFoundError,
    ValidationError,
)

ERROR_STATUS_CODES: dict[type[DietTrackerError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    ConflictError: status.HTTP_409_CONFLICT,
    AnalysisError: status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DietTrackerError)
    async def handle_domain_error(
        request: Request, exc: DietTrackerError
    ) -> JSONResponse:
        status_code = error_status_code(exc)
        logger.warning(
            "Request failed: %s %s -> %s %s",
            request.method,
            request.url.path,
            status_code,
            exc,
        )
        return JSONResponse(status_code=status_code, content={"message": str(exc)})

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(products_router)
    app.include_router(logs_router)
    app.include_router(dashboard_router)
    app.include_router(ai_router)
    app.mount(
        container.settings.upload_url_prefix,
        StaticFiles(directory=container.settings.upload_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def error_status_code(exc: DietTrackerError) -> int:
    """Return the HTTP status for a service error."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
