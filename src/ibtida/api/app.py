"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ibtida.api.calendar_days import router as calendar_router
from ibtida.api.daily_logs import router as daily_logs_router
from ibtida.api.journey import router as journey_router
from ibtida.api.prayers import router as prayers_router
from ibtida.api.profiles import router as profiles_router
from ibtida.app_logging import configure_logging
from ibtida.containers import AppContainer
from ibtida.services.errors import (
    PersistenceError,
    RuleViolationError,
    UserNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Ibtida")
    app.state.container = container

    app.include_router(profiles_router)
    app.include_router(prayers_router)
    app.include_router(journey_router)
    app.include_router(daily_logs_router)
    app.include_router(calendar_router)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc), "retryable": True},
        )

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(
        request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": f"Unknown user {exc}"},
        )

    @app.exception_handler(RuleViolationError)
    async def rule_violation_handler(
        request: Request, exc: RuleViolationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
