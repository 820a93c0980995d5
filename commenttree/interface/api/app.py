"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from commenttree.interface.api.routes import comments, health, search
from commenttree.util.di.container import create_container, setup_di
from commenttree.util.observability import instrument_fastapi


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed ids and bodies as 400 instead of FastAPI's 422."""
    logfire.warn(
        "Request validation failed", path=request.url.path, errors=str(exc.errors())
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": _error_summary(exc)},
    )


def _error_summary(exc: RequestValidationError) -> list[dict]:
    """Reduce validation errors to their location and message."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does it in production and tests/conftest.py in tests.

    Args:
        container: DI container to use (defaults to the production container)
    """
    app_instance = FastAPI(
        title="Comment Tree API",
        description="Threaded comments stored as materialized paths",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_exception_handler(
        RequestValidationError, _validation_error_handler
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(search.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
