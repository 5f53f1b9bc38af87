"""
Stripe Adapter Services - Main Application Entry Point

This module builds the FastAPI application that exposes Stripe transfers,
prices and orders as CRUD-style REST resources.
"""

from contextlib import asynccontextmanager
from typing import Any, Optional

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from api.middleware import log_api_entry
from api.routes import build_router
from core.dependencies import clear_settings, get_settings, init_settings
from core.errors import ServiceError
from core.logging import configure_logging
from core.metrics import init_metrics
from core.settings import Settings
from core.tracing import init_tracer

log = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None, stripe_client: Optional[Any] = None
) -> FastAPI:
    """Create the application.

    Args:
        settings: Settings to use. Loaded from the environment if omitted.
        stripe_client: Pre-built Stripe client handle shared by all services.
            A client is built from ``STRIPE_API_KEY`` if omitted.
    """
    settings = init_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.DISABLE_TRACING:
            init_tracer(settings.OTEL_SERVICE_NAME)
        yield
        clear_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Stripe transfers, prices and orders as CRUD-style services.",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings

    if settings.METRICS_ENABLED:
        init_metrics(app)

    app.middleware("http")(log_api_entry)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        log.error("api.unhandled_error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/health")
    async def health(settings: Settings = Depends(get_settings)):
        """Health check endpoint to verify API status."""
        return {
            "status": "ok",
            "app_name": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
        }

    options = settings.service_options(stripe_client=stripe_client)
    app.include_router(build_router(options))
    return app


def main():
    import uvicorn

    configure_logging()
    uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
