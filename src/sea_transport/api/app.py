"""
sea_transport.api.app

FastAPI app factory for the sea transport service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sea_transport import __version__
from sea_transport.api.errors import setup_exception_handlers
from sea_transport.api.routers.dev_auth import router as dev_auth_router
from sea_transport.api.routers.health import router as health_router
from sea_transport.api.routers.ports import router as ports_router
from sea_transport.api.routers.statuses import router as statuses_router
from sea_transport.api.routers.transports import router as transports_router
from sea_transport.db.init_db import init_db
from sea_transport.db.session import create_engine, create_sessionmaker
from sea_transport.observability.logging import configure_logging, get_logger
from sea_transport.observability.middleware import RequestContextMiddleware
from sea_transport.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema changes go through `alembic upgrade head`.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Sea Transport API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    setup_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(ports_router)
    app.include_router(transports_router)
    app.include_router(statuses_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Routers obtain settings and sessions through `api.deps`, never through
# module globals, so several apps (e.g. one per test) can coexist.
