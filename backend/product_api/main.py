"""Products API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductApiError -> JSON envelopes
    - CORS origin comes from settings (FRONTEND_URL), never hardcoded
    - The DatabaseSessionManager is built in the lifespan and stored on app.state;
      request handlers reach it through dependencies only

Design Decisions:
    - create_app(settings) factory: tests build isolated apps with their own settings
    - Lifespan over @app.on_event
    - Middleware order (outermost first): access log, origin guard, CORS headers
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from product_api.api.cors import configure_cors
from product_api.api.error_handlers import register_error_handlers
from product_api.api.openapi_docs import OPENAPI_TAGS, mount_docs
from product_api.api.routes import health, products
from product_api.config import Settings, get_settings
from product_api.infrastructure.database import DatabaseSessionManager, connect_db
from product_api.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)

DOCS_URL = "/docs"


def build_lifespan(settings: Settings):
    """Startup/shutdown lifecycle bound to one Settings instance."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
        app.state.db_manager = manager
        await connect_db(manager, create_schema=settings.database_auto_create)
        logger.info("Products API started")
        yield
        logger.info("Products API shutting down")
        await manager.dispose()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description=settings.app_description,
        openapi_tags=OPENAPI_TAGS,
        docs_url=None,
        redoc_url=None,
        lifespan=build_lifespan(settings),
    )
    app.state.settings = settings

    configure_cors(
        app, settings.frontend_url,
        allow_missing_origin=settings.cors_allow_missing_origin,
    )
    app.middleware("http")(log_requests)

    register_error_handlers(app)

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(products.router, prefix=settings.api_prefix)

    mount_docs(app, DOCS_URL, settings.docs_site_title)
    return app


app = create_app()
