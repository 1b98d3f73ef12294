"""SWAPI Favorites API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly
    - Global error handlers map FavoritesError → structured JSON responses
    - CORS configured from settings
    - Database manager and catalog client built once in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event
    - SQLite databases get their tables created at startup; server databases use alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from favorites_api.api.error_handlers import register_error_handlers
from favorites_api.api.routes import health, lists
from favorites_api.config import get_settings
from favorites_api.infrastructure.catalog_client import SwapiCatalogClient
from favorites_api.infrastructure.database import DatabaseSessionManager
from favorites_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_url.startswith("sqlite"):
        await db_manager.create_all()
    catalog_client = SwapiCatalogClient(
        settings.catalog_base_url,
        timeout_seconds=settings.catalog_timeout_seconds,
    )

    app.state.db_manager = db_manager
    app.state.catalog_client = catalog_client
    logger.info("SWAPI Favorites API started")
    yield
    logger.info("SWAPI Favorites API shutting down")
    await catalog_client.aclose()
    await db_manager.dispose()
    del app.state.catalog_client
    del app.state.db_manager


app = FastAPI(
    title="SWAPI Favorites API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(lists.router)

register_error_handlers(app)
