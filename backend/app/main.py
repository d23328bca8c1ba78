"""Academia API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AcademiaError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager created on startup, disposed on shutdown, stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Interactive docs served by FastAPI at /docs and /openapi.json
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import create_db_manager
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import health, members, plans, exercises, statistics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = create_db_manager(settings)
    if settings.database_create_tables:
        await app.state.db_manager.create_all()
    logger.info(f"{settings.app_title} started")
    yield
    logger.info(f"{settings.app_title} shutting down")
    await app.state.db_manager.close()
    app.state.db_manager = None


settings = get_settings()
app = FastAPI(
    title=settings.app_title, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(members.router)
app.include_router(plans.router)
app.include_router(exercises.router)
app.include_router(statistics.router)

register_error_handlers(app)
