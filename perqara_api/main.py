"""Perqara Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PerqaraError → {"message"} / plain-text responses
    - CORS configured from settings (not hardcoded)
    - Database manager built on startup, kept on app.state, disposed on shutdown
    - users table created at startup when auto_create_tables is on

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Swagger UI served at /swagger, where the previous deployment exposed it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from perqara_api.api.error_handlers import register_error_handlers
from perqara_api.api.routes import health, users
from perqara_api.config import get_settings
from perqara_api.infrastructure.database import init_db
from perqara_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db_manager = db_manager
    if settings.auto_create_tables:
        await db_manager.create_all()
    logger.info("Perqara API started")
    yield
    logger.info("Perqara API shutting down")
    await db_manager.close()


app = FastAPI(
    title="Perqara API",
    description="This is a sample API for managing users.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/swagger",
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
