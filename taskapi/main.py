"""Task API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskApiError → failure envelopes
    - Database connection bootstrapped on startup via lifespan; a failed
      connection is logged and the app keeps serving (store routes answer 503)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from taskapi.api.error_handlers import register_error_handlers
from taskapi.api.routes import health, tasks, users
from taskapi.config import get_settings
from taskapi.infrastructure import database
from taskapi.infrastructure.observability import (
    register_request_logging, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = await database.connect_to_database(
        settings.database_url,
        create_schema=settings.create_schema,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Server listening on port {settings.port}")
    yield
    logger.info("Task API shutting down")
    await manager.dispose()


app = FastAPI(title="Task API", version="1.0.0", lifespan=lifespan)

register_request_logging(app)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(tasks.router)
