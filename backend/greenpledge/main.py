"""GreenPledge API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GreenPledgeError → structured JSON responses
    - CORS configured from settings (not hardcoded); X-Access-Token exposed to browsers
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: GreenPledgeError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greenpledge.api.error_handlers import register_error_handlers
from greenpledge.api.routes import auth, health, pledges, projects, seed
from greenpledge.core.domain_types import ACCESS_TOKEN_HEADER
from greenpledge.config import get_settings
from greenpledge.infrastructure import database
from greenpledge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("GreenPledge API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("GreenPledge API shutting down")


app = FastAPI(
    title="GreenPledge API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[ACCESS_TOKEN_HEADER],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(pledges.router)
app.include_router(auth.router)
app.include_router(seed.router)

register_error_handlers(app)
