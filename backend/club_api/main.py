"""Club API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ClubError -> standard envelope (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from club_api.api.error_handlers import register_error_handlers
from club_api.api.routes import announcements, events, health, join_applications, tasks, users
from club_api.config import get_settings
from club_api.infrastructure.database import close_db, init_db
from club_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

API_NAME = "Club Management API"
API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"{API_NAME} started ({settings.environment})")
    yield
    await close_db()
    logger.info(f"{API_NAME} shutting down")


app = FastAPI(title=API_NAME, version=API_VERSION, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(join_applications.router)
app.include_router(events.router)
app.include_router(users.router)
app.include_router(tasks.router)
app.include_router(announcements.router)

register_error_handlers(app)


@app.get("/", tags=["root"])
async def root():
    """API name, version and endpoint map."""
    return {
        "message": API_NAME,
        "version": API_VERSION,
        "endpoints": {
            "health": "/health",
            "join": "/api/join",
            "events": "/api/events",
            "users": "/api/users",
            "tasks": "/api/tasks",
            "announcements": "/api/announcements",
        },
    }
