"""Roster API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Controller, store client and session DB built on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Controller kept on app.state: one active session per process
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.error_handlers import register_error_handlers
from roster.api.routes import auth, health, navigation, users
from roster.config import get_settings
from roster.infrastructure.database import init_db
from roster.infrastructure.observability import setup_logging
from roster.infrastructure.session_store import SqlSessionStore
from roster.infrastructure.user_store_client import UserStoreClient
from roster.services.roster_controller import RosterController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url)
    store = UserStoreClient(
        settings.user_store_url, timeout_seconds=settings.user_store_timeout_seconds,
    )
    controller = RosterController(store, SqlSessionStore(manager))
    await controller.startup()
    app.state.controller = controller
    logger.info("Roster API started")
    yield
    logger.info("Roster API shutting down")
    await store.aclose()
    await manager.dispose()


app = FastAPI(title="Roster API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(navigation.router)
app.include_router(users.router)

register_error_handlers(app)
