"""Client Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistryError → client response envelope
    - CORS configured from settings (not hardcoded)
    - Logging configured (and demo data optionally seeded) in the lifespan

Run with::

    uvicorn client_registry.main:app --app-dir backend
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from client_registry.api.dependencies import get_client_service, get_registry
from client_registry.api.error_handlers import register_error_handlers
from client_registry.api.routes import clients, health
from client_registry.config import get_settings
from client_registry.infrastructure.observability import setup_logging
from client_registry.services.seed_clients import seed_demo_clients

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.seed_demo_clients:
        seed_demo_clients(get_client_service(get_registry()))
    logger.info("Client Registry API started")
    yield
    logger.info("Client Registry API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.api_title, version=settings.api_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(clients.router)

register_error_handlers(app)
