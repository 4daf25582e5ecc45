"""Main entry point for the Content Store FastAPI application.

This module creates and configures the FastAPI app instance that serves the
REST API over the in-memory social graph and content store.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_content_store, shutdown_content_store
from api.exceptions import (
    conflict_handler,
    generic_exception_handler,
    not_found_handler,
    runtime_error_handler,
    store_error_handler,
    unauthorized_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.models import HealthResponse
from api.routes import admin as admin_routes
from api.routes import comments as comments_routes
from api.routes import discovery as discovery_routes
from api.routes import effects as effects_routes
from api.routes import graph as graph_routes
from api.routes import posts as posts_routes
from api.routes import profiles as profiles_routes
from config import get_settings
from models.errors import ConflictError, NotFoundError, StoreError, UnauthorizedError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared ContentStore at startup and drop it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    logger.info(f"Starting {settings.app_name} {settings.app_version}")
    initialize_content_store(settings)

    yield  # App runs and handles requests here

    shutdown_content_store()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.app_name,
    description="Social graph and content store: profiles, posts, comments, likes, follows and search",
    version=settings.app_version,
    lifespan=lifespan,
)

# Specific exceptions before general ones
app.add_exception_handler(UnauthorizedError, unauthorized_handler)
app.add_exception_handler(NotFoundError, not_found_handler)
app.add_exception_handler(ConflictError, conflict_handler)
app.add_exception_handler(StoreError, store_error_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(profiles_routes.router)
app.include_router(posts_routes.router)
app.include_router(comments_routes.router)
app.include_router(graph_routes.router)
app.include_router(discovery_routes.router)
app.include_router(effects_routes.router)
app.include_router(admin_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": f"Welcome to the {settings.app_name} API",
        "version": settings.app_version,
        "docs_url": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for monitoring."""
    return HealthResponse(status="healthy", version=settings.app_version)
