"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers:
the shared ContentStore, the caller identity asserted by the upstream
authentication proxy, and normalized pagination parameters.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from config import Settings, get_settings
from models.auth import RoleRegistry
from models.store import ContentStore

logger = logging.getLogger(__name__)

# One store per process, created by the app lifespan
_content_store: ContentStore | None = None


def get_content_store() -> ContentStore:
    """Get the shared ContentStore instance.

    Returns:
        The shared ContentStore instance.

    Raises:
        RuntimeError: If the store hasn't been initialized yet.

    Example:
        @router.get("/some-endpoint")
        async def my_handler(store: ContentStoreDep):
            return store.get_feed(0, 10)
    """
    if _content_store is None:
        raise RuntimeError("ContentStore not initialized. Call initialize_content_store() first.")
    return _content_store


def initialize_content_store(settings: Settings | None = None) -> ContentStore:
    """Create the shared ContentStore from settings.

    Called once when the FastAPI app starts up. Admin identities listed in
    the settings are seeded into the role registry.

    Args:
        settings: Settings to use; the cached process settings by default.

    Returns:
        The newly created ContentStore.
    """
    global _content_store

    settings = settings or get_settings()
    registry = RoleRegistry(
        anonymous_identity=settings.anonymous_identity,
        admin_identities=settings.admin_identity_list,
    )
    _content_store = ContentStore(
        auth=registry,
        trending_posts_limit=settings.trending_posts_limit,
        viral_engagement_threshold=settings.viral_engagement_threshold,
        default_effect_intensity=settings.default_effect_intensity,
    )
    logger.info(f"ContentStore initialized with {len(settings.admin_identity_list)} seeded admins")
    return _content_store


def shutdown_content_store() -> None:
    """Drop the shared ContentStore."""
    global _content_store
    _content_store = None


def get_caller(request: Request, settings: Annotated[Settings, Depends(get_settings)]) -> Optional[str]:
    """Return the caller identity from the configured header.

    A missing or blank header means an anonymous caller (None).
    """
    identity = request.headers.get(settings.identity_header)
    if identity is None or not identity.strip():
        return None
    return identity.strip()


class PageParams(BaseModel):
    """Zero-indexed pagination parameters.

    Attributes:
        page: Page number, starting at 0.
        page_size: Items per page.
    """

    page: int
    page_size: int


def get_page_params(
    settings: Annotated[Settings, Depends(get_settings)],
    page: int = Query(default=0, ge=0, description="Zero-indexed page number"),
    page_size: int | None = Query(default=None, ge=0, description="Items per page"),
) -> PageParams:
    """Normalize pagination query parameters.

    A missing page_size uses the configured default. One above the
    configured maximum is rejected like any other invalid query value, so
    a page always covers exactly ``[page * page_size, page * page_size + page_size)``.

    Raises:
        RequestValidationError: If page_size exceeds settings.max_page_size.
    """
    if page_size is None:
        page_size = settings.default_page_size
    if page_size > settings.max_page_size:
        logger.debug(f"Rejected page_size={page_size} (max {settings.max_page_size})")
        raise RequestValidationError(
            [
                {
                    "type": "less_than_equal",
                    "loc": ("query", "page_size"),
                    "msg": f"Input should be less than or equal to {settings.max_page_size}",
                    "input": page_size,
                    "ctx": {"le": settings.max_page_size},
                }
            ]
        )
    return PageParams(page=page, page_size=page_size)


# Type aliases for dependency injection
ContentStoreDep = Annotated[ContentStore, Depends(get_content_store)]
CallerDep = Annotated[Optional[str], Depends(get_caller)]
PageDep = Annotated[PageParams, Depends(get_page_params)]
