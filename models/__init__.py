"""Content Store data models package.

This package contains the entity records, the tables that hold them, the
authorization boundary and the ContentStore that ties them together.
"""

from models.auth import AuthorizationProvider, RoleRegistry
from models.base_table import StoreTable
from models.entities import (
    Comment,
    Hashtag,
    MediaType,
    Post,
    SocialFeature,
    TrendingPost,
    TrendingUser,
    UserProfile,
    UserRole,
    VisualEffect,
)
from models.errors import ConflictError, NotFoundError, StoreError, UnauthorizedError
from models.store import ContentStore

__all__ = [
    "AuthorizationProvider",
    "RoleRegistry",
    "StoreTable",
    "Comment",
    "Hashtag",
    "MediaType",
    "Post",
    "SocialFeature",
    "TrendingPost",
    "TrendingUser",
    "UserProfile",
    "UserRole",
    "VisualEffect",
    "StoreError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "ContentStore",
]
