"""Client response models for the Content Store API client.

Entity models come straight from the store so client and server agree on
field names; envelopes are re-exported from the API layer.
"""

from pydantic import BaseModel

from api.models import (
    ActionResponse,
    ErrorResponse,
    FlagResponse,
    HealthResponse,
    PageResponse,
    StoreStateResponse,
    ValidationReportResponse,
)
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

__all__ = [
    # Re-exported from api.models
    "ActionResponse",
    "ErrorResponse",
    "FlagResponse",
    "HealthResponse",
    "PageResponse",
    "StoreStateResponse",
    "ValidationReportResponse",
    # Re-exported from models.entities
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
    # Client-specific models
    "EngagementRateResponse",
    "RefreshAnalyticsResponse",
    "RoleResponse",
]


class EngagementRateResponse(BaseModel):
    """Engagement rate of one piece of content.

    Attributes:
        content_id: Post id or hashtag name.
        content_type: "post" or "hashtag".
        engagement_rate: Rate at the last analytics refresh (0.0 if unknown).
    """

    content_id: str
    content_type: str
    engagement_rate: float


class RefreshAnalyticsResponse(BaseModel):
    """Counts produced by an analytics refresh."""

    trending_posts: int
    trending_users: int
    features: int
    engagement_rates: int


class RoleResponse(BaseModel):
    role: UserRole
