"""Search, hashtag, trending and analytics endpoints.

All reads here are public. The analytics views stay empty until an admin
calls POST /analytics/refresh.
"""

from typing import Any

from fastapi import APIRouter, Query
from pydantic import BaseModel

from api.dependencies import CallerDep, ContentStoreDep, PageDep
from api.models import FlagResponse, PageResponse
from models.entities import Hashtag, Post, SocialFeature, TrendingPost, TrendingUser, UserProfile

router = APIRouter(tags=["discovery"])


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


# ============================================================================
# Search
# ============================================================================


@router.get("/search/users", response_model=PageResponse[UserProfile])
async def search_users(
    store: ContentStoreDep, paging: PageDep, q: str = Query(description="Username fragment")
) -> PageResponse[UserProfile]:
    """Find users whose username contains ``q`` (case-insensitive)."""
    items = store.search_users(q, paging.page, paging.page_size)
    return PageResponse[UserProfile].build(items, paging.page, paging.page_size)


@router.get("/search/posts", response_model=PageResponse[Post])
async def search_posts(
    store: ContentStoreDep, paging: PageDep, q: str = Query(description="Caption fragment")
) -> PageResponse[Post]:
    """Find posts whose caption contains ``q`` (case-insensitive), newest first."""
    items = store.search_posts(q, paging.page, paging.page_size)
    return PageResponse[Post].build(items, paging.page, paging.page_size)


# ============================================================================
# Hashtags & trending
# ============================================================================


@router.get("/hashtags/top", response_model=list[Hashtag])
async def get_top_hashtags(store: ContentStoreDep) -> list[Hashtag]:
    """Get every hashtag, most liked first once three or more exist."""
    return store.get_top_hashtags()


@router.get("/trending/posts", response_model=list[TrendingPost])
async def get_trending_posts(store: ContentStoreDep) -> list[TrendingPost]:
    """Get the trending-posts summary from the last analytics refresh."""
    return store.get_trending_posts()


@router.get("/trending/users", response_model=list[TrendingUser])
async def get_top_trending_users(store: ContentStoreDep) -> list[TrendingUser]:
    """Get authors ranked by trending posts at the last analytics refresh."""
    return store.get_top_trending_users()


# ============================================================================
# Features & engagement
# ============================================================================


@router.get("/features/trending", response_model=list[SocialFeature] | None)
async def get_trending_features(store: ContentStoreDep) -> list[SocialFeature] | None:
    """Get features by engagement rate, or null before the first refresh."""
    return store.get_trending_features()


@router.get("/features/{feature_name}", response_model=SocialFeature | None)
async def get_feature_details(feature_name: str, store: ContentStoreDep) -> SocialFeature | None:
    return store.get_feature_details(feature_name)


@router.get("/features/{feature_name}/related", response_model=list[SocialFeature] | None)
async def get_related_features(feature_name: str, store: ContentStoreDep) -> list[SocialFeature] | None:
    """Get features sharing a post with ``feature_name``, or null if it is unknown."""
    return store.get_related_features(feature_name)


@router.get("/analytics/engagement", response_model=EngagementRateResponse)
async def get_engagement_rate(
    store: ContentStoreDep,
    content_id: str = Query(description="Post id or hashtag name"),
    content_type: str = Query(default="post", description="'post' or 'hashtag'"),
) -> EngagementRateResponse:
    rate = store.get_engagement_rate(content_id, content_type)
    return EngagementRateResponse(content_id=content_id, content_type=content_type, engagement_rate=rate)


@router.get("/analytics/viral", response_model=FlagResponse)
async def is_viral(
    store: ContentStoreDep,
    content_id: str = Query(description="Post id or hashtag name"),
    content_type: str = Query(default="post", description="'post' or 'hashtag'"),
) -> FlagResponse:
    """Check whether content reached the viral engagement threshold."""
    return FlagResponse(value=store.is_viral(content_id, content_type))


@router.post("/analytics/refresh")
async def refresh_analytics(store: ContentStoreDep, caller: CallerDep) -> dict[str, Any]:
    """Recompute trending, feature and engagement views (admin only).

    Returns:
        Counts of what the refresh produced.
    """
    return store.refresh_analytics(caller)
