"""Discovery sub-client for the Content Store API.

This module provides DiscoveryClient and AsyncDiscoveryClient for search,
hashtag, trending, feature and engagement analytics endpoints.

The trending, feature and engagement views are only populated after an
admin calls refresh_analytics().

This is an internal module. Import from `client` instead.
"""

from typing import Literal

from client._base import AsyncBaseClient, BaseClient, _page_params, _segment
from client.models import (
    EngagementRateResponse,
    FlagResponse,
    Hashtag,
    PageResponse,
    Post,
    RefreshAnalyticsResponse,
    SocialFeature,
    TrendingPost,
    TrendingUser,
    UserProfile,
)

ContentType = Literal["post", "hashtag"]


def _content_params(content_id: str | int, content_type: ContentType) -> dict:
    return {"content_id": str(content_id), "content_type": content_type}


class DiscoveryClient(BaseClient):
    """Synchronous client for discovery endpoints.

    Example:
        with ContentStoreClient() as client:
            users = client.discovery.search_users("ali")
            tags = client.discovery.top_hashtags()
            rate = client.discovery.engagement_rate(post_id)
    """

    def search_users(self, query: str, page: int = 0, page_size: int | None = None) -> PageResponse[UserProfile]:
        """Find users whose username contains ``query`` (case-insensitive)."""
        data = self._get("/search/users", params={"q": query, **_page_params(page, page_size)})
        return PageResponse[UserProfile](**data)

    def search_posts(self, query: str, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        """Find posts whose caption contains ``query``, newest first."""
        data = self._get("/search/posts", params={"q": query, **_page_params(page, page_size)})
        return PageResponse[Post](**data)

    def top_hashtags(self) -> list[Hashtag]:
        data = self._get("/hashtags/top")
        return [Hashtag(**item) for item in data]

    def trending_posts(self) -> list[TrendingPost]:
        data = self._get("/trending/posts")
        return [TrendingPost(**item) for item in data]

    def trending_users(self) -> list[TrendingUser]:
        data = self._get("/trending/users")
        return [TrendingUser(**item) for item in data]

    def trending_features(self) -> list[SocialFeature] | None:
        """Get trending features, or None before the first analytics refresh."""
        data = self._get("/features/trending")
        return [SocialFeature(**item) for item in data] if data is not None else None

    def feature(self, name: str) -> SocialFeature | None:
        data = self._get(f"/features/{_segment(name)}")
        return SocialFeature(**data) if data else None

    def related_features(self, name: str) -> list[SocialFeature] | None:
        data = self._get(f"/features/{_segment(name)}/related")
        return [SocialFeature(**item) for item in data] if data is not None else None

    def engagement_rate(self, content_id: str | int, content_type: ContentType = "post") -> float:
        """Get the engagement rate computed at the last refresh (0.0 if unknown)."""
        data = self._get("/analytics/engagement", params=_content_params(content_id, content_type))
        return EngagementRateResponse(**data).engagement_rate

    def is_viral(self, content_id: str | int, content_type: ContentType = "post") -> bool:
        data = self._get("/analytics/viral", params=_content_params(content_id, content_type))
        return FlagResponse(**data).value

    def refresh_analytics(self) -> RefreshAnalyticsResponse:
        """Recompute every analytics view.

        Raises:
            ForbiddenError: If the caller is not an admin.
        """
        data = self._post("/analytics/refresh")
        return RefreshAnalyticsResponse(**data)


class AsyncDiscoveryClient(AsyncBaseClient):
    """Asynchronous client for discovery endpoints."""

    async def search_users(
        self, query: str, page: int = 0, page_size: int | None = None
    ) -> PageResponse[UserProfile]:
        data = await self._get("/search/users", params={"q": query, **_page_params(page, page_size)})
        return PageResponse[UserProfile](**data)

    async def search_posts(self, query: str, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        data = await self._get("/search/posts", params={"q": query, **_page_params(page, page_size)})
        return PageResponse[Post](**data)

    async def top_hashtags(self) -> list[Hashtag]:
        data = await self._get("/hashtags/top")
        return [Hashtag(**item) for item in data]

    async def trending_posts(self) -> list[TrendingPost]:
        data = await self._get("/trending/posts")
        return [TrendingPost(**item) for item in data]

    async def trending_users(self) -> list[TrendingUser]:
        data = await self._get("/trending/users")
        return [TrendingUser(**item) for item in data]

    async def trending_features(self) -> list[SocialFeature] | None:
        data = await self._get("/features/trending")
        return [SocialFeature(**item) for item in data] if data is not None else None

    async def feature(self, name: str) -> SocialFeature | None:
        data = await self._get(f"/features/{_segment(name)}")
        return SocialFeature(**data) if data else None

    async def related_features(self, name: str) -> list[SocialFeature] | None:
        data = await self._get(f"/features/{_segment(name)}/related")
        return [SocialFeature(**item) for item in data] if data is not None else None

    async def engagement_rate(self, content_id: str | int, content_type: ContentType = "post") -> float:
        data = await self._get("/analytics/engagement", params=_content_params(content_id, content_type))
        return EngagementRateResponse(**data).engagement_rate

    async def is_viral(self, content_id: str | int, content_type: ContentType = "post") -> bool:
        data = await self._get("/analytics/viral", params=_content_params(content_id, content_type))
        return FlagResponse(**data).value

    async def refresh_analytics(self) -> RefreshAnalyticsResponse:
        data = await self._post("/analytics/refresh")
        return RefreshAnalyticsResponse(**data)
